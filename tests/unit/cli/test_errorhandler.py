from pathlib import Path
from unittest.mock import patch

import pytest
import typer

from waextractor.cli.errorhandler import handle_cli_errors
from waextractor.constants import SessionState
from waextractor.export.exceptions import ExportWriteError, InvalidFormatError, InvalidPayloadError
from waextractor.session.exceptions import SessionNotReadyError, SnapshotLoadError


def _printed(mock_print) -> list[str]:
    return [str(arg) for call in mock_print.call_args_list for arg in call[0]]


@pytest.mark.parametrize(
    ("error", "label"),
    [
        (SnapshotLoadError(Path("s.json"), "boom"), "Snapshot Error"),
        (SessionNotReadyError(SessionState.DISCONNECTED), "Not Authenticated"),
        (InvalidPayloadError("Payload must be non-empty array"), "Invalid Export Request"),
        (InvalidFormatError("xml", ["csv"]), "Invalid Export Request"),
        (ExportWriteError("disk full", Path("out.csv")), "Export Failed"),
        (RuntimeError("surprise"), "unexpected error"),
    ],
)
def test_errors_exit_with_code_one(error, label):
    with patch("waextractor.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise error

    assert excinfo.value.exit_code == 1
    assert any(label in arg for arg in _printed(mock_print))


def test_debug_mode_re_raises_known_errors():
    with pytest.raises(InvalidPayloadError):
        with handle_cli_errors(debug=True):
            msg = "No payload"
            raise InvalidPayloadError(msg)


def test_typer_exit_passes_through():
    with pytest.raises(typer.Exit) as excinfo:
        with handle_cli_errors(debug=False):
            raise typer.Exit(3)
    assert excinfo.value.exit_code == 3
