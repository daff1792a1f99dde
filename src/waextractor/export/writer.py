"""Write rendered exports to the export directory without leaving partial files."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from waextractor.config.settings import ExtractorSettings
from waextractor.constants import ExportFormat
from waextractor.export.exceptions import ExportWriteError
from waextractor.export.formatter import format_payload, resolve_format, validate_payload

logger = logging.getLogger(__name__)

MEDIA_TYPES: dict[ExportFormat, str] = {
    ExportFormat.CSV: "text/csv",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.JSON: "application/json",
}


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    """A written export, ready to be handed to a download."""

    path: Path
    format: ExportFormat

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self.format]


def make_export_filename(prefix: str, export_format: ExportFormat, today: date | None = None) -> str:
    day = today or datetime.now(UTC).date()
    return f"{prefix}-{day.isoformat()}.{export_format.value}"


class ExportWriter:
    """Validate, render and atomically store export files."""

    def __init__(self, settings: ExtractorSettings | None = None) -> None:
        self.settings = settings or ExtractorSettings()

    def write(
        self,
        payload: Any,
        kind: str | ExportFormat | None = None,
        *,
        today: date | None = None,
    ) -> ExportArtifact:
        records = validate_payload(payload)
        export_format = resolve_format(kind or self.settings.default_format)
        content = format_payload(records, export_format, sheet_name=self.settings.xlsx_sheet_name)

        target = self.settings.export_dir / make_export_filename(
            self.settings.export_prefix, export_format, today
        )
        self._store(target, content)
        logger.info("Wrote %d records to %s", len(records), target)
        return ExportArtifact(path=target, format=export_format)

    def _store(self, target: Path, content: bytes) -> None:
        tmp_name: str | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=target.parent, prefix=f".{target.name}.", suffix=".part", delete=False
            ) as handle:
                tmp_name = handle.name
                handle.write(content)
            os.replace(tmp_name, target)
        except OSError as e:
            logger.error("Export error: %s", e)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise ExportWriteError(e, target) from e


__all__ = ["ExportArtifact", "ExportWriter", "make_export_filename"]
