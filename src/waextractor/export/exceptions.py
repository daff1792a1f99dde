"""Exceptions raised while validating, rendering or writing exports."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from waextractor.exceptions import WaExtractorError


class ExportError(WaExtractorError):
    """Base exception for export errors."""


class InvalidPayloadError(ExportError, ValueError):
    """Raised when the export payload is missing, malformed or empty."""


class InvalidFormatError(ExportError, ValueError):
    """Raised when the requested export format is not supported."""

    def __init__(self, kind: str, supported: Iterable[str]) -> None:
        self.kind = kind
        self.supported = list(supported)
        super().__init__(
            f"Unsupported format: '{kind}'. Supported: {', '.join(self.supported)}"
        )


class ExportWriteError(ExportError):
    """Raised when an export cannot be serialized or stored."""

    def __init__(self, reason: str | Exception, path: Path | None = None) -> None:
        self.reason = reason
        self.path = path
        target = f" to '{path}'" if path is not None else ""
        super().__init__(f"Export failed{target}: {reason}")
