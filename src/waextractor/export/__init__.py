"""Export formatting and file writing."""

from waextractor.export.exceptions import (
    ExportError,
    ExportWriteError,
    InvalidFormatError,
    InvalidPayloadError,
)
from waextractor.export.formatter import format_payload, parse_payload
from waextractor.export.writer import ExportArtifact, ExportWriter, make_export_filename

__all__ = [
    "ExportArtifact",
    "ExportError",
    "ExportWriteError",
    "ExportWriter",
    "InvalidFormatError",
    "InvalidPayloadError",
    "format_payload",
    "make_export_filename",
    "parse_payload",
]
