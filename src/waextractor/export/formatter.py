"""Render flat participant records as CSV, XLSX or JSON.

CSV always uses the ``EXPORT_COLUMNS`` order. XLSX columns follow the keys
of the records in order of first appearance, so their order is not fixed.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

import polars as pl
from xlsxwriter.exceptions import XlsxWriterException

from waextractor.config.settings import DEFAULT_SHEET_NAME
from waextractor.constants import EXPORT_COLUMNS, ExportFormat
from waextractor.export.exceptions import ExportWriteError, InvalidFormatError, InvalidPayloadError
from waextractor.extraction.models import ExtractionEntry

logger = logging.getLogger(__name__)

Record = dict[str, Any]


def parse_payload(raw: str | bytes | Sequence[Any] | None) -> list[Record]:
    """Decode a payload that may arrive as a JSON string and validate it."""
    if raw is None or raw == "" or raw == b"":
        msg = "No payload"
        raise InvalidPayloadError(msg)
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            msg = "Invalid payload JSON"
            raise InvalidPayloadError(msg) from e
    return validate_payload(raw)


def validate_payload(payload: Any) -> list[Record]:
    """Return the payload as a list of plain dict records.

    The payload must be a non-empty array of mappings or ``ExtractionEntry``
    objects.
    """
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
        msg = "Payload must be non-empty array"
        raise InvalidPayloadError(msg)
    if not payload:
        msg = "Payload must be non-empty array"
        raise InvalidPayloadError(msg)

    records: list[Record] = []
    for index, item in enumerate(payload):
        if isinstance(item, ExtractionEntry):
            records.append(item.to_record())
        elif isinstance(item, Mapping):
            records.append(dict(item))
        else:
            msg = f"Payload item {index} is not a record: {type(item).__name__}"
            raise InvalidPayloadError(msg)
    return records


def resolve_format(kind: str | ExportFormat | None) -> ExportFormat:
    if not kind:
        return ExportFormat.CSV
    if isinstance(kind, ExportFormat):
        return kind
    try:
        return ExportFormat(str(kind).strip().lower())
    except ValueError as e:
        raise InvalidFormatError(str(kind), (f.value for f in ExportFormat)) from e


def render_csv(records: list[Record]) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=list(EXPORT_COLUMNS),
        restval="",
        extrasaction="ignore",
        lineterminator="\n",
    )
    writer.writeheader()
    writer.writerows(records)
    return buffer.getvalue().encode("utf-8")


def render_xlsx(records: list[Record], *, sheet_name: str = DEFAULT_SHEET_NAME) -> bytes:
    frame = pl.DataFrame(records, infer_schema_length=None, strict=False)
    buffer = io.BytesIO()
    frame.write_excel(workbook=buffer, worksheet=sheet_name)
    return buffer.getvalue()


def render_json(records: list[Record]) -> bytes:
    return json.dumps(records, indent=2, ensure_ascii=False).encode("utf-8")


_RENDERERS = {
    ExportFormat.CSV: render_csv,
    ExportFormat.JSON: render_json,
}


def format_payload(
    payload: Any,
    kind: str | ExportFormat | None = None,
    *,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> bytes:
    """Validate ``payload`` and render it in the requested format.

    Raises:
        InvalidPayloadError: payload is empty or not an array of records
        InvalidFormatError: ``kind`` is not csv, xlsx or json
        ExportWriteError: the records could not be serialized

    """
    records = validate_payload(payload)
    export_format = resolve_format(kind)
    try:
        if export_format is ExportFormat.XLSX:
            return render_xlsx(records, sheet_name=sheet_name)
        return _RENDERERS[export_format](records)
    except (TypeError, ValueError, pl.exceptions.PolarsError, XlsxWriterException) as e:
        logger.error("Export serialization failed: %s", e)
        raise ExportWriteError(e) from e


__all__ = [
    "format_payload",
    "parse_payload",
    "render_csv",
    "render_json",
    "render_xlsx",
    "resolve_format",
    "validate_payload",
]
