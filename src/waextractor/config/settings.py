"""Runtime settings for extraction and export.

Every field can be overridden from the environment with the ``WAEXTRACTOR_``
prefix (e.g. ``WAEXTRACTOR_EXPORT_DIR=/tmp/out``) or from a ``.env`` file in
the working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from waextractor.constants import ExportFormat

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_DIR = Path("exports")
DEFAULT_EXPORT_PREFIX = "whatsapp-export"
DEFAULT_SHEET_NAME = "Export"
DEFAULT_DEBUG_CHAT_SAMPLE = 200
INVALID_SHEET_CHARS = "[]:*?/\\"


class ExtractorSettings(BaseSettings):
    """Settings shared by the extraction pipeline, the exporter and the CLI."""

    export_dir: Path = Field(
        default=DEFAULT_EXPORT_DIR,
        description="Directory where export files are written",
    )
    export_prefix: str = Field(
        default=DEFAULT_EXPORT_PREFIX,
        min_length=1,
        description="Filename prefix for export files (<prefix>-<date>.<ext>)",
    )
    default_format: ExportFormat = Field(
        default=ExportFormat.CSV,
        description="Export format used when none is requested",
    )
    max_concurrent_lookups: int | None = Field(
        default=None,
        description="Cap on concurrent contact lookups per group (unbounded when unset)",
    )
    xlsx_sheet_name: str = Field(
        default=DEFAULT_SHEET_NAME,
        min_length=1,
        max_length=31,
        description="Worksheet name used for spreadsheet exports",
    )
    debug_chat_sample: int = Field(
        default=DEFAULT_DEBUG_CHAT_SAMPLE,
        ge=1,
        description="Number of chats listed by the diagnostic chat dump",
    )

    model_config = SettingsConfigDict(
        env_prefix="WAEXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("max_concurrent_lookups")
    @classmethod
    def validate_lookup_cap(cls, v: int | None) -> int | None:
        """Reject non-positive lookup caps."""
        if v is not None and v < 1:
            msg = f"max_concurrent_lookups must be >= 1 when set, got {v}"
            raise ValueError(msg)
        return v

    @field_validator("xlsx_sheet_name")
    @classmethod
    def validate_sheet_name(cls, v: str) -> str:
        """Reject characters Excel does not allow in worksheet names."""
        invalid = sorted(set(v) & set(INVALID_SHEET_CHARS))
        if invalid:
            msg = f"xlsx_sheet_name contains invalid characters: {''.join(invalid)}"
            raise ValueError(msg)
        return v


def load_settings(**overrides: Any) -> ExtractorSettings:
    """Load settings from the environment, applying explicit overrides on top."""
    values = {key: value for key, value in overrides.items() if value is not None}
    settings = ExtractorSettings(**values)
    logger.debug("Loaded settings: %s", settings.model_dump())
    return settings


__all__ = ["ExtractorSettings", "load_settings"]
