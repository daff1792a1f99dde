"""Configuration for waextractor."""

from waextractor.config.settings import ExtractorSettings, load_settings

__all__ = ["ExtractorSettings", "load_settings"]
