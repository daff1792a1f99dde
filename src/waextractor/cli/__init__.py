"""Command-line interface for waextractor."""

from waextractor.cli.main import app

__all__ = ["app"]
