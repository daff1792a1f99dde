"""Centralized exceptions for the waextractor application."""


class WaExtractorError(Exception):
    """Base exception for all waextractor errors."""
