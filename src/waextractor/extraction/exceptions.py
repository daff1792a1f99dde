"""Exceptions for the member-extraction pipeline.

Per-participant and per-group failures are absorbed into the result records;
these exceptions only signal programming errors such as building a record
that breaks its own invariants.
"""

from waextractor.exceptions import WaExtractorError


class ExtractionError(WaExtractorError):
    """Base exception for extraction pipeline errors."""


class InvalidGroupResultError(ExtractionError, ValueError):
    """Raised when a failed group result carries extracted members."""

    def __init__(self, group_id: str) -> None:
        self.group_id = group_id
        super().__init__(f"Group result for '{group_id}' has an error but non-empty members")
