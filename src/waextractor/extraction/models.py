"""Record types produced by the extraction pipeline.

All records are request-scoped and enforce their invariants when built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from waextractor.constants import PHONE_SUFFIX, EntryType
from waextractor.extraction.exceptions import InvalidGroupResultError


@dataclass(frozen=True, slots=True)
class ResolvedParticipant:
    """A canonical id paired with its best-effort display name.

    ``display_name`` is ``None`` when the lookup failed or found nothing; the
    id stays usable either way.
    """

    id: str
    display_name: str | None = None
    resolution_ok: bool = False


class ExtractionEntry(BaseModel):
    """One extracted participant of one group, in flat export form."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    group_id: str = Field(alias="groupId")
    group_name: str = Field(alias="groupName")
    name: str
    number: str | None = None
    id: str
    type: EntryType

    @model_validator(mode="after")
    def check_number_matches_type(self) -> ExtractionEntry:
        if self.type is EntryType.NUMBER:
            if not self.number:
                msg = f"Entry {self.id!r} of type 'number' requires a number"
                raise ValueError(msg)
            if self.number != self.id.replace(PHONE_SUFFIX, "", 1):
                msg = f"Number {self.number!r} does not match id {self.id!r}"
                raise ValueError(msg)
        elif self.number is not None:
            msg = f"Hidden entry {self.id!r} must not carry a number"
            raise ValueError(msg)
        return self

    def to_record(self) -> dict[str, Any]:
        """Return the flat keyed form; ``number`` is omitted for hidden entries."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True, slots=True)
class NumberRow:
    number: str
    name: str


@dataclass(frozen=True, slots=True)
class HiddenRow:
    id: str
    name: str


@dataclass(slots=True)
class GroupResult:
    """Outcome of extracting one requested group."""

    group_id: str
    group_name: str
    numbers: list[NumberRow] = field(default_factory=list)
    hidden_ids: list[HiddenRow] = field(default_factory=list)
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and (self.numbers or self.hidden_ids):
            raise InvalidGroupResultError(self.group_id)

    @classmethod
    def failed(cls, group_id: str, error: str) -> GroupResult:
        return cls(group_id=group_id, group_name=group_id, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class CombinedView:
    """Every entry across groups; the per-type views are derived from ``all``."""

    all: list[ExtractionEntry] = field(default_factory=list)

    @property
    def numbers(self) -> list[ExtractionEntry]:
        return [entry for entry in self.all if entry.type is EntryType.NUMBER]

    @property
    def hidden(self) -> list[ExtractionEntry]:
        return [entry for entry in self.all if entry.type is EntryType.HIDDEN]

    def to_records(self) -> list[dict[str, Any]]:
        return [entry.to_record() for entry in self.all]


@dataclass(slots=True)
class ExtractionResult:
    per_group_results: list[GroupResult] = field(default_factory=list)
    combined: CombinedView = field(default_factory=CombinedView)


__all__ = [
    "CombinedView",
    "ExtractionEntry",
    "ExtractionResult",
    "GroupResult",
    "HiddenRow",
    "NumberRow",
    "ResolvedParticipant",
]
