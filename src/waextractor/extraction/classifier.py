"""Decide whether a participant is a phone number or a hidden identifier.

This is the only place that tells the two address spaces apart, so every
export format agrees on it.
"""

from __future__ import annotations

from waextractor.constants import PHONE_SUFFIX, EntryType
from waextractor.extraction.models import ExtractionEntry, ResolvedParticipant


def is_phone_id(participant_id: str) -> bool:
    # a bare tag has no number to strip
    return PHONE_SUFFIX in participant_id and participant_id != PHONE_SUFFIX


def classify_participant(
    resolved: ResolvedParticipant,
    group_id: str,
    group_name: str,
) -> ExtractionEntry:
    """Build the export entry for one resolved participant of one group."""
    participant_id = resolved.id
    if is_phone_id(participant_id):
        number = participant_id.replace(PHONE_SUFFIX, "", 1)
        return ExtractionEntry(
            group_id=group_id,
            group_name=group_name,
            name=resolved.display_name or number,
            number=number,
            id=participant_id,
            type=EntryType.NUMBER,
        )
    return ExtractionEntry(
        group_id=group_id,
        group_name=group_name,
        name=resolved.display_name or participant_id,
        id=participant_id,
        type=EntryType.HIDDEN,
    )


__all__ = ["classify_participant", "is_phone_id"]
