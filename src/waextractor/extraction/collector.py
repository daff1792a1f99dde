"""Collect the canonical ids of a group's participants.

The participant container comes from the messaging client and its shape is
not ours to choose. ``inspect_shape`` names the shape once; ``collect_participants`` then
runs exactly one branch for it.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from waextractor.constants import ParticipantShape
from waextractor.extraction.normalizer import normalize_participant

logger = logging.getLogger(__name__)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _metadata_participants(group_metadata: Any) -> Any:
    if group_metadata is None:
        return None
    if isinstance(group_metadata, dict):
        return group_metadata.get("participants")
    return getattr(group_metadata, "participants", None)


def inspect_shape(participants: Any, group_metadata: Any = None) -> ParticipantShape:
    """Classify a participant container.

    A plain ``dict`` is a plain mapping whose values are participants. Any
    other object with a callable ``keys`` is a keyed collection, indexed by
    participant id.
    """
    if _is_sequence(participants):
        return ParticipantShape.SEQUENCE
    if participants is not None and not isinstance(participants, (str, bytes, bytearray)):
        if isinstance(participants, dict):
            return ParticipantShape.PLAIN_MAPPING
        if callable(getattr(participants, "keys", None)):
            return ParticipantShape.KEYED_COLLECTION
    if _is_sequence(_metadata_participants(group_metadata)):
        return ParticipantShape.NESTED_METADATA
    return ParticipantShape.UNRECOGNIZED


def _normalize_all(items: Iterable[Any]) -> list[Any]:
    return [normalize_participant(item) for item in items]


def _keyed_candidates(collection: Any) -> list[Any]:
    keys = list(collection.keys())
    if keys:
        return keys
    values = getattr(collection, "values", None)
    if not callable(values):
        return []
    return _normalize_all(values())


def collect_participants(participants: Any, group_metadata: Any = None) -> set[Hashable]:
    """Return the deduplicated ids of a group's participants.

    Falsy and unextractable entries are dropped. An unrecognized container
    yields an empty set.
    """
    shape = inspect_shape(participants, group_metadata)

    if shape is ParticipantShape.SEQUENCE:
        candidates = _normalize_all(participants)
    elif shape is ParticipantShape.KEYED_COLLECTION:
        candidates = _keyed_candidates(participants)
    elif shape is ParticipantShape.PLAIN_MAPPING:
        candidates = _normalize_all(participants.values())
    elif shape is ParticipantShape.NESTED_METADATA:
        candidates = _normalize_all(_metadata_participants(group_metadata))
    else:
        logger.debug("Unrecognized participant container: %s", type(participants).__name__)
        candidates = []

    return {candidate for candidate in candidates if candidate and isinstance(candidate, Hashable)}


__all__ = ["collect_participants", "inspect_shape"]
