"""Turn one participant representation into a canonical identifier string."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from waextractor.constants import SERIALIZED_FIELD

logger = logging.getLogger(__name__)


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping key or an attribute, whichever the object has."""
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def normalize_participant(raw: Any) -> str | None:
    """Return the canonical id of ``raw`` or ``None`` when it has none.

    Accepted shapes, tried in order:

    - a string, which is already canonical
    - an object whose ``id`` holds a ``_serialized`` string
    - an object exposing ``_serialized`` directly

    Unrecognized shapes never raise.
    """
    if not raw:
        return None
    if isinstance(raw, str):
        return raw

    nested = _field(raw, "id")
    if nested:
        serialized = _field(nested, SERIALIZED_FIELD)
        if isinstance(serialized, str):
            return serialized

    serialized = _field(raw, SERIALIZED_FIELD)
    if isinstance(serialized, str):
        return serialized

    logger.debug("Unrecognized participant shape: %s", type(raw).__name__)
    return None


__all__ = ["normalize_participant"]
