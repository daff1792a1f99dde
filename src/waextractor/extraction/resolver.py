"""Resolve participant ids to display names with independent, concurrent lookups."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from waextractor.extraction.models import ResolvedParticipant
from waextractor.session.client import Contact

logger = logging.getLogger(__name__)

ContactLookup = Callable[[str], Awaitable[Contact]]


def pick_display_name(contact: Contact | None) -> str | None:
    """Prefer the push name, then the saved contact name, then the phone number."""
    if contact is None:
        return None
    return contact.pushname or contact.name or contact.number or None


async def _resolve_one(
    participant_id: Any,
    lookup: ContactLookup,
    semaphore: asyncio.Semaphore | None,
) -> ResolvedParticipant | None:
    if not isinstance(participant_id, str):
        logger.debug("Skipping non-string participant id: %r", participant_id)
        return None
    guard = semaphore if semaphore is not None else contextlib.nullcontext()
    try:
        async with guard:
            contact = await lookup(participant_id)
    except Exception as e:
        logger.debug("Contact lookup failed for %s: %s", participant_id, e)
        return ResolvedParticipant(id=participant_id, display_name=None, resolution_ok=False)
    return ResolvedParticipant(
        id=participant_id,
        display_name=pick_display_name(contact),
        resolution_ok=True,
    )


async def resolve_contacts(
    participant_ids: Iterable[Any],
    lookup: ContactLookup,
    *,
    max_concurrency: int | None = None,
) -> list[ResolvedParticipant]:
    """Look up every id concurrently and return one result per usable id.

    A failing lookup never cancels its siblings: the id is kept with no
    display name and ``resolution_ok=False``. Only ids that are not strings
    are dropped.
    """
    ids = list(participant_ids)
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
    outcomes = await asyncio.gather(
        *(_resolve_one(participant_id, lookup, semaphore) for participant_id in ids),
        return_exceptions=True,
    )

    resolved: list[ResolvedParticipant] = []
    for participant_id, outcome in zip(ids, outcomes, strict=True):
        if isinstance(outcome, BaseException):
            if not isinstance(participant_id, str):
                continue
            logger.debug("Lookup task for %s ended with %r", participant_id, outcome)
            outcome = ResolvedParticipant(id=participant_id, display_name=None, resolution_ok=False)
        if outcome is not None:
            resolved.append(outcome)
    return resolved


__all__ = ["ContactLookup", "pick_display_name", "resolve_contacts"]
