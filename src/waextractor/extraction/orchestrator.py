"""Run the extraction pipeline over the groups an operator selected.

Groups are processed one at a time, in the order given. Within a group every
contact lookup runs concurrently, so at most one group's participants are in
flight at once. A group that cannot be fetched or processed is recorded with
its error and the run moves on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from waextractor.constants import EntryType
from waextractor.extraction.classifier import classify_participant
from waextractor.extraction.collector import collect_participants
from waextractor.extraction.models import (
    ExtractionEntry,
    ExtractionResult,
    GroupResult,
    HiddenRow,
    NumberRow,
)
from waextractor.extraction.resolver import resolve_contacts
from waextractor.session.session import Session

logger = logging.getLogger(__name__)


def _describe_error(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class ExtractionOrchestrator:
    """Collect, resolve and classify the members of selected groups."""

    def __init__(self, session: Session) -> None:
        self.session = session

    async def extract(self, group_ids: str | Iterable[str]) -> ExtractionResult:
        """Extract every requested group and aggregate the entries.

        A single id is accepted as a one-group request.
        """
        self.session.require_ready()
        if isinstance(group_ids, str):
            group_ids = [group_ids]

        result = ExtractionResult()
        for group_id in group_ids:
            try:
                group_result, entries = await self._extract_group(group_id)
            except Exception as e:
                logger.error("Error extracting for group %s: %s", group_id, e)
                group_result, entries = GroupResult.failed(group_id, _describe_error(e)), []
            result.per_group_results.append(group_result)
            result.combined.all.extend(entries)
        return result

    async def _extract_group(self, group_id: str) -> tuple[GroupResult, list[ExtractionEntry]]:
        chat = await self.session.fetch_chat(group_id)
        group_name = chat.name or group_id
        logger.info("Extracting members for %s (%s)", group_name, group_id)

        participant_ids = collect_participants(chat.participants, chat.group_metadata)
        resolved = await resolve_contacts(
            participant_ids,
            self.session.fetch_contact,
            max_concurrency=self.session.settings.max_concurrent_lookups,
        )
        entries = [classify_participant(p, group_id, group_name) for p in resolved]

        numbers = [
            NumberRow(number=entry.number, name=entry.name)
            for entry in entries
            if entry.type is EntryType.NUMBER
        ]
        hidden = [
            HiddenRow(id=entry.id, name=entry.name)
            for entry in entries
            if entry.type is EntryType.HIDDEN
        ]
        logger.info(" -> %d phone numbers, %d hidden IDs", len(numbers), len(hidden))
        group_result = GroupResult(
            group_id=group_id,
            group_name=group_name,
            numbers=numbers,
            hidden_ids=hidden,
        )
        return group_result, entries


async def extract_members(session: Session, group_ids: str | Iterable[str]) -> ExtractionResult:
    """Convenience wrapper around ``ExtractionOrchestrator.extract``."""
    return await ExtractionOrchestrator(session).extract(group_ids)


__all__ = ["ExtractionOrchestrator", "extract_members"]
