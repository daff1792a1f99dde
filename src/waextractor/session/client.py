"""Contracts for the messaging-account collaborator.

The extraction pipeline never talks to WhatsApp directly. It consumes a
``ChatClient`` that can list chats, fetch one chat by id and look up a
contact. Participant containers are passed through untouched: depending on
the client they may be lists, keyed collections or plain mappings, and the
collector deals with every shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from waextractor.constants import GROUP_SERVER


@dataclass(slots=True)
class GroupMetadata:
    """Group-level metadata; may carry its own participant list."""

    participants: Any = None


@dataclass(slots=True)
class Chat:
    """A conversation as exposed by the messaging client."""

    id: str
    name: str | None = None
    is_group: bool = False
    participants: Any = None
    group_metadata: GroupMetadata | None = None
    kind: str | None = None
    unread_count: int = 0

    @property
    def server(self) -> str:
        """Return the server part of the chat id (``g.us`` for groups)."""
        _, _, server = self.id.rpartition("@")
        return server

    @property
    def looks_like_group(self) -> bool:
        return self.is_group or self.server == GROUP_SERVER


@dataclass(slots=True)
class Contact:
    """Contact card returned by a lookup. Every field is optional."""

    id: str
    pushname: str | None = None
    name: str | None = None
    number: str | None = None


@dataclass(slots=True)
class GroupSummary:
    """Lightweight view of a group for listings."""

    id: str
    name: str


@runtime_checkable
class ChatClient(Protocol):
    """Operations the extraction pipeline needs from the messaging account."""

    async def connect(self) -> None:
        """Authenticate and make the account usable."""
        ...

    async def get_chats(self) -> list[Chat]:
        """Return every chat of the account."""
        ...

    async def get_chat_by_id(self, chat_id: str) -> Chat:
        """Return one chat or raise ``ChatNotFoundError``."""
        ...

    async def get_contact_by_id(self, contact_id: str) -> Contact:
        """Return one contact or raise ``ContactNotFoundError``."""
        ...


__all__ = ["Chat", "ChatClient", "Contact", "GroupMetadata", "GroupSummary"]
