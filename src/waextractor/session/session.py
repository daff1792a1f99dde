"""Explicit session object owning the authenticated flag and the groups cache."""

from __future__ import annotations

import logging
from typing import Any

from waextractor.config.settings import ExtractorSettings
from waextractor.constants import UNNAMED_GROUP, SessionState
from waextractor.session.client import Chat, ChatClient, Contact, GroupSummary
from waextractor.session.exceptions import InvalidSessionTransitionError, SessionNotReadyError

logger = logging.getLogger(__name__)

_GROUP_LOG_SAMPLE = 10

_TRANSITIONS: dict[SessionState, frozenset[SessionState]] = {
    SessionState.UNINITIALIZED: frozenset({SessionState.AUTHENTICATING}),
    SessionState.AUTHENTICATING: frozenset(
        {SessionState.READY, SessionState.UNINITIALIZED, SessionState.DISCONNECTED}
    ),
    SessionState.READY: frozenset({SessionState.DISCONNECTED, SessionState.UNINITIALIZED}),
    SessionState.DISCONNECTED: frozenset({SessionState.AUTHENTICATING, SessionState.UNINITIALIZED}),
}


class Session:
    """Lifecycle wrapper around a ``ChatClient``.

    The session is the only owner of mutable account state. The extraction
    pipeline receives a session and reads from it; it never touches the
    groups cache.
    """

    def __init__(self, client: ChatClient, settings: ExtractorSettings | None = None) -> None:
        self.client = client
        self.settings = settings or ExtractorSettings()
        self._state = SessionState.UNINITIALIZED
        self._groups: list[Chat] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.READY

    def _transition(self, target: SessionState) -> None:
        if target not in _TRANSITIONS[self._state]:
            raise InvalidSessionTransitionError(self._state, target)
        logger.debug("Session %s -> %s", self._state.value, target.value)
        self._state = target

    async def start(self) -> None:
        """Authenticate through the client and warm the groups cache."""
        self._transition(SessionState.AUTHENTICATING)
        try:
            await self.client.connect()
        except Exception as e:
            self.auth_failed(str(e))
            raise
        self._transition(SessionState.READY)
        logger.info("WhatsApp client is ready")
        await self.refresh_groups()

    def auth_failed(self, reason: str) -> None:
        logger.error("Authentication failure: %s", reason)
        if self._state is not SessionState.UNINITIALIZED:
            self._transition(SessionState.UNINITIALIZED)

    def disconnect(self, reason: str) -> None:
        """Record a dropped connection. Safe to call in any state."""
        logger.warning("Client disconnected: %s", reason)
        if self._state in (SessionState.UNINITIALIZED, SessionState.DISCONNECTED):
            return
        self._transition(SessionState.DISCONNECTED)

    def require_ready(self) -> None:
        if not self.is_authenticated:
            raise SessionNotReadyError(self._state)

    async def refresh_groups(self) -> None:
        """Re-read the chat list and keep the group chats.

        A failing refresh is logged and leaves the previous cache in place.
        """
        self.require_ready()
        logger.info("Fetching chats...")
        try:
            chats = await self.client.get_chats()
        except Exception:
            logger.exception("Error fetching chats")
            return
        self._groups = [chat for chat in chats if chat.looks_like_group]
        logger.info("Found %d groups", len(self._groups))
        for group in self._groups[:_GROUP_LOG_SAMPLE]:
            logger.info(" -> %s %s", group.id, group.name)

    async def groups(self) -> list[GroupSummary]:
        self.require_ready()
        if not self._groups:
            await self.refresh_groups()
        return [GroupSummary(id=g.id, name=g.name or UNNAMED_GROUP) for g in self._groups]

    def status(self) -> dict[str, Any]:
        return {"authenticated": self.is_authenticated, "groups": len(self._groups)}

    async def describe_chats(self) -> dict[str, Any]:
        """Diagnostic dump of the raw chat list."""
        self.require_ready()
        chats = await self.client.get_chats()
        sample = [
            {
                "id": chat.id,
                "name": chat.name,
                "isGroup": chat.is_group,
                "kind": chat.kind,
                "unreadCount": chat.unread_count,
            }
            for chat in chats[: self.settings.debug_chat_sample]
        ]
        return {"ok": True, "totalChats": len(chats), "sample": sample}

    async def fetch_chat(self, chat_id: str) -> Chat:
        self.require_ready()
        return await self.client.get_chat_by_id(chat_id)

    async def fetch_contact(self, contact_id: str) -> Contact:
        self.require_ready()
        return await self.client.get_contact_by_id(contact_id)


__all__ = ["Session"]
