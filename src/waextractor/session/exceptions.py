"""Exceptions raised by the session layer and its collaborators."""

from __future__ import annotations

from pathlib import Path

from waextractor.constants import SessionState
from waextractor.exceptions import WaExtractorError


class SessionError(WaExtractorError):
    """Base exception for session lifecycle and collaborator errors."""


class SessionNotReadyError(SessionError):
    """Raised when an operation needs an authenticated session."""

    def __init__(self, state: SessionState) -> None:
        self.state = state
        super().__init__(f"Session is not ready (state: {state.value})")


class InvalidSessionTransitionError(SessionError):
    """Raised when a lifecycle transition is not allowed from the current state."""

    def __init__(self, current: SessionState, target: SessionState) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot move session from {current.value} to {target.value}")


class ChatNotFoundError(SessionError, LookupError):
    """Raised when a chat id is unknown to the account."""

    def __init__(self, chat_id: str) -> None:
        self.chat_id = chat_id
        super().__init__(f"Chat not found: {chat_id}")


class ContactNotFoundError(SessionError, LookupError):
    """Raised when a contact id cannot be resolved."""

    def __init__(self, contact_id: str) -> None:
        self.contact_id = contact_id
        super().__init__(f"Contact not found: {contact_id}")


class SnapshotLoadError(SessionError):
    """Raised when an account snapshot file cannot be read or validated."""

    def __init__(self, path: Path, reason: str | Exception) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load snapshot '{path}': {reason}")
