"""Messaging-account session and collaborator contracts."""

from waextractor.session.client import Chat, ChatClient, Contact, GroupMetadata, GroupSummary
from waextractor.session.session import Session
from waextractor.session.snapshot import AccountSnapshot, SnapshotClient

__all__ = [
    "AccountSnapshot",
    "Chat",
    "ChatClient",
    "Contact",
    "GroupMetadata",
    "GroupSummary",
    "Session",
    "SnapshotClient",
]
