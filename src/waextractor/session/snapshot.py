"""Offline ``ChatClient`` backed by a JSON account snapshot.

A snapshot captures what a live client would return::

    {
      "chats": [
        {"id": "1203@g.us", "name": "Team", "isGroup": true,
         "participants": [{"id": {"_serialized": "5511999@c.us"}}]}
      ],
      "contacts": {"5511999@c.us": {"pushname": "Ana", "number": "5511999"}}
    }

Participant containers are kept exactly as they appear in the file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from waextractor.session.client import Chat, Contact, GroupMetadata
from waextractor.session.exceptions import (
    ChatNotFoundError,
    ContactNotFoundError,
    SnapshotLoadError,
)

logger = logging.getLogger(__name__)


class _GroupMetadataRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    participants: Any = None


class _ChatRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(min_length=1)
    name: str | None = None
    is_group: bool = Field(default=False, alias="isGroup")
    kind: str | None = None
    unread_count: int = Field(default=0, alias="unreadCount")
    participants: Any = None
    group_metadata: _GroupMetadataRecord | None = Field(default=None, alias="groupMetadata")

    def to_chat(self) -> Chat:
        metadata = None
        if self.group_metadata is not None:
            metadata = GroupMetadata(participants=self.group_metadata.participants)
        return Chat(
            id=self.id,
            name=self.name,
            is_group=self.is_group,
            participants=self.participants,
            group_metadata=metadata,
            kind=self.kind,
            unread_count=self.unread_count,
        )


class _ContactRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pushname: str | None = None
    name: str | None = None
    number: str | None = None


class AccountSnapshot(BaseModel):
    """Validated content of a snapshot file."""

    model_config = ConfigDict(extra="ignore")

    chats: list[_ChatRecord] = Field(default_factory=list)
    contacts: dict[str, _ContactRecord] = Field(default_factory=dict)


class SnapshotClient:
    """Serve chats and contacts from an ``AccountSnapshot``."""

    def __init__(self, snapshot: AccountSnapshot) -> None:
        self._snapshot = snapshot
        self._chats = {record.id: record for record in snapshot.chats}

    @classmethod
    def from_path(cls, path: Path) -> SnapshotClient:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SnapshotLoadError(path, e) from e
        try:
            snapshot = AccountSnapshot.model_validate(raw)
        except ValidationError as e:
            raise SnapshotLoadError(path, e) from e
        logger.debug(
            "Loaded snapshot %s with %d chats and %d contacts",
            path,
            len(snapshot.chats),
            len(snapshot.contacts),
        )
        return cls(snapshot)

    async def connect(self) -> None:
        """Snapshots need no authentication."""

    async def get_chats(self) -> list[Chat]:
        return [record.to_chat() for record in self._snapshot.chats]

    async def get_chat_by_id(self, chat_id: str) -> Chat:
        record = self._chats.get(chat_id)
        if record is None:
            raise ChatNotFoundError(chat_id)
        return record.to_chat()

    async def get_contact_by_id(self, contact_id: str) -> Contact:
        record = self._snapshot.contacts.get(contact_id)
        if record is None:
            raise ContactNotFoundError(contact_id)
        return Contact(
            id=contact_id,
            pushname=record.pushname,
            name=record.name,
            number=record.number,
        )


__all__ = ["AccountSnapshot", "SnapshotClient"]
