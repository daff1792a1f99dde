from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import pytest_asyncio

from waextractor.config.settings import ExtractorSettings
from waextractor.session.client import Chat, Contact
from waextractor.session.exceptions import ChatNotFoundError, ContactNotFoundError
from waextractor.session.session import Session


@dataclass
class FakeChatClient:
    """In-memory ``ChatClient`` whose lookups can be made to fail per id."""

    chats: dict[str, Chat] = field(default_factory=dict)
    contacts: dict[str, Contact] = field(default_factory=dict)
    broken_contacts: set[str] = field(default_factory=set)
    contact_calls: list[str] = field(default_factory=list)
    connect_error: Exception | None = None

    async def connect(self) -> None:
        if self.connect_error is not None:
            raise self.connect_error

    async def get_chats(self) -> list[Chat]:
        return list(self.chats.values())

    async def get_chat_by_id(self, chat_id: str) -> Chat:
        try:
            return self.chats[chat_id]
        except KeyError:
            raise ChatNotFoundError(chat_id) from None

    async def get_contact_by_id(self, contact_id: str) -> Contact:
        self.contact_calls.append(contact_id)
        if contact_id in self.broken_contacts:
            msg = f"lookup exploded for {contact_id}"
            raise RuntimeError(msg)
        try:
            return self.contacts[contact_id]
        except KeyError:
            raise ContactNotFoundError(contact_id) from None


@pytest.fixture
def settings(tmp_path) -> ExtractorSettings:
    return ExtractorSettings(export_dir=tmp_path / "exports")


@pytest.fixture
def fake_client() -> FakeChatClient:
    return FakeChatClient(
        chats={
            "team@g.us": Chat(
                id="team@g.us",
                name="Team",
                is_group=True,
                participants=[
                    {"id": {"_serialized": "5511999990000@c.us"}},
                    {"id": {"_serialized": "5511888880000@c.us"}},
                    "ABCXYZ@lid",
                    {"id": {"_serialized": "5511999990000@c.us"}},
                ],
            ),
            "friends@g.us": Chat(id="friends@g.us", name=None, is_group=False, participants=[]),
            "5511999990000@c.us": Chat(id="5511999990000@c.us", name="Ana"),
        },
        contacts={
            "5511999990000@c.us": Contact(id="5511999990000@c.us", pushname="Ana"),
            "5511888880000@c.us": Contact(id="5511888880000@c.us", number="5511888880000"),
        },
    )


@pytest_asyncio.fixture
async def ready_session(fake_client, settings) -> Session:
    session = Session(fake_client, settings)
    await session.start()
    return session
