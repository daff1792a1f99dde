"""Tests for the session lifecycle and groups cache."""

from __future__ import annotations

import pytest

from waextractor.constants import SessionState
from waextractor.session.client import Chat, GroupSummary
from waextractor.session.exceptions import InvalidSessionTransitionError, SessionNotReadyError
from waextractor.session.session import Session


@pytest.mark.asyncio
async def test_start_makes_session_ready_and_loads_groups(fake_client, settings):
    session = Session(fake_client, settings)
    assert session.state is SessionState.UNINITIALIZED
    assert not session.is_authenticated

    await session.start()

    assert session.state is SessionState.READY
    assert session.status() == {"authenticated": True, "groups": 2}


@pytest.mark.asyncio
async def test_groups_detect_flag_or_group_server(ready_session):
    groups = await ready_session.groups()
    assert groups == [
        GroupSummary(id="team@g.us", name="Team"),
        GroupSummary(id="friends@g.us", name="(no name)"),
    ]


@pytest.mark.asyncio
async def test_connect_failure_returns_to_uninitialized(fake_client, settings):
    fake_client.connect_error = PermissionError("auth rejected")
    session = Session(fake_client, settings)

    with pytest.raises(PermissionError):
        await session.start()

    assert session.state is SessionState.UNINITIALIZED


@pytest.mark.asyncio
async def test_disconnect_blocks_operations_until_restart(ready_session):
    ready_session.disconnect("phone offline")
    assert ready_session.state is SessionState.DISCONNECTED

    with pytest.raises(SessionNotReadyError, match="disconnected"):
        await ready_session.fetch_chat("team@g.us")

    await ready_session.start()
    assert (await ready_session.fetch_chat("team@g.us")).name == "Team"


@pytest.mark.asyncio
async def test_invalid_transition_is_rejected(ready_session):
    with pytest.raises(InvalidSessionTransitionError):
        await ready_session.start()


@pytest.mark.asyncio
async def test_refresh_failure_keeps_previous_cache(fake_client, ready_session):
    async def broken() -> list[Chat]:
        msg = "network down"
        raise ConnectionError(msg)

    fake_client.get_chats = broken
    await ready_session.refresh_groups()

    assert ready_session.status()["groups"] == 2


@pytest.mark.asyncio
async def test_groups_refresh_when_cache_empty(fake_client, settings):
    fake_client.chats = {}
    session = Session(fake_client, settings)
    await session.start()
    assert await session.groups() == []

    fake_client.chats["new@g.us"] = Chat(id="new@g.us", name="New")
    assert await session.groups() == [GroupSummary(id="new@g.us", name="New")]


@pytest.mark.asyncio
async def test_describe_chats_respects_sample_size(fake_client, settings):
    settings.debug_chat_sample = 1
    session = Session(fake_client, settings)
    await session.start()

    dump = await session.describe_chats()

    assert dump["ok"] is True
    assert dump["totalChats"] == 3
    assert dump["sample"] == [
        {"id": "team@g.us", "name": "Team", "isGroup": True, "kind": None, "unreadCount": 0}
    ]


def test_require_ready_before_start(fake_client):
    session = Session(fake_client)
    with pytest.raises(SessionNotReadyError, match="uninitialized"):
        session.require_ready()


@pytest.mark.asyncio
async def test_repeated_disconnect_is_harmless(ready_session):
    ready_session.disconnect("phone offline")
    ready_session.disconnect("still offline")

    assert ready_session.state is SessionState.DISCONNECTED
    assert not ready_session.is_authenticated


@pytest.mark.asyncio
async def test_disconnect_after_auth_failure_is_harmless(fake_client, settings):
    fake_client.connect_error = PermissionError("auth rejected")
    session = Session(fake_client, settings)
    with pytest.raises(PermissionError):
        await session.start()

    session.disconnect("logged out")
    session.auth_failed("rejected again")

    assert session.state is SessionState.UNINITIALIZED


def test_disconnect_before_start_is_harmless(fake_client):
    session = Session(fake_client)
    session.disconnect("never connected")
    assert session.state is SessionState.UNINITIALIZED


@pytest.mark.asyncio
async def test_auth_failure_while_disconnected_resets_session(ready_session):
    ready_session.disconnect("phone offline")
    ready_session.auth_failed("session expired")
    assert ready_session.state is SessionState.UNINITIALIZED
