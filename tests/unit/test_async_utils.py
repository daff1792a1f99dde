import asyncio

import pytest

from waextractor.async_utils import run_async_safely


async def _answer() -> int:
    await asyncio.sleep(0)
    return 42


def test_runs_without_event_loop():
    assert run_async_safely(_answer()) == 42


@pytest.mark.asyncio
async def test_runs_inside_running_loop():
    assert run_async_safely(_answer()) == 42
