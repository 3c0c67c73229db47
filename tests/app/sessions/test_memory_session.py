"""Testes do middleware de sessão em memória."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from app.sessions import default_session_key, memory_session


def _ctx(user_id: int | None = 1, chat_id: int | None = 10) -> Any:
    payload: dict[str, Any] = {"text": "x"}
    if user_id is not None:
        payload["from"] = {"id": user_id}
    return SimpleNamespace(payload=payload, chat_id=chat_id, session=None)


async def _noop() -> None:
    return None


def test_default_key_combines_user_and_chat() -> None:
    assert default_session_key(_ctx(3, 4)) == "3:4"
    assert default_session_key(_ctx(None, 4)) is None
    assert default_session_key(_ctx(3, None)) is None


@pytest.mark.asyncio
async def test_session_is_loaded_and_stored() -> None:
    store: dict[str, dict[str, Any]] = {"1:10": {"step": "ask_name"}}
    middleware = memory_session(store)
    ctx = _ctx()

    async def next_() -> None:
        assert ctx.session == {"step": "ask_name"}
        ctx.session["step"] = "done"

    await middleware(ctx, next_)

    assert store["1:10"] == {"step": "done"}


@pytest.mark.asyncio
async def test_none_session_removes_entry() -> None:
    store: dict[str, dict[str, Any]] = {"1:10": {"a": 1}}
    middleware = memory_session(store)
    ctx = _ctx()

    async def next_() -> None:
        ctx.session = None

    await middleware(ctx, next_)

    assert store == {}


@pytest.mark.asyncio
async def test_without_key_session_stays_empty() -> None:
    store: dict[str, dict[str, Any]] = {}
    ctx = _ctx(user_id=None)

    await memory_session(store)(ctx, _noop)

    assert ctx.session is None
    assert store == {}


@pytest.mark.asyncio
async def test_custom_key_function() -> None:
    store: dict[str, dict[str, Any]] = {}
    ctx = _ctx()

    await memory_session(store, key_fn=lambda c: f"chat:{c.chat_id}")(ctx, _noop)

    assert store == {"chat:10": {}}
