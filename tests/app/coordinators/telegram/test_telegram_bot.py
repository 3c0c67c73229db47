"""Testes da fachada TelegramBot."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from fastapi import APIRouter

from app.coordinators.telegram.bot import TelegramBot
from app.sessions import memory_session
from config.settings import TelegramSettings
from tests.fakes.fake_invoker import FakeInvoker
from utils.errors import TransportConflictError


def _bot(invoker: FakeInvoker | None = None, **settings: Any) -> TelegramBot:
    return TelegramBot(
        TelegramSettings(bot_token="1:abc", **settings),
        invoker=invoker or FakeInvoker(),
    )


def _text_update(update_id: int, text: str) -> dict[str, Any]:
    return {
        "update_id": update_id,
        "message": {"chat": {"id": 8}, "from": {"id": 2}, "text": text},
    }


@pytest.mark.asyncio
async def test_hears_and_on_register_handlers() -> None:
    invoker = FakeInvoker()
    bot = _bot(invoker)

    async def greet(ctx: Any, next_: Any) -> None:
        await ctx.reply(f"hello {ctx.match.group(0)}")

    async def on_button(ctx: Any, next_: Any) -> None:
        await ctx.answer_callback_query("ok")

    bot.hears("world", greet)
    bot.on("callback_query", on_button)

    await bot.handle_update(_text_update(1, "hi world"))
    await bot.handle_update({"update_id": 2, "callback_query": {"id": "cq", "data": "x"}})

    assert invoker.methods() == ["sendMessage", "answerCallbackQuery"]
    assert invoker.calls[0][1]["text"] == "hello world"


@pytest.mark.asyncio
async def test_on_error_replaces_handler() -> None:
    bot = _bot()
    errors: list[BaseException] = []
    bot.on_error = errors.append

    async def broken(ctx: Any, next_: Any) -> None:
        raise ValueError("x")

    bot.use(broken)
    await bot.handle_update(_text_update(1, "x"))

    assert len(errors) == 1


@pytest.mark.asyncio
async def test_context_extras_visible_in_handlers() -> None:
    bot = _bot()
    bot.context["greeting"] = "olá"
    seen: list[str] = []

    async def spy(ctx: Any, next_: Any) -> None:
        seen.append(ctx.greeting)

    bot.use(spy)
    await bot.handle_update(_text_update(1, "x"))

    assert seen == ["olá"]


@pytest.mark.asyncio
async def test_outbound_methods_are_delegated() -> None:
    invoker = FakeInvoker({"getMe": {"id": 1, "username": "bot"}})
    bot = _bot(invoker)

    me = await bot.get_me()
    await bot.send_message(5, "direct")

    assert me == {"id": 1, "username": "bot"}
    assert invoker.methods() == ["getMe", "sendMessage"]


@pytest.mark.asyncio
async def test_start_polling_runs_until_stop() -> None:
    invoker = FakeInvoker({"getUpdates": [[_text_update(30, "a")], []]})
    bot = _bot(invoker)
    handled: list[int] = []

    async def record(ctx: Any, next_: Any) -> None:
        handled.append(ctx.update_id)
        bot.stop()

    bot.use(record)
    task = bot.start_polling(timeout=10, limit=50)

    assert bot.start_polling() is task
    await asyncio.wait_for(task, timeout=1.0)

    assert handled == [30]
    assert bot.polling.offset == 31
    assert invoker.calls[0] == ("getUpdates", {"offset": 0, "limit": 50, "timeout": 10})


@pytest.mark.asyncio
async def test_aclose_lets_running_dispatch_finish() -> None:
    invoker = FakeInvoker({"getUpdates": [[_text_update(30, "a"), _text_update(31, "b")]]})
    bot = _bot(invoker)
    trace: list[str] = []

    async def slow(ctx: Any, next_: Any) -> None:
        trace.append(f"enter:{ctx.update_id}")
        await asyncio.sleep(0.05)
        trace.append(f"exit:{ctx.update_id}")

    bot.use(slow)
    task = bot.start_polling()
    while not trace:
        await asyncio.sleep(0)

    await asyncio.wait_for(bot.aclose(), timeout=1.0)

    assert trace == ["enter:30", "exit:30"]
    assert bot.polling.offset == 31
    assert not task.cancelled()
    assert not bot.polling_running


@pytest.mark.asyncio
async def test_aclose_cancels_blocked_fetch() -> None:
    fetching = asyncio.Event()

    class BlockingInvoker(FakeInvoker):
        async def invoke(self, method: str, params: dict[str, Any] | None = None) -> Any:
            if method == "getUpdates":
                fetching.set()
                await asyncio.Event().wait()
            return await super().invoke(method, params)

    bot = _bot(BlockingInvoker())
    task = bot.start_polling()
    await asyncio.wait_for(fetching.wait(), timeout=1.0)

    await asyncio.wait_for(bot.aclose(), timeout=1.0)

    assert task.cancelled()
    assert bot.polling.offset == 0


@pytest.mark.asyncio
async def test_handle_update_leaves_polling_cursor() -> None:
    handled: list[int] = []
    bot = _bot()

    async def record(ctx: Any, next_: Any) -> None:
        handled.append(ctx.update_id)

    bot.use(record)
    bot.polling.offset = 5

    await bot.handle_update(_text_update(1000, "x"))

    assert handled == [1000]
    assert bot.polling.offset == 5


@pytest.mark.asyncio
async def test_webhook_refused_while_polling() -> None:
    bot = _bot(FakeInvoker({"getUpdates": [[]]}))
    bot.start_polling()

    with pytest.raises(TransportConflictError):
        bot.webhook_router("/hook")

    await bot.aclose()
    assert bot.polling.started is False


def test_polling_refused_while_webhook_active() -> None:
    bot = _bot()
    router = bot.webhook_router("/hook")

    assert isinstance(router, APIRouter)
    assert bot.webhook_active
    with pytest.raises(TransportConflictError):
        bot.start_polling()


@pytest.mark.asyncio
async def test_set_and_remove_webhook() -> None:
    invoker = FakeInvoker()
    bot = _bot(invoker)

    await bot.set_webhook("https://bot.example/hook")
    await bot.remove_webhook()

    assert invoker.calls == [
        ("setWebhook", {"url": "https://bot.example/hook", "certificate": None}),
        ("setWebhook", {"url": ""}),
    ]


@pytest.mark.asyncio
async def test_memory_session_through_bot() -> None:
    store: dict[str, dict[str, Any]] = {}
    bot = _bot()
    counts: list[int] = []

    async def count(ctx: Any, next_: Any) -> None:
        ctx.session["count"] = ctx.session.get("count", 0) + 1
        counts.append(ctx.session["count"])

    bot.use(memory_session(store))
    bot.on("text", count)

    await bot.handle_update(_text_update(1, "a"))
    await bot.handle_update(_text_update(2, "b"))

    assert counts == [1, 2]
    assert store == {"2:8": {"count": 2}}


def test_file_link_base_from_settings() -> None:
    settings = TelegramSettings(bot_token="1:abc", api_base_url="https://api.test/")

    assert settings.file_base_url == "https://api.test/file/bot1:abc"
    assert settings.validate() == []
