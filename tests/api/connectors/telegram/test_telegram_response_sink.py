"""Testes do sequestro da resposta do webhook."""

from __future__ import annotations

import pytest

from api.connectors.telegram import InputFile, SinkAwareInvoker, WebhookResponseSink
from tests.fakes.fake_invoker import FakeInvoker


@pytest.mark.asyncio
async def test_first_call_answers_inline() -> None:
    network = FakeInvoker()
    sink = WebhookResponseSink()
    invoker = SinkAwareInvoker(network, sink)

    result = await invoker.invoke("sendMessage", {"chat_id": 1, "text": "hi", "parse_mode": None})

    assert result is None
    assert sink.finished
    assert sink.body == {"chat_id": 1, "text": "hi", "method": "sendMessage"}
    assert network.calls == []


@pytest.mark.asyncio
async def test_second_call_goes_to_network() -> None:
    network = FakeInvoker({"sendMessage": {"message_id": 2}})
    sink = WebhookResponseSink()
    invoker = SinkAwareInvoker(network, sink)

    await invoker.invoke("sendMessage", {"chat_id": 1, "text": "first"})
    result = await invoker.invoke("sendMessage", {"chat_id": 1, "text": "second"})

    assert result == {"message_id": 2}
    assert network.calls == [("sendMessage", {"chat_id": 1, "text": "second"})]
    assert sink.body["text"] == "first"


@pytest.mark.asyncio
async def test_attachment_never_hijacks() -> None:
    network = FakeInvoker()
    sink = WebhookResponseSink()
    invoker = SinkAwareInvoker(network, sink)

    await invoker.invoke("sendPhoto", {"chat_id": 1, "photo": InputFile(b"img")})

    assert not sink.finished
    assert network.methods() == ["sendPhoto"]


def test_sink_is_single_use() -> None:
    sink = WebhookResponseSink()
    sink.answer("sendMessage", {"text": "a"})

    with pytest.raises(RuntimeError, match="webhook_response_already_finished"):
        sink.answer("sendMessage", {"text": "b"})


def test_closed_sink_has_no_body() -> None:
    sink = WebhookResponseSink()
    sink.close()

    assert sink.finished
    assert sink.body is None
