"""Testes do remote invoker HTTP da Bot API (httpx.MockTransport)."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from api.connectors.telegram import InputFile, TelegramHttpClient
from api.connectors.telegram.http_base import HttpClientConfig, HttpError
from utils.errors import MissingBotTokenError, RemoteInvocationError

TOKEN = "123456:ABC-token"


def _client(handler: Any, **config: Any) -> TelegramHttpClient:
    return TelegramHttpClient(
        TOKEN,
        api_base_url="https://api.test",
        config=HttpClientConfig(transport=httpx.MockTransport(handler), **config),
    )


@pytest.mark.asyncio
async def test_invoke_posts_json_and_returns_result() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 10}})

    result = await _client(handler).invoke(
        "sendMessage", {"chat_id": 7, "text": "hi", "parse_mode": None}
    )

    assert result == {"message_id": 10}
    assert str(seen[0].url) == f"https://api.test/bot{TOKEN}/sendMessage"
    assert seen[0].headers["content-type"] == "application/json"
    assert json.loads(seen[0].content) == {"chat_id": 7, "text": "hi"}


@pytest.mark.asyncio
async def test_ok_false_raises_remote_invocation_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400, json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"}
        )

    with pytest.raises(RemoteInvocationError) as exc_info:
        await _client(handler).invoke("sendMessage", {"chat_id": 1, "text": "x"})

    assert exc_info.value.error_code == 400
    assert exc_info.value.description == "Bad Request: chat not found"
    assert exc_info.value.method == "sendMessage"
    assert str(exc_info.value) == "400: Bad Request: chat not found"


@pytest.mark.asyncio
async def test_non_json_body_raises_remote_invocation_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(RemoteInvocationError) as exc_info:
        await _client(handler).invoke("getMe")

    assert exc_info.value.error_code == 502


@pytest.mark.asyncio
async def test_input_file_forces_multipart() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True, "result": True})

    await _client(handler).invoke(
        "sendPhoto",
        {
            "chat_id": 7,
            "photo": InputFile(b"\x89PNG", filename="cat.png"),
            "disable_notification": True,
            "reply_markup": {"inline_keyboard": []},
        },
    )

    request = seen[0]
    body = request.content
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'filename="cat.png"' in body
    assert b"\x89PNG" in body
    assert b"true" in body
    assert b'{"inline_keyboard": []}' in body


@pytest.mark.asyncio
async def test_get_updates_timeout_extends_client_timeout() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True, "result": []})

    await _client(handler, timeout_seconds=5.0).invoke(
        "getUpdates", {"offset": 0, "limit": 100, "timeout": 30}
    )

    assert seen[0].extensions["timeout"]["read"] == 35.0


@pytest.mark.asyncio
async def test_missing_token_raises() -> None:
    client = TelegramHttpClient("", config=HttpClientConfig())

    with pytest.raises(MissingBotTokenError, match="Telegram Bot Token is required"):
        await client.invoke("getMe")


@pytest.mark.asyncio
async def test_connection_error_maps_to_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(HttpError, match="http_connection_error"):
        await _client(handler).invoke("getMe")
