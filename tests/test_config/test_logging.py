"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
TokenRedactionFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    TokenRedactionFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    redact_bot_token,
)
from config.logging.config import DEFAULT_SERVICE_NAME, NOISY_LOGGERS, VALID_LOG_LEVELS


def _record(msg: str = "message", args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        """Nível aceita minúsculas."""
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_carries_both_filters(self) -> None:
        """Handler injeta correlação e redige token."""
        configure_logging(correlation_id_getter=lambda: "update-1")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert any(isinstance(f, TokenRedactionFilter) for f in handler.filters)

    def test_http_loggers_are_quieted(self) -> None:
        """httpx/httpcore não logam requests em INFO."""
        configure_logging(level="DEBUG")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "telegrafo"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("telegrafo", lambda: "update-42")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "update-42"
        assert record.service == "telegrafo"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("svc", None)
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestTokenRedaction:
    """Token do bot nunca aparece na saída."""

    def test_redact_method_url(self) -> None:
        url = "https://api.telegram.org/bot123456:AAH-x_yZ/sendMessage"
        assert redact_bot_token(url) == "https://api.telegram.org/bot<redacted>/sendMessage"

    def test_redact_file_url(self) -> None:
        url = "https://api.telegram.org/file/bot123456:AAH-x_yZ/photos/a.jpg"
        assert "123456:AAH" not in redact_bot_token(url)

    def test_text_without_token_is_untouched(self) -> None:
        assert redact_bot_token("update_dispatched") == "update_dispatched"

    def test_filter_rewrites_formatted_message(self) -> None:
        record = _record('HTTP Request: POST %s "%s"', ("https://h/bot1:abc/getMe", "200 OK"))
        TokenRedactionFilter().filter(record)
        assert record.getMessage() == 'HTTP Request: POST https://h/bot<redacted>/getMe "200 OK"'


class TestJsonFormatter:
    """Saída JSON com campos obrigatórios renomeados."""

    def test_required_fields_and_renames(self) -> None:
        formatter = create_json_formatter()
        record = _record("update_dispatched")
        record.correlation_id = "update-7"
        record.service = "telegrafo"
        record.update_id = 7

        output = json.loads(formatter.format(record))

        assert output["message"] == "update_dispatched"
        assert output["level"] == "INFO"
        assert output["logger"] == "test"
        assert output["correlation_id"] == "update-7"
        assert output["service"] == "telegrafo"
        assert output["update_id"] == 7

    def test_field_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
