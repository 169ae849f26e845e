"""Testes abrangentes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
SensitiveDataFilter, create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveDataFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.logging.filters import MASK


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, SensitiveDataFilter) for f in filters)

    def test_configure_logging_quiets_httpx(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "twilio_sms_notifier"


class TestGetLogger:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger


class TestCorrelationIdFilter:
    def test_filter_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("my_service", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("service_name").filter(record)
        assert record.correlation_id == ""


class TestSensitiveDataFilter:
    def test_masks_sensitive_extra_fields(self) -> None:
        record = _record()
        record.auth_token = "s3cr3t"
        record.Authorization = "Basic QUMxOnRvaw=="
        record.status_code = 400

        assert SensitiveDataFilter().filter(record) is True
        assert record.auth_token == MASK
        assert record.Authorization == MASK
        assert record.status_code == 400

    def test_custom_fields(self) -> None:
        record = _record()
        record.pin = "1234"
        SensitiveDataFilter(fields=["PIN"]).filter(record)
        assert record.pin == MASK


class TestCreateJsonFormatter:
    def test_field_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_create_json_formatter_returns_formatter(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)

    def test_json_formatter_formats_record(self) -> None:
        record = _record("Erro da API Twilio (400): bad", logging.ERROR)
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.status_code = 400

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "Erro da API Twilio (400): bad"
        assert payload["level"] == "ERROR"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["status_code"] == 400


class TestLoggingIntegration:
    def test_full_logging_flow_emits_masked_json(self) -> None:
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        stream = io.StringIO()
        logging.getLogger().handlers[0].setStream(stream)

        get_logger("integration.test").info(
            "SMS enviado", extra={"auth_token": "s3cr3t", "status_code": 201}
        )

        payload = json.loads(stream.getvalue().strip())
        assert payload["service"] == "integration_test"
        assert payload["correlation_id"] == "int-test-001"
        assert payload["auth_token"] == MASK
        assert "s3cr3t" not in stream.getvalue()
