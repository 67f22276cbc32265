"""Unit tests for logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import orjson
import pytest
from loguru import logger

from replykit.core.config import Settings
from replykit.observability import (
    bind_context,
    clear_context,
    get_context,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
    unbind_context,
)


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    clear_context()
    yield
    clear_context()
    logger.remove()


class TestLogContext:
    """Tests for the per-request logging context."""

    def test_bind_and_unbind(self) -> None:
        """Should add and remove context keys."""
        bind_context(request_id=7, kind="reply")
        assert get_context() == {"request_id": 7, "kind": "reply"}

        unbind_context("kind")
        assert get_context() == {"request_id": 7}

    def test_clear(self) -> None:
        """Should drop every key."""
        bind_context(request_id=1)

        clear_context()

        assert get_context() == {}


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should emit one JSON object per line with context and extras."""
        setup_logging("DEBUG", "json")
        bind_context(request_id=3)

        get_logger("replykit.test").info("Cache hit", kind="reply")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = orjson.loads(line)
        assert record["message"] == "Cache hit"
        assert record["level"] == "INFO"
        assert record["logger"] == "replykit.test"
        assert record["kind"] == "reply"
        assert record["request_id"] == 3

    def test_json_escapes_braces(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should survive messages containing braces."""
        setup_logging("INFO", "json")

        get_logger("t").info("payload {not a field}")

        record = orjson.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["message"] == "payload {not a field}"

    def test_level_filter(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should drop records below the configured level."""
        setup_logging("WARNING", "json")

        get_logger("t").info("hidden")

        assert capsys.readouterr().err == ""

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should write human-readable lines in development."""
        setup_logging("INFO", "json", is_development=True)

        get_logger("t").info("hello dev")

        assert "hello dev" in capsys.readouterr().err

    def test_intercepts_stdlib_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should route standard library records through Loguru."""
        setup_logging("INFO", "json")

        logging.getLogger("somelib").warning("from stdlib")

        record = orjson.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["message"] == "from stdlib"
        assert record["level"] == "WARNING"

    def test_quiets_noisy_loggers(self) -> None:
        """Should raise httpx and httpcore to WARNING."""
        setup_logging("DEBUG", "json")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


class TestSetupLoggingFromSettings:
    """Tests for setup_logging_from_settings()."""

    def test_applies_level_and_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should honor the logging section of production settings."""
        settings = Settings(APP_ENV="production", logging={"level": "WARNING", "format": "json"})

        setup_logging_from_settings(settings)
        log = get_logger("t")
        log.info("hidden")
        log.warning("shown")

        lines = capsys.readouterr().err.strip().splitlines()
        assert len(lines) == 1
        assert orjson.loads(lines[0])["message"] == "shown"

    def test_development_uses_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should write human-readable lines in development even with json format."""
        settings = Settings(APP_ENV="development", logging={"level": "INFO", "format": "json"})

        setup_logging_from_settings(settings)
        get_logger("t").info("hello dev")

        err = capsys.readouterr().err
        assert "hello dev" in err
        assert not err.lstrip().startswith("{")
