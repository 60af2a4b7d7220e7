"""Tests for observability/logging.py."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest
import structlog

from resume_match_core.constants import SCORING_MODEL_VERSION
from resume_match_engine.observability.logging import (
    _resolve_level,
    bind_request_context,
    clear_request_context,
    configure_logging,
)
from tests.mocks.mock_settings import make_settings


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Leave structlog at its defaults for other test modules."""
    yield
    structlog.reset_defaults()
    clear_request_context()


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configure_logging_console_mode(self) -> None:
        """Console mode configures without error."""
        configure_logging(make_settings(log_format="console", log_level="INFO"))
        assert structlog.get_logger() is not None

    def test_configure_logging_json_mode(self) -> None:
        """JSON mode renders stdlib records as JSON."""
        configure_logging(make_settings(log_format="json", log_level="INFO"))

        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.getLogger().handlers[0].formatter)
        stdlib_logger = logging.getLogger("test_json_mode")
        stdlib_logger.addHandler(handler)
        stdlib_logger.setLevel(logging.INFO)
        try:
            stdlib_logger.info("score_computed")
        finally:
            stdlib_logger.removeHandler(handler)

        output = stream.getvalue()
        assert '"event": "score_computed"' in output

    def test_configure_logging_sets_level(self) -> None:
        """Log level is applied to root logger."""
        configure_logging(make_settings(log_format="console", log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_replaces_handlers(self) -> None:
        """Repeated configuration keeps a single root handler."""
        configure_logging(make_settings())
        configure_logging(make_settings())
        assert len(logging.getLogger().handlers) == 1


@pytest.mark.unit
class TestRequestContext:
    """Tests for bind/clear request context."""

    def test_bind_and_clear_request_context(self) -> None:
        """Bound request_id appears in context until cleared."""
        bind_request_context("req-123")
        assert structlog.contextvars.get_contextvars()["request_id"] == "req-123"
        clear_request_context()
        assert "request_id" not in structlog.contextvars.get_contextvars()

    def test_request_context_carries_scoring_version(self) -> None:
        """Every request is tagged with the weight table version."""
        bind_request_context("req-456")
        context = structlog.contextvars.get_contextvars()
        assert context["scoring_version"] == SCORING_MODEL_VERSION

    def test_scoring_version_in_rendered_events(self) -> None:
        """Bound context is merged into JSON log lines."""
        configure_logging(make_settings(log_format="json", log_level="INFO"))
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.getLogger().handlers[0].formatter)
        root = logging.getLogger()
        root.addHandler(handler)
        try:
            bind_request_context("req-789")
            structlog.get_logger("test_context").info("score_computed")
        finally:
            root.removeHandler(handler)

        output = stream.getvalue()
        assert '"request_id": "req-789"' in output
        assert f'"scoring_version": "{SCORING_MODEL_VERSION}"' in output


@pytest.mark.unit
class TestResolveLevel:
    """Tests for _resolve_level."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),
            ("unknown", logging.INFO),
        ],
    )
    def test_resolve_level(self, name: str, expected: int) -> None:
        """Level names resolve to correct logging constants."""
        assert _resolve_level(name) == expected
