"""Tests for structured logging helpers."""

import structlog

from src.nano.logging import (
    LogContext,
    add_request_id,
    add_service_info,
    generate_request_id,
    get_request_id,
)


class TestLogContext:
    """Test request-scoped logging context."""

    def test_sets_and_resets_request_id(self):
        """Test that the request ID only lives inside the context."""
        assert get_request_id() == ""

        with LogContext(request_id="req-123", bidder="nanointeractive") as ctx:
            assert ctx.request_id == "req-123"
            assert get_request_id() == "req-123"

        assert get_request_id() == ""

    def test_generates_request_id(self):
        """Test that a request ID is generated when none is given."""
        with LogContext() as ctx:
            assert ctx.request_id
            assert get_request_id() == ctx.request_id

    def test_nested_contexts_restore_outer(self):
        """Test that leaving an inner context restores the outer request ID."""
        with LogContext(request_id="outer"):
            with LogContext(request_id="inner"):
                assert get_request_id() == "inner"
            assert get_request_id() == "outer"

    def test_host_context_survives(self):
        """Test that only the keys bound by the context are unbound."""
        structlog.contextvars.bind_contextvars(host="exchange")
        try:
            with LogContext(request_id="req-1", bidder="nanointeractive"):
                assert structlog.contextvars.get_contextvars()["bidder"] == "nanointeractive"

            assert structlog.contextvars.get_contextvars() == {"host": "exchange"}
        finally:
            structlog.contextvars.clear_contextvars()

    def test_generated_ids_are_unique(self):
        """Test request ID uniqueness."""
        assert generate_request_id() != generate_request_id()


class TestProcessors:
    """Test structlog processors."""

    def test_add_request_id(self):
        """Test that the current request ID is added to events."""
        with LogContext(request_id="req-9"):
            event = add_request_id(None, "info", {"event": "x"})

        assert event["request_id"] == "req-9"

    def test_add_request_id_outside_context(self):
        """Test that no request ID is added outside a context."""
        assert "request_id" not in add_request_id(None, "info", {"event": "x"})

    def test_add_service_info(self):
        """Test the service tag."""
        assert add_service_info(None, "info", {})["service"] == "nano-adapter"
