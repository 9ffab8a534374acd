"""Unit tests for request correlation context."""

import structlog

from learning_patterns.core.tracing import (
    bind_user,
    end_request,
    get_request_id,
    log_context,
    start_request,
)

TRACEPARENT = "00-cccccccccccccccccccccccccccccccc-dddddddddddddddd-01"


def test_start_request_uses_incoming_headers():
    request_id = start_request({"x-request-id": "req-xyz", "traceparent": TRACEPARENT})

    assert request_id == "req-xyz"
    assert get_request_id() == "req-xyz"
    assert log_context() == {"request_id": "req-xyz", "trace_parent": TRACEPARENT}
    end_request()


def test_start_request_generates_missing_id():
    request_id = start_request({})
    assert request_id
    assert log_context() == {"request_id": request_id}
    end_request()


def test_bind_user_reaches_structlog_context():
    start_request({"x-request-id": "req-1"})
    bind_user("alice")

    assert log_context()["user_id"] == "alice"
    assert structlog.contextvars.get_contextvars()["user_id"] == "alice"

    end_request()
    assert log_context() == {}
    assert structlog.contextvars.get_contextvars() == {}
