"""Request-scoped correlation context.

The request ID and W3C traceparent come from the incoming headers; the user id
is bound once a service has resolved whose assessments a request touches.
Everything set here is merged into structured log events for that request.
"""

import uuid
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any

import structlog

REQUEST_ID_HEADER = "x-request-id"
TRACEPARENT_HEADER = "traceparent"

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
trace_parent_ctx: ContextVar[str | None] = ContextVar("trace_parent", default=None)
user_id_ctx: ContextVar[str | None] = ContextVar("user_id", default=None)


def start_request(headers: Mapping[str, str]) -> str:
    """Load correlation headers into context and return the request ID in use."""
    request_id = headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request_id_ctx.set(request_id)
    trace_parent_ctx.set(headers.get(TRACEPARENT_HEADER) or None)
    user_id_ctx.set(None)
    structlog.contextvars.bind_contextvars(**log_context())
    return request_id


def bind_user(user_id: str) -> None:
    """Attach the assessment owner to the rest of this request's log events."""
    user_id_ctx.set(user_id)
    structlog.contextvars.bind_contextvars(user_id=user_id)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def log_context() -> dict[str, Any]:
    """Correlation fields currently set, for binding into structlog."""
    context: dict[str, Any] = {}
    if rid := request_id_ctx.get():
        context["request_id"] = rid
    if tp := trace_parent_ctx.get():
        context["trace_parent"] = tp
    if uid := user_id_ctx.get():
        context["user_id"] = uid
    return context


def end_request() -> None:
    request_id_ctx.set(None)
    trace_parent_ctx.set(None)
    user_id_ctx.set(None)
    structlog.contextvars.clear_contextvars()
