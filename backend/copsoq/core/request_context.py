"""Request/assessment context utilities.

Propagates a correlation ID and the assessment being processed into log lines
without threading them through every engine call.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from uuid import uuid4

_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
_assessment_id_var: ContextVar[str | None] = ContextVar("assessment_id", default=None)


def get_request_id() -> str | None:
    """Get the current request correlation ID (if any)."""

    return _request_id_var.get()


def get_assessment_id() -> str | None:
    """Get the assessment currently being scored (if any)."""

    return _assessment_id_var.get()


def new_request_id() -> str:
    return str(uuid4())


@contextmanager
def request_id_context(request_id: str | None):
    """Context manager that sets the correlation ID for the duration."""

    token: Token[str | None] = _request_id_var.set(request_id)
    try:
        yield
    finally:
        _request_id_var.reset(token)


@contextmanager
def assessment_context(assessment_id: str | int | None):
    """Tag every log line emitted inside the block with the assessment ID."""

    value = None if assessment_id is None else str(assessment_id)
    token: Token[str | None] = _assessment_id_var.set(value)
    try:
        yield
    finally:
        _assessment_id_var.reset(token)
