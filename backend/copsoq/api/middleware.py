"""Middleware for security headers and request logging."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from copsoq.core.config import get_settings
from copsoq.core.metrics import observe_http_request
from copsoq.core.request_context import (
    assessment_context,
    new_request_id,
    request_id_context,
)
from copsoq.core.structured_logging import log_json

logger = logging.getLogger(__name__)
settings = get_settings()

MAX_HEADER_ID_LENGTH = 128

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add basic security headers to all responses.

    Results carry health data about employees, so responses are never cached.
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        if settings.environment == "production":
            scheme = request.headers.get("x-forwarded-proto") or request.url.scheme
            if scheme == "https":
                response.headers.setdefault(
                    "Strict-Transport-Security",
                    "max-age=63072000; includeSubDomains",
                )
        return response


def _header_id(request: Request, *names: str) -> str | None:
    """First well-formed id found in the given headers."""
    for name in names:
        candidate = (request.headers.get(name) or "").strip()
        if not candidate:
            continue
        if len(candidate) <= MAX_HEADER_ID_LENGTH and not any(c in candidate for c in "\r\n"):
            return candidate
    return None


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Request logging middleware with structured logging.

    Every request gets a correlation ID (taken from X-Request-ID when the
    caller sends one). Callers acting on a stored assessment may send
    X-Assessment-ID so engine log lines can be traced back to it.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = _header_id(request, "X-Request-ID", "X-Correlation-ID") or new_request_id()
        assessment_id = _header_id(request, "X-Assessment-ID")
        request.state.request_id = request_id

        started = time.perf_counter()
        fields = {"method": request.method, "path": request.url.path}

        with request_id_context(request_id), assessment_context(assessment_id):
            try:
                response = await call_next(request)
            except Exception as exc:
                log_json(
                    logger,
                    logging.ERROR,
                    "request_error",
                    status_code=500,
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                    error=str(exc),
                    exception=exc.__class__.__name__,
                    **fields,
                )
                raise

            duration_ms = (time.perf_counter() - started) * 1000
            response.headers.setdefault("X-Request-ID", request_id)

            route = getattr(request.scope.get("route"), "path", None)
            observe_http_request(
                method=request.method,
                route=route or "unmatched",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            log_json(
                logger,
                _level_for(response.status_code),
                "request",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
                **fields,
            )
            return response
