"""Prometheus metrics endpoint."""

from __future__ import annotations

import hmac

from fastapi import APIRouter, Header, HTTPException, Response, status
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from copsoq.core.config import Settings, get_settings

router = APIRouter()


def _bearer(authorization: str | None) -> str | None:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return None


def _check_scrape_token(settings: Settings, presented: str | None) -> None:
    """Production scrapes must present METRICS_TOKEN; without one the route is hidden."""
    if settings.environment != "production":
        return
    if not settings.metrics_token:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    if not presented or not hmac.compare_digest(presented, settings.metrics_token):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


@router.get(
    "/metrics",
    include_in_schema=False,
    summary="Prometheus metrics",
)
async def metrics_endpoint(
    authorization: str | None = Header(default=None),
    x_metrics_token: str | None = Header(default=None, alias="X-Metrics-Token"),
) -> Response:
    _check_scrape_token(get_settings(), _bearer(authorization) or x_metrics_token)
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
