"""Small structured logging helper.

Engine and API code log single-line JSON payloads so results can be audited
by any log collector; the request and assessment IDs are attached when set.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from copsoq.core.request_context import get_assessment_id, get_request_id

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def log_json(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """Emit a single JSON log line with optional request/assessment correlation."""

    if not logger.isEnabledFor(level):
        return

    payload: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "event": event,
    }
    request_id = get_request_id()
    if request_id:
        payload["request_id"] = request_id
    assessment_id = get_assessment_id()
    if assessment_id:
        payload["assessment_id"] = assessment_id

    payload.update(fields)
    logger.log(level, json.dumps(payload, default=str, ensure_ascii=False))


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once at application start."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level.upper())
