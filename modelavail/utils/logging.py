"""
Logging utilities for gateway request/response tracking.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from .. import config

logger = logging.getLogger(__name__)

MAX_BODY_CHARS = 5000


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def _dump(body: Any) -> str:
    if isinstance(body, str):
        text = body
    else:
        try:
            text = json.dumps(body, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            text = repr(body)
    if len(text) > MAX_BODY_CHARS:
        return text[:MAX_BODY_CHARS] + "\n... (truncated)"
    return text


def log_request(method: str, url: str, payload: Optional[Any] = None):
    """Log an outgoing gateway request to the log file."""
    try:
        with open(config.LOG_FILE, "a", encoding="utf-8") as f:
            f.write(f"\n{'=' * 80}\n")
            f.write(f"[REQUEST] {_timestamp()}\n")
            f.write(f"{method} {url}\n")
            if payload is not None:
                f.write("Request Body:\n")
                f.write(_dump(payload))
                f.write("\n")
    except OSError as e:
        logger.warning(f"Could not write request log: {e}")


def log_response(url: str, status_code: Optional[int], body: Any = None):
    """Log a gateway response (or a transport failure when status_code is None)."""
    try:
        with open(config.LOG_FILE, "a", encoding="utf-8") as f:
            f.write(f"\n[RESPONSE] {_timestamp()}\n")
            f.write(f"URL: {url}\n")
            if status_code is None:
                f.write(f"Transport failure: {body}\n")
                return
            f.write(f"Status: {status_code}\n")
            if body is not None:
                f.write("Response Body:\n")
                f.write(_dump(body))
                f.write("\n")
    except OSError as e:
        logger.warning(f"Could not write response log: {e}")
