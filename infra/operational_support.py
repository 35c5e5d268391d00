from __future__ import annotations

import logging
import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator

REDACTED = "<redacted>"
REDACTED_EMAIL = "<redacted-email>"

_TRACE_ID_CTX: ContextVar[str | None] = ContextVar("ftt_trace_id", default=None)
_EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_SECRET_PAIR_PATTERN = re.compile(
    r"(?i)\b(password|passwd|pwd|token|secret)\b\s*[:=]\s*([^\s,;]+)"
)


def create_trace_id() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"trc-{stamp}-{uuid.uuid4().hex[:8]}"


def current_trace_id() -> str | None:
    value = _TRACE_ID_CTX.get()
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


@contextmanager
def bind_trace_id(trace_id: str | None = None) -> Iterator[str]:
    normalized = (trace_id or "").strip() or create_trace_id()
    token = _TRACE_ID_CTX.set(normalized)
    try:
        yield normalized
    finally:
        _TRACE_ID_CTX.reset(token)


def redact_text(value: str) -> str:
    text = str(value or "")
    text = _EMAIL_PATTERN.sub(REDACTED_EMAIL, text)
    text = _SECRET_PAIR_PATTERN.sub(lambda m: f"{m.group(1)}={REDACTED}", text)
    return text


class TraceIdLogFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = current_trace_id() or "-"
        return True


class RedactingLogFilter(logging.Filter):
    """Renders the record once and scrubs emails and secrets from it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_text(record.getMessage())
        record.args = None
        return True


__all__ = [
    "REDACTED",
    "REDACTED_EMAIL",
    "RedactingLogFilter",
    "TraceIdLogFilter",
    "bind_trace_id",
    "create_trace_id",
    "current_trace_id",
    "redact_text",
]
