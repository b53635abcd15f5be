"""Property tests for structured logging.

- Every entry is valid JSON with timestamp, level and request_id.
- API keys never appear in the output, wherever they sit in the message.
"""

from __future__ import annotations

import json
import logging

from hypothesis import given, settings, strategies as st

from omise.logging_config import JsonFormatter

# --- Strategies ---

request_ids = st.uuids().map(str)
messages = st.text(min_size=1, max_size=100, alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ._-/")
levels = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
key_suffixes = st.text(min_size=8, max_size=24, alphabet="abcdefghijklmnopqrstuvwxyz0123456789")
key_prefixes = st.sampled_from(["skey_", "skey_test_", "pkey_", "pkey_test_"])
durations = st.floats(min_value=0.0, max_value=60000.0, allow_nan=False, allow_infinity=False)
statuses = st.one_of(st.none(), st.integers(min_value=100, max_value=599))


def _make_record(
    message: str,
    level: str = "INFO",
    request_id: str | None = None,
    **extra: object,
) -> logging.LogRecord:
    """Create a LogRecord with optional extra attributes."""
    record = logging.LogRecord(
        name="omise.api.dispatch",
        level=getattr(logging, level),
        pathname="dispatch.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if request_id is not None:
        record.request_id = request_id  # type: ignore[attr-defined]
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# --- Properties ---


@settings(max_examples=100)
@given(message=messages, level=levels, request_id=request_ids)
def test_structured_log_format_basic(message: str, level: str, request_id: str) -> None:
    parsed = json.loads(JsonFormatter().format(_make_record(message, level, request_id)))

    assert "timestamp" in parsed
    assert parsed["level"] == level
    assert parsed["request_id"] == request_id


@settings(max_examples=100)
@given(
    message=messages,
    request_id=request_ids,
    status_code=statuses,
    duration_ms=durations,
    error_code=st.text(min_size=1, max_size=30, alphabet="abcdefghijklmnopqrstuvwxyz_"),
)
def test_failed_call_fields(
    message: str,
    request_id: str,
    status_code: int | None,
    duration_ms: float,
    error_code: str,
) -> None:
    record = _make_record(
        message,
        level="WARNING",
        request_id=request_id,
        method="POST",
        path="charges",
        status_code=status_code,
        error_kind="api",
        error_code=error_code,
        duration_ms=duration_ms,
    )
    parsed = json.loads(JsonFormatter().format(record))

    assert parsed["method"] == "POST"
    assert parsed["path"] == "charges"
    assert parsed["status_code"] == status_code
    assert parsed["error_kind"] == "api"
    assert parsed["error_code"] == error_code
    assert parsed["duration_ms"] == duration_ms


@settings(max_examples=200)
@given(before=messages, after=messages, prefix=key_prefixes, suffix=key_suffixes)
def test_api_keys_are_never_logged(before: str, after: str, prefix: str, suffix: str) -> None:
    key = f"{prefix}{suffix}"
    output = JsonFormatter().format(_make_record(f"{before} {key} {after}"))

    assert key not in output
    assert "[REDACTED]" in output
