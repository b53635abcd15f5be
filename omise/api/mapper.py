"""Response mapper.

Maps ``(status, raw body, target shape)`` to exactly one of a decoded value
or an ``OmiseError``. Pure: no I/O, no state, same inputs give equal results.

- 2xx: the body must be a JSON object; it is validated against the target
  shape's model. Invalid JSON or a non-object body is a malformed response,
  a field of the wrong type (or a list item that does not fit) is a decode
  error.
- anything else: the body should be the API's error object
  (``{"object": "error", "code": ..., "message": ...}``); when it is not,
  the status and a snippet of the body are kept as diagnostics.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from omise.api.errors import GENERIC_ERROR_MESSAGE, ErrorKind, OmiseError
from omise.api.result import Failure, Result, Success
from omise.api.transport import TransportFailure
from omise.models.shapes import TargetShape

# Longest body excerpt kept in error details
BODY_SNIPPET_LIMIT = 500


def map_response(status_code: int, raw_body: bytes, target: TargetShape) -> Result:
    """Decode one HTTP response into a ``Success`` or a ``Failure``."""
    if 200 <= status_code < 300:
        return _map_success(status_code, raw_body, target)
    return Failure(_map_error(status_code, raw_body))


def map_transport_failure(failure: TransportFailure) -> Failure:
    """Wrap a transport-level failure (no HTTP status) as an error value."""
    return Failure(
        OmiseError(
            kind=ErrorKind.TRANSPORT,
            code=failure.reason,
            message=failure.message or GENERIC_ERROR_MESSAGE,
        )
    )


def _map_success(status_code: int, raw_body: bytes, target: TargetShape) -> Result:
    payload = _parse_json(raw_body)
    if not isinstance(payload, dict):
        return Failure(
            _malformed(
                status_code,
                raw_body,
                f"Expected a JSON object decodable as {target.describe()}",
            )
        )

    try:
        value = target.validator_type().model_validate(payload)
    except ValidationError as exc:
        return Failure(
            OmiseError(
                kind=ErrorKind.DECODE,
                code="decode_error",
                message=f"Response could not be decoded as {target.describe()}",
                status_code=status_code,
                details={"fields": _field_errors(exc)},
            )
        )
    return Success(value)


def _map_error(status_code: int, raw_body: bytes) -> OmiseError:
    payload = _parse_json(raw_body)
    if isinstance(payload, dict):
        code = payload.get("code")
        message = payload.get("message")
        if isinstance(code, str) and code and isinstance(message, str):
            location = payload.get("location")
            return OmiseError(
                kind=ErrorKind.API,
                code=code,
                message=message or GENERIC_ERROR_MESSAGE,
                status_code=status_code,
                location=location if isinstance(location, str) else None,
            )
    return _malformed(
        status_code,
        raw_body,
        f"Unexpected error response from the Omise API (HTTP {status_code})",
    )


def _malformed(status_code: int, raw_body: bytes, message: str) -> OmiseError:
    return OmiseError(
        kind=ErrorKind.MALFORMED_RESPONSE,
        code="malformed_response",
        message=message,
        status_code=status_code,
        details={
            "status_code": status_code,
            "body": raw_body[:BODY_SNIPPET_LIMIT].decode("utf-8", errors="replace"),
        },
    )


def _parse_json(raw_body: bytes) -> Any:
    """Parse a body as JSON, returning ``None`` when it is not JSON at all."""
    try:
        return json.loads(raw_body)
    except (ValueError, UnicodeDecodeError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow
        return None


def _field_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
