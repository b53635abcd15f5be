"""Uniform error value and the exception hierarchy of the API client.

Every unsuccessful call (transport failure, non-2xx API response, a body
that cannot be decoded, parameters that cannot be encoded) is reported as
exactly one ``OmiseError`` inside a ``Failure`` result. Exceptions only
cross the public boundary when a caller opts in with ``Result.unwrap()``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

GENERIC_ERROR_MESSAGE = "Unexpected error while calling the Omise API"


class ErrorKind(str, Enum):
    """Where an unsuccessful call went wrong."""

    TRANSPORT = "transport"
    API = "api"
    MALFORMED_RESPONSE = "malformed_response"
    DECODE = "decode"
    ENCODING = "encoding"


class OmiseError(BaseModel):
    """Error value returned in place of a decoded entity or list."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    code: str
    message: str = Field(default=GENERIC_ERROR_MESSAGE, min_length=1)
    status_code: int | None = None
    location: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class OmiseException(Exception):
    """Base exception for the client."""

    message: str = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class EncodingError(OmiseException):
    """A request parameter cannot be represented on the wire."""

    message = "Request parameters could not be encoded"


class ResultError(OmiseException):
    """Raised by ``unwrap()`` on a failed result."""

    def __init__(self, error: OmiseError) -> None:
        self.error = error
        super().__init__(error.message, kind=error.kind.value, code=error.code)
