"""Request dispatch core shared by every resource module."""

from omise.api.dispatch import Dispatcher
from omise.api.errors import (
    EncodingError,
    ErrorKind,
    OmiseError,
    OmiseException,
    ResultError,
)
from omise.api.mapper import map_response, map_transport_failure
from omise.api.request import (
    FormBody,
    JsonBody,
    Method,
    PreparedRequest,
    RequestBuilder,
    RequestOptions,
)
from omise.api.result import Failure, Result, Success
from omise.api.transport import HttpxTransport, RawResponse, Transport, TransportFailure

__all__ = [
    "Dispatcher",
    "EncodingError",
    "ErrorKind",
    "Failure",
    "FormBody",
    "HttpxTransport",
    "JsonBody",
    "Method",
    "OmiseError",
    "OmiseException",
    "PreparedRequest",
    "RawResponse",
    "RequestBuilder",
    "RequestOptions",
    "Result",
    "ResultError",
    "Success",
    "Transport",
    "TransportFailure",
    "map_response",
    "map_transport_failure",
]
