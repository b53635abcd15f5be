"""Dispatch orchestration: build -> send -> map.

``Dispatcher.execute`` is the single entry point every resource module
calls. One logical call performs exactly one HTTP exchange (or none, when
the parameters cannot be encoded) and yields exactly one result. There are
no retries and nothing is cached.
"""

from __future__ import annotations

import logging
import time

from omise.api.errors import EncodingError, ErrorKind, OmiseError
from omise.api.mapper import map_response, map_transport_failure
from omise.api.request import Method, RequestBuilder, RequestOptions
from omise.api.result import Failure, Result
from omise.api.transport import Transport, TransportFailure

logger = logging.getLogger(__name__)


class Dispatcher:
    """Sends requests for one API host.

    Parameters
    ----------
    builder:
        Request builder bound to the host and key.
    transport:
        Performs the blocking HTTP exchange.
    """

    def __init__(self, builder: RequestBuilder, transport: Transport) -> None:
        self._builder = builder
        self._transport = transport

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def execute(
        self,
        method: Method | str,
        endpoint_path: str,
        options: RequestOptions,
    ) -> Result:
        """Perform one call and return its decoded value or error."""
        verb = Method(method.upper()).value
        try:
            request = self._builder.build(verb, endpoint_path, options)
        except EncodingError as exc:
            logger.warning(
                "Could not encode parameters for %s %s: %s",
                verb,
                endpoint_path,
                exc.message,
                extra={"method": verb, "path": endpoint_path, "error_kind": "encoding"},
            )
            return Failure(
                OmiseError(
                    kind=ErrorKind.ENCODING,
                    code="encoding_error",
                    message=exc.message,
                    details={k: str(v) for k, v in exc.details.items()},
                )
            )

        logger.debug("%s %s", request.method, endpoint_path)
        started = time.monotonic()
        outcome = self._transport.send(request)
        duration_ms = round((time.monotonic() - started) * 1000, 1)

        if isinstance(outcome, TransportFailure):
            result: Result = map_transport_failure(outcome)
        else:
            result = map_response(outcome.status_code, outcome.body, options.target)

        if isinstance(result, Failure):
            logger.warning(
                "%s %s failed: %s (%s)",
                request.method,
                endpoint_path,
                result.error.code,
                result.error.kind.value,
                extra={
                    "method": request.method,
                    "path": endpoint_path,
                    "status_code": result.error.status_code,
                    "error_kind": result.error.kind.value,
                    "error_code": result.error.code,
                    "duration_ms": duration_ms,
                },
            )
        else:
            logger.debug(
                "%s %s succeeded",
                request.method,
                endpoint_path,
                extra={
                    "method": request.method,
                    "path": endpoint_path,
                    "status_code": getattr(outcome, "status_code", None),
                    "duration_ms": duration_ms,
                },
            )
        return result
