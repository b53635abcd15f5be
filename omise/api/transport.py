"""Blocking HTTP transport.

The core only needs one capability from the network: perform a single
exchange and hand back the raw status, headers and body, or say why no
response was produced. ``HttpxTransport`` provides it on top of
``httpx.Client``; tests substitute any object with a matching ``send``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, Union

import httpx

from omise.api.request import PreparedRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Undecoded HTTP response."""

    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TransportFailure:
    """No HTTP response was received.

    ``reason`` is "timeout", "connect" or "network"; anything else httpx
    raises for a request (bad content encoding, redirect loops) counts as
    "network".
    """

    reason: str
    message: str


SendOutcome = Union[RawResponse, TransportFailure]


class Transport(Protocol):
    def send(self, request: PreparedRequest) -> SendOutcome: ...


class HttpxTransport:
    """``httpx.Client`` backed transport.

    Parameters
    ----------
    timeout_seconds:
        Per-request timeout applied to connect, read, write and pool waits.
    client:
        Pre-built client (e.g. with an ``httpx.MockTransport``). When given,
        ``timeout_seconds`` is ignored.
    """

    def __init__(
        self,
        timeout_seconds: float = 60.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout_seconds))

    def send(self, request: PreparedRequest) -> SendOutcome:
        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.TimeoutException as exc:
            logger.warning("Request timed out: %s %s", request.method, _path_of(request.url))
            return TransportFailure(reason="timeout", message=f"Request timed out: {exc}")
        except httpx.ConnectError as exc:
            logger.warning("Connection failed: %s %s", request.method, _path_of(request.url))
            return TransportFailure(reason="connect", message=f"Connection failed: {exc}")
        except httpx.TransportError as exc:
            logger.warning("Network error: %s %s", request.method, _path_of(request.url))
            return TransportFailure(reason="network", message=f"Network error: {exc}")
        except httpx.RequestError as exc:
            # Undecodable content encoding, redirect loops
            logger.warning("Request failed: %s %s", request.method, _path_of(request.url))
            return TransportFailure(reason="network", message=f"Request failed: {exc}")

        return RawResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _path_of(url: str) -> str:
    # Query strings may carry customer data; log the path only
    return httpx.URL(url).path
