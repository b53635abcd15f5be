"""Request builder.

Turns ``(method, endpoint path, options)`` into a fully specified
``PreparedRequest``: absolute URL, headers (Basic auth, API version, content
type) and encoded body. No network I/O happens here.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from omise.api.encoding import encode_json, encode_params
from omise.models.shapes import TargetShape

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class Method(str, Enum):
    """HTTP verbs used by the API."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class FormBody:
    """Parameters sent form-encoded (``card[name]=...``)."""

    params: Mapping[str, Any]


@dataclass(frozen=True)
class JsonBody:
    """Parameters sent as a JSON object."""

    params: Mapping[str, Any]


Body = Union[FormBody, JsonBody]


@dataclass(frozen=True)
class RequestOptions:
    """Options bundle for one call.

    Parameters
    ----------
    target:
        What the response should decode into. Not used by the builder.
    query:
        Query parameters, GET only.
    body:
        Form or JSON body, non-GET only.
    """

    target: TargetShape
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Body | None = None


@dataclass(frozen=True)
class PreparedRequest:
    """Everything the transport needs to perform the exchange."""

    method: str
    url: str
    headers: dict[str, str]
    body: bytes | None = None


def basic_auth_header(key: str) -> str:
    """``Authorization`` value with the key as username and an empty password."""
    token = base64.b64encode(f"{key}:".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class RequestBuilder:
    """Builds authenticated requests against one API host.

    Parameters
    ----------
    base_url:
        Host the endpoint paths are relative to (e.g. "https://api.omise.co").
    key:
        Secret (or, for the vault host, public) key used for Basic auth.
    api_version:
        Value of the ``Omise-Version`` header.
    user_agent:
        Value of the ``User-Agent`` header.
    """

    def __init__(
        self,
        base_url: str,
        key: str,
        api_version: str,
        user_agent: str,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": basic_auth_header(key),
            "Omise-Version": api_version,
            "User-Agent": user_agent,
            "Accept": JSON_CONTENT_TYPE,
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, endpoint_path: str) -> str:
        return f"{self._base_url}/{endpoint_path.lstrip('/')}"

    def build(
        self,
        method: Method | str,
        endpoint_path: str,
        options: RequestOptions,
    ) -> PreparedRequest:
        """Build the request for one call.

        Raises
        ------
        EncodingError
            If a query or body parameter cannot be encoded.
        """
        verb = Method(method.upper()).value
        url = self.url_for(endpoint_path)
        headers = dict(self._headers)
        body: bytes | None = None

        if verb == Method.GET.value:
            query = encode_params(options.query) if options.query else ""
            if query:
                url = f"{url}?{query}"
            if options.body is not None:
                logger.warning("Ignoring request body on GET %s", endpoint_path)
            return PreparedRequest(method=verb, url=url, headers=headers)

        if options.query:
            logger.warning("Ignoring query parameters on %s %s", verb, endpoint_path)

        if isinstance(options.body, FormBody):
            body = encode_params(options.body.params).encode("ascii")
            headers["Content-Type"] = FORM_CONTENT_TYPE
        elif isinstance(options.body, JsonBody):
            body = encode_json(options.body.params)
            headers["Content-Type"] = JSON_CONTENT_TYPE

        return PreparedRequest(method=verb, url=url, headers=headers, body=body)
