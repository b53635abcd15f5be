"""Shared plumbing for resource modules.

A resource module is a static list of endpoint paths, verbs and target
shapes bound to a ``Dispatcher``. Parameters are passed through to the API
verbatim; nothing is validated client side.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from omise.api.dispatch import Dispatcher
from omise.api.request import FormBody, Method, RequestOptions
from omise.api.result import Result
from omise.models.shapes import TargetShape


def merge_params(
    params: Mapping[str, Any] | None, overrides: Mapping[str, Any]
) -> dict[str, Any]:
    """Combine an explicit mapping with keyword arguments (keywords win)."""
    merged: dict[str, Any] = dict(params or {})
    merged.update(overrides)
    return merged


class Resource:
    """Base class binding an endpoint to a dispatcher."""

    endpoint: str = ""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def _path(self, *parts: str) -> str:
        segments = [self.endpoint] + [quote(str(part), safe="") for part in parts]
        return "/".join(segment for segment in segments if segment)

    def _get(
        self,
        path: str,
        target: TargetShape,
        query: Mapping[str, Any] | None = None,
    ) -> Result:
        return self._dispatcher.execute(
            Method.GET, path, RequestOptions(target=target, query=dict(query or {}))
        )

    def _send(
        self,
        method: Method,
        path: str,
        target: TargetShape,
        params: Mapping[str, Any] | None = None,
    ) -> Result:
        body = FormBody(dict(params)) if params else None
        return self._dispatcher.execute(
            method, path, RequestOptions(target=target, body=body)
        )
