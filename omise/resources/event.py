"""Events API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.result import Result
from omise.models.event import Event
from omise.models.shapes import Entity, ListOf
from omise.resources.base import Resource, merge_params


class EventResource(Resource):
    endpoint = "events"

    def list(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        return self._get(self._path(), ListOf(Event), merge_params(params, kwargs))

    def retrieve(self, event_id: str) -> Result:
        return self._get(self._path(event_id), Entity(Event))
