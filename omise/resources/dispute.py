"""Disputes API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.dispute import Dispute, DisputeStatus
from omise.models.shapes import Entity, ListOf
from omise.resources.base import Resource, merge_params


class DisputeResource(Resource):
    endpoint = "disputes"

    def list(
        self,
        status: DisputeStatus | str | None = None,
        params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """List all disputes, or only those in ``status`` (open/pending/closed).

        A status string is sent as given; the API answers an unknown one.
        """
        segment = status.value if isinstance(status, DisputeStatus) else status
        path = self._path(segment) if segment else self._path()
        return self._get(path, ListOf(Dispute), merge_params(params, kwargs))

    def retrieve(self, dispute_id: str) -> Result:
        return self._get(self._path(dispute_id), Entity(Dispute))

    def update(
        self, dispute_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        """Respond to a dispute with a ``message``."""
        return self._send(
            Method.PATCH,
            self._path(dispute_id),
            Entity(Dispute),
            merge_params(params, kwargs),
        )
