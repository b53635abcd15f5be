"""Refunds API: refunds belong to a charge."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.refund import Refund
from omise.models.shapes import Entity, ListOf
from omise.resources.base import Resource, merge_params


class RefundResource(Resource):
    endpoint = "charges"

    def list(
        self, charge_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        return self._get(
            self._path(charge_id, "refunds"), ListOf(Refund), merge_params(params, kwargs)
        )

    def retrieve(self, charge_id: str, refund_id: str) -> Result:
        return self._get(self._path(charge_id, "refunds", refund_id), Entity(Refund))

    def create(
        self, charge_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        """Refund ``amount`` (smallest currency unit) of a charge."""
        return self._send(
            Method.POST,
            self._path(charge_id, "refunds"),
            Entity(Refund),
            merge_params(params, kwargs),
        )
