"""Charges API: https://www.omise.co/charges-api"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.charge import Charge
from omise.models.shapes import Entity, ListOf
from omise.resources.base import Resource, merge_params


class ChargeResource(Resource):
    """Create, list, update, capture and reverse charges."""

    endpoint = "charges"

    def list(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        return self._get(self._path(), ListOf(Charge), merge_params(params, kwargs))

    def retrieve(self, charge_id: str) -> Result:
        return self._get(self._path(charge_id), Entity(Charge))

    def create(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        """Create a charge.

        Request parameters: ``amount`` and ``currency`` (required), ``card``
        (token id, or card id together with ``customer``), ``description``,
        ``capture`` (default true), ``return_uri``.
        """
        return self._send(
            Method.POST, self._path(), Entity(Charge), merge_params(params, kwargs)
        )

    def update(
        self, charge_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        return self._send(
            Method.PATCH, self._path(charge_id), Entity(Charge), merge_params(params, kwargs)
        )

    def capture(self, charge_id: str) -> Result:
        """Capture an authorized charge created with ``capture=false``."""
        return self._send(Method.POST, self._path(charge_id, "capture"), Entity(Charge))

    def reverse(self, charge_id: str) -> Result:
        """Release the funds of an authorized, uncaptured charge."""
        return self._send(Method.POST, self._path(charge_id, "reverse"), Entity(Charge))
