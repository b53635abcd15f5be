"""Transfers API: payouts to the merchant's or a recipient's bank account."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.shapes import Entity, ListOf
from omise.models.transfer import Transfer
from omise.resources.base import Resource, merge_params


class TransferResource(Resource):
    endpoint = "transfers"

    def list(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        return self._get(self._path(), ListOf(Transfer), merge_params(params, kwargs))

    def retrieve(self, transfer_id: str) -> Result:
        return self._get(self._path(transfer_id), Entity(Transfer))

    def create(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        """Create a transfer of ``amount``; ``recipient`` defaults to the merchant."""
        return self._send(
            Method.POST, self._path(), Entity(Transfer), merge_params(params, kwargs)
        )

    def update(
        self, transfer_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        return self._send(
            Method.PATCH,
            self._path(transfer_id),
            Entity(Transfer),
            merge_params(params, kwargs),
        )

    def destroy(self, transfer_id: str) -> Result:
        return self._send(Method.DELETE, self._path(transfer_id), Entity(Transfer))
