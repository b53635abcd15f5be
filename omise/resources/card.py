"""Cards API: cards belong to a customer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.card import Card
from omise.models.shapes import Entity, ListOf
from omise.resources.base import Resource, merge_params


class CardResource(Resource):
    endpoint = "customers"

    def list(
        self, customer_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        return self._get(
            self._path(customer_id, "cards"), ListOf(Card), merge_params(params, kwargs)
        )

    def retrieve(self, customer_id: str, card_id: str) -> Result:
        return self._get(self._path(customer_id, "cards", card_id), Entity(Card))

    def update(
        self,
        customer_id: str,
        card_id: str,
        params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """Update card holder details (``name``, ``city``, ``postal_code``,
        ``expiration_month``, ``expiration_year``)."""
        return self._send(
            Method.PATCH,
            self._path(customer_id, "cards", card_id),
            Entity(Card),
            merge_params(params, kwargs),
        )

    def destroy(self, customer_id: str, card_id: str) -> Result:
        return self._send(
            Method.DELETE, self._path(customer_id, "cards", card_id), Entity(Card)
        )
