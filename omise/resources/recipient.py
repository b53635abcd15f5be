"""Recipients API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.recipient import Recipient
from omise.models.shapes import Entity, ListOf
from omise.resources.base import Resource, merge_params


class RecipientResource(Resource):
    endpoint = "recipients"

    def list(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        return self._get(self._path(), ListOf(Recipient), merge_params(params, kwargs))

    def retrieve(self, recipient_id: str) -> Result:
        return self._get(self._path(recipient_id), Entity(Recipient))

    def create(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        """Create a recipient.

        Request parameters: ``name``, ``type`` and ``bank_account`` (mapping
        with ``brand``, ``number``, ``name``) are required; ``email``,
        ``description`` and ``tax_id`` are optional.
        """
        return self._send(
            Method.POST, self._path(), Entity(Recipient), merge_params(params, kwargs)
        )

    def update(
        self, recipient_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        return self._send(
            Method.PATCH,
            self._path(recipient_id),
            Entity(Recipient),
            merge_params(params, kwargs),
        )

    def destroy(self, recipient_id: str) -> Result:
        return self._send(Method.DELETE, self._path(recipient_id), Entity(Recipient))
