"""Tokens API, served by the vault host and authenticated with the public key.

Card data should normally be tokenized in the browser; creating tokens
server side is mostly useful for tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.shapes import Entity
from omise.models.token import Token
from omise.resources.base import Resource, merge_params


class TokenResource(Resource):
    endpoint = "tokens"

    def create(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        """Tokenize a card.

        Request parameters: ``card`` mapping with ``name``, ``number``,
        ``expiration_month``, ``expiration_year``, ``security_code`` and
        optionally ``city`` / ``postal_code``; sent as ``card[name]=...``.
        """
        return self._send(
            Method.POST, self._path(), Entity(Token), merge_params(params, kwargs)
        )

    def retrieve(self, token_id: str) -> Result:
        return self._get(self._path(token_id), Entity(Token))
