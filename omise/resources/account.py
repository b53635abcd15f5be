"""Account and balance of the authenticated merchant."""

from __future__ import annotations

from omise.api.result import Result
from omise.models.account import Account, Balance
from omise.models.shapes import Entity
from omise.resources.base import Resource


class AccountResource(Resource):
    endpoint = "account"

    def retrieve(self) -> Result:
        return self._get(self._path(), Entity(Account))


class BalanceResource(Resource):
    endpoint = "balance"

    def retrieve(self) -> Result:
        return self._get(self._path(), Entity(Balance))
