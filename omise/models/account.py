"""Account and balance objects for the authenticated merchant."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool, StrictInt, StrictStr

from omise.models.base import OmiseObject


class Account(OmiseObject):
    object: Literal["account"] = "account"
    id: StrictStr | None = None
    email: StrictStr | None = None
    location: StrictStr | None = None
    created: StrictStr | None = None


class Balance(OmiseObject):
    object: Literal["balance"] = "balance"
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    available: StrictInt | None = None
    total: StrictInt | None = None
    currency: StrictStr | None = None
