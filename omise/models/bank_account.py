"""Bank account attached to a recipient or a transfer."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictStr

from omise.models.base import OmiseObject


class BankAccount(OmiseObject):
    object: Literal["bank_account"] = "bank_account"
    brand: StrictStr | None = None
    last_digits: StrictStr | None = None
    name: StrictStr | None = None
    created: StrictStr | None = None
