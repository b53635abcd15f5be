"""Transfer (payout) object."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool, StrictInt, StrictStr

from omise.models.bank_account import BankAccount
from omise.models.base import OmiseObject


class Transfer(OmiseObject):
    object: Literal["transfer"] = "transfer"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    recipient: StrictStr | None = None  # Recipient id
    bank_account: BankAccount | None = None
    sent: StrictBool | None = None
    paid: StrictBool | None = None
    amount: StrictInt | None = None
    currency: StrictStr | None = None
    failure_code: StrictStr | None = None
    failure_message: StrictStr | None = None
    transaction: StrictStr | None = None
    created: StrictStr | None = None
    deleted: StrictBool = False
