"""Transfer recipient object."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool, StrictStr

from omise.models.bank_account import BankAccount
from omise.models.base import OmiseObject


class Recipient(OmiseObject):
    object: Literal["recipient"] = "recipient"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    verified: StrictBool | None = None
    active: StrictBool | None = None
    name: StrictStr | None = None
    email: StrictStr | None = None
    description: StrictStr | None = None
    type: StrictStr | None = None  # "individual" or "corporation"
    tax_id: StrictStr | None = None
    bank_account: BankAccount | None = None
    failure_code: StrictStr | None = None
    created: StrictStr | None = None
    deleted: StrictBool = False
