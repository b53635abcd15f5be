"""Refund object."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool, StrictInt, StrictStr

from omise.models.base import OmiseObject


class Refund(OmiseObject):
    object: Literal["refund"] = "refund"
    id: StrictStr | None = None
    location: StrictStr | None = None
    amount: StrictInt | None = None  # Smallest currency unit
    currency: StrictStr | None = None
    voided: StrictBool | None = None
    charge: StrictStr | None = None  # Charge id
    transaction: StrictStr | None = None
    created: StrictStr | None = None
