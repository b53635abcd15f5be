"""Dispute (chargeback) object."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import StrictBool, StrictInt, StrictStr

from omise.models.base import OmiseObject


class DisputeStatus(str, Enum):
    """Dispute states, also used as list filters."""

    OPEN = "open"
    PENDING = "pending"
    CLOSED = "closed"


class Dispute(OmiseObject):
    object: Literal["dispute"] = "dispute"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    amount: StrictInt | None = None
    currency: StrictStr | None = None
    status: StrictStr | None = None
    message: StrictStr | None = None
    charge: StrictStr | None = None  # Charge id
    created: StrictStr | None = None
