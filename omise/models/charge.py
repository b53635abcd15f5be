"""Charge object."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, StrictBool, StrictInt, StrictStr

from omise.models.base import OmiseObject
from omise.models.card import Card
from omise.models.dispute import Dispute
from omise.models.list import OmiseList
from omise.models.refund import Refund


class Charge(OmiseObject):
    """A card charge and its refunds."""

    object: Literal["charge"] = "charge"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    amount: StrictInt | None = None  # Smallest currency unit
    currency: StrictStr | None = None
    description: StrictStr | None = None
    status: StrictStr | None = None
    capture: StrictBool | None = None
    authorized: StrictBool | None = None
    reversed: StrictBool | None = None
    paid: StrictBool | None = None
    transaction: StrictStr | None = None
    refunded: StrictInt | None = None  # Amount refunded so far
    refunds: OmiseList[Refund] | None = None
    return_uri: StrictStr | None = None
    authorize_uri: StrictStr | None = None
    reference: StrictStr | None = None
    failure_code: StrictStr | None = None
    failure_message: StrictStr | None = None
    card: Card | None = None
    customer: StrictStr | None = None  # Customer id
    ip: StrictStr | None = None
    dispute: Dispute | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created: StrictStr | None = None
