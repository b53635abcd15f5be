"""Customer object."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, StrictBool, StrictStr

from omise.models.base import OmiseObject
from omise.models.card import Card
from omise.models.list import OmiseList


class Customer(OmiseObject):
    """A customer, with the page of cards attached to it."""

    object: Literal["customer"] = "customer"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    default_card: StrictStr | None = None  # Card id
    email: StrictStr | None = None
    description: StrictStr | None = None
    created: StrictStr | None = None
    cards: OmiseList[Card] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    deleted: StrictBool = False
