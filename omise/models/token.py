"""Card token object, created on the vault host."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool, StrictStr

from omise.models.base import OmiseObject
from omise.models.card import Card


class Token(OmiseObject):
    object: Literal["token"] = "token"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    used: StrictBool | None = None
    card: Card | None = None
    created: StrictStr | None = None
