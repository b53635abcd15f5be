"""Card object, returned on its own and nested in charges, tokens and customers."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool, StrictInt, StrictStr

from omise.models.base import OmiseObject


class Card(OmiseObject):
    object: Literal["card"] = "card"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    country: StrictStr | None = None
    city: StrictStr | None = None
    postal_code: StrictStr | None = None
    financing: StrictStr | None = None
    bank: StrictStr | None = None
    brand: StrictStr | None = None
    last_digits: StrictStr | None = None
    fingerprint: StrictStr | None = None
    name: StrictStr | None = None
    expiration_month: StrictInt | None = None
    expiration_year: StrictInt | None = None
    security_code_check: StrictBool | None = None
    created: StrictStr | None = None
    deleted: StrictBool = False
