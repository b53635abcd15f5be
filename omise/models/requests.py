"""Request models of the donation app."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Houses offered on the donation page
HOUSES: tuple[str, ...] = (
    "Stark",
    "Lannister",
    "Targaryen",
    "Baratheon",
    "Greyjoy",
    "Tyrell",
    "Martell",
    "Tully",
    "Arryn",
)


class DonationRequest(BaseModel):
    """A donation submitted from the page after the card was tokenized."""

    omise_token: str = Field(..., min_length=1)  # tokn_... from Omise.js
    house: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0)  # Smallest currency unit
