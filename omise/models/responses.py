"""Response envelope of the donation app.

Every response of the app is wrapped in this envelope:
{ success: bool, data: T | None, error: str | None, meta: dict | None }
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all app responses."""

    success: bool
    data: T | None = None
    error: str | None = None
    meta: dict | None = None


def flash(level: str, message: str, redirect_to: str = "/") -> dict:
    """``data`` payload telling the page which flash to show and where to go."""
    return {"flash": {level: message}, "redirect_to": redirect_to}
