"""Paginated list envelope.

Wire format::

    {"object": "list", "data": [...], "total": 1, "offset": 0, "limit": 20,
     "from": "1970-01-01T00:00:00Z", "to": "2015-01-01T00:00:00Z",
     "order": "chronological"}
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import Field, StrictInt, StrictStr

from omise.models.base import OmiseObject

T = TypeVar("T", bound=OmiseObject)


class OmiseList(OmiseObject, Generic[T]):
    """Ordered, homogeneous page of entities with pagination metadata."""

    object: Literal["list"] = "list"
    data: list[T]
    total: StrictInt
    offset: StrictInt
    limit: StrictInt
    from_: StrictStr | None = Field(default=None, alias="from")
    to: StrictStr | None = None
    order: StrictStr | None = None
    location: StrictStr | None = None