"""Event object.

``data`` holds the object the event is about; its type depends on ``key``
(``charge.create``, ``customer.update``, ...), so it is kept as raw JSON.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import StrictBool, StrictStr

from omise.models.base import OmiseObject


class Event(OmiseObject):
    object: Literal["event"] = "event"
    id: StrictStr | None = None
    livemode: StrictBool | None = None
    location: StrictStr | None = None
    key: StrictStr | None = None
    data: dict[str, Any] | None = None
    created: StrictStr | None = None
