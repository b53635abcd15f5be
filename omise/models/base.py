"""Base model for decoded API objects.

Entities are immutable snapshots of one API response. Every field is
optional at decode time: an absent key or a JSON ``null`` takes the field's
default. Scalar fields use pydantic's strict types so that a value of the
wrong JSON type fails decoding instead of being coerced.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class OmiseObject(BaseModel):
    """Common configuration for every entity and list envelope."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null and absent are the same thing: both fall back to the default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
