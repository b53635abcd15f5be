"""Parameter encoding for query strings and request bodies.

Nested mappings are flattened with bracketed keys (``card[name]=value``) and
sequences with empty brackets (``tags[]=a&tags[]=b``). ``None`` values are
skipped so optional parameters can be passed through unconditionally.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import quote

from omise.api.errors import EncodingError

_SEQUENCE_TYPES = (list, tuple)


def _scalar_to_str(key: str, value: Any) -> str:
    """Render a scalar parameter value as its wire string."""
    if isinstance(value, Enum):
        value = value.value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise EncodingError(
        f"Unsupported value for parameter '{key}': {type(value).__name__}",
        key=key,
        type=type(value).__name__,
    )


def flatten_params(
    params: Mapping[str, Any], prefix: str | None = None
) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ordered ``(key, value)`` pairs.

    Raises
    ------
    EncodingError
        If a key is not a string or a value is not a scalar, mapping or
        list/tuple.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if not isinstance(key, str):
            raise EncodingError(
                f"Parameter keys must be strings, got {type(key).__name__}",
                key=repr(key),
            )
        full_key = f"{prefix}[{key}]" if prefix else key
        pairs.extend(_flatten_value(full_key, value))
    return pairs


def _flatten_value(key: str, value: Any) -> list[tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return flatten_params(value, prefix=key)
    if isinstance(value, _SEQUENCE_TYPES):
        pairs: list[tuple[str, str]] = []
        for item in value:
            pairs.extend(_flatten_value(f"{key}[]", item))
        return pairs
    return [(key, _scalar_to_str(key, value))]


def encode_params(params: Mapping[str, Any]) -> str:
    """URL-encode a parameter mapping (query string or form body)."""
    return "&".join(
        f"{quote(key, safe='[]')}={quote(value, safe='')}"
        for key, value in flatten_params(params)
    )


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(params: Mapping[str, Any]) -> bytes:
    """Serialize a parameter mapping to a compact JSON object."""
    try:
        return json.dumps(
            dict(params), separators=(",", ":"), default=_json_default
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Request body could not be encoded as JSON: {exc}") from exc
