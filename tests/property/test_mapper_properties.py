"""Property tests for the response mapper.

- Absent or null fields take their defaults.
- Error payloads keep the remote code and message exactly.
- Mapping is pure: the same inputs always give equal results.
- List decoding is all-or-nothing.
"""

from __future__ import annotations

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from omise.api.errors import ErrorKind
from omise.api.mapper import map_response
from omise.api.result import Failure, Success
from omise.models import Customer, Entity, ListOf

# --- Strategies ---

_CUSTOMER_STRING_FIELDS = ("id", "email", "description", "location", "default_card", "created")

texts = st.text(max_size=40, alphabet=st.characters(blacklist_categories=("Cs",)))
non_empty_texts = st.text(min_size=1, max_size=40, alphabet=st.characters(blacklist_categories=("Cs",)))
present_fields = st.dictionaries(
    st.sampled_from(_CUSTOMER_STRING_FIELDS),
    st.one_of(texts, st.none()),
)
error_statuses = st.integers(min_value=400, max_value=599)
any_statuses = st.integers(min_value=100, max_value=599)
json_bodies = st.recursive(
    st.one_of(st.none(), st.booleans(), st.integers(), texts),
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(st.sampled_from(["id", "code", "message", "data", "total", "x"]), children, max_size=4),
    ),
    max_leaves=8,
).map(lambda value: json.dumps(value).encode("utf-8"))
raw_bodies = st.one_of(json_bodies, st.binary(max_size=64))


def _body(payload: object) -> bytes:
    return json.dumps(payload).encode("utf-8")


# --- Properties ---


@settings(max_examples=200)
@given(fields=present_fields)
def test_absent_and_null_fields_take_defaults(fields: dict) -> None:
    result = map_response(200, _body({"object": "customer", **fields}), Entity(Customer))

    assert isinstance(result, Success)
    customer = result.value
    for name in _CUSTOMER_STRING_FIELDS:
        assert getattr(customer, name) == fields.get(name)
    assert customer.deleted is False
    assert customer.metadata == {}
    assert customer.cards is None


@settings(max_examples=200)
@given(status=error_statuses, code=non_empty_texts, message=non_empty_texts)
def test_error_code_and_message_are_preserved(status: int, code: str, message: str) -> None:
    body = _body({"object": "error", "code": code, "message": message})
    result = map_response(status, body, Entity(Customer))

    assert isinstance(result, Failure)
    assert result.error.kind is ErrorKind.API
    assert result.error.code == code
    assert result.error.message == message
    assert result.error.status_code == status


@settings(max_examples=200)
@given(status=any_statuses, body=raw_bodies)
def test_mapping_is_pure(status: int, body: bytes) -> None:
    first = map_response(status, body, Entity(Customer))
    second = map_response(status, body, Entity(Customer))

    assert first == second
    if isinstance(first, Failure):
        assert first.error.message


@settings(max_examples=100)
@given(status=any_statuses, body=raw_bodies)
def test_non_2xx_is_never_success(status: int, body: bytes) -> None:
    result = map_response(status, body, Entity(Customer))
    if not 200 <= status < 300:
        assert isinstance(result, Failure)
        assert result.error.kind in (ErrorKind.API, ErrorKind.MALFORMED_RESPONSE)


@settings(max_examples=100)
@given(
    size=st.integers(min_value=0, max_value=8),
    bad_index=st.one_of(st.none(), st.integers(min_value=0, max_value=7)),
)
def test_list_decoding_is_all_or_nothing(size: int, bad_index: int | None) -> None:
    items: list[dict] = [{"object": "customer", "id": f"cust_{i}"} for i in range(size)]
    corrupted = bad_index is not None and bad_index < size
    if corrupted:
        items[bad_index]["email"] = 42

    page = {"object": "list", "data": items, "total": size, "offset": 0, "limit": 20}
    result = map_response(200, _body(page), ListOf(Customer))

    if corrupted:
        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.DECODE
        assert result.error.details["fields"][0]["field"] == f"data -> {bad_index} -> email"
    else:
        assert isinstance(result, Success)
        assert [c.id for c in result.value.data] == [f"cust_{i}" for i in range(size)]
