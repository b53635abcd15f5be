"""Property tests for the readiness endpoint.

/readiness answers 200 if and only if the authenticated account lookup
succeeds.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient
from hypothesis import given, settings
from hypothesis import strategies as st

from omise.api.errors import ErrorKind, OmiseError
from omise.api.result import Failure, Success
from omise.models import Account
from omise.routers.health import create_health_router


def _make_app(account: MagicMock | None) -> FastAPI:
    app = FastAPI()
    app.include_router(create_health_router(account=account))
    return app


@settings(max_examples=100, deadline=None)
@given(kind=st.one_of(st.none(), st.sampled_from(list(ErrorKind))))
def test_readiness_reflects_account_lookup(kind: ErrorKind | None) -> None:
    account = MagicMock()
    if kind is None:
        account.retrieve.return_value = Success(Account(id="acct_1"))
    else:
        account.retrieve.return_value = Failure(OmiseError(kind=kind, code="boom"))

    response = TestClient(_make_app(account)).get("/readiness")
    body = response.json()

    if kind is None:
        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["ready"] is True
    else:
        assert response.status_code == 503
        assert body["success"] is False
        assert body["data"]["ready"] is False
        assert body["meta"] == {"kind": kind.value, "code": "boom"}


def test_not_ready_without_client() -> None:
    response = TestClient(_make_app(None)).get("/readiness")
    assert response.status_code == 503
    assert response.json()["error"] == "Omise client not configured"
