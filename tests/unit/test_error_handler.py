"""Unit tests for the error value, exceptions and FastAPI exception handlers."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, ValidationError

from omise.api.errors import (
    GENERIC_ERROR_MESSAGE,
    EncodingError,
    ErrorKind,
    OmiseError,
    OmiseException,
    ResultError,
)
from omise.api.result import Failure
from omise.middleware.error_handler import (
    error_meta,
    register_error_handlers,
    status_for_error,
)


# ---------------------------------------------------------------------------
# Test app fixture
# ---------------------------------------------------------------------------


def _error(kind: ErrorKind, code: str = "boom", message: str = "it broke") -> OmiseError:
    return OmiseError(kind=kind, code=code, message=message)


class Payload(BaseModel):
    name: str
    age: int


def _make_app() -> FastAPI:
    """Build a minimal FastAPI app with error handlers registered."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/unwrap/{kind}")
    async def _unwrap(kind: str):
        Failure(_error(ErrorKind(kind), code="not_found", message="charge not found")).unwrap()

    @app.get("/raise-unhandled")
    async def _raise_unhandled():
        raise RuntimeError("something unexpected")

    @app.post("/validate")
    async def _validate(payload: Payload):
        return {"ok": True}

    return app


@pytest.fixture()
def client():
    return TestClient(_make_app(), raise_server_exceptions=False)


# ---------------------------------------------------------------------------
# Error value and exceptions
# ---------------------------------------------------------------------------


class TestOmiseError:
    def test_message_defaults_to_generic_text(self):
        assert OmiseError(kind=ErrorKind.API, code="x").message == GENERIC_ERROR_MESSAGE

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError):
            OmiseError(kind=ErrorKind.API, code="x", message="")

    def test_frozen(self):
        error = _error(ErrorKind.API)
        with pytest.raises(ValidationError):
            error.code = "other"


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(EncodingError, OmiseException)
        assert issubclass(ResultError, OmiseException)

    def test_default_message(self):
        assert EncodingError().message == "Request parameters could not be encoded"

    def test_details_from_kwargs(self):
        exc = EncodingError("bad value", key="card")
        assert str(exc) == "bad value"
        assert exc.details == {"key": "card"}

    def test_result_error_carries_error_value(self):
        error = _error(ErrorKind.TRANSPORT, code="timeout", message="timed out")
        exc = ResultError(error)
        assert exc.error is error
        assert exc.message == "timed out"
        assert exc.details == {"kind": "transport", "code": "timeout"}


# ---------------------------------------------------------------------------
# Status mapping
# ---------------------------------------------------------------------------


class TestStatusForError:
    @pytest.mark.parametrize(
        ("kind", "status"),
        [
            (ErrorKind.API, 400),
            (ErrorKind.TRANSPORT, 503),
            (ErrorKind.MALFORMED_RESPONSE, 502),
            (ErrorKind.DECODE, 502),
            (ErrorKind.ENCODING, 500),
        ],
    )
    def test_every_kind_has_a_status(self, kind, status):
        assert status_for_error(_error(kind)) == status

    def test_error_meta(self):
        assert error_meta(_error(ErrorKind.API, code="invalid_card")) == {
            "kind": "api",
            "code": "invalid_card",
        }


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


class TestHandlers:
    @pytest.mark.parametrize(
        ("kind", "status"),
        [("api", 400), ("transport", 503), ("decode", 502)],
    )
    def test_unwrapped_failure_becomes_envelope(self, client, kind, status):
        resp = client.get(f"/unwrap/{kind}")
        body = resp.json()

        assert resp.status_code == status
        assert body == {
            "success": False,
            "data": None,
            "error": "charge not found",
            "meta": {"kind": kind, "code": "not_found"},
        }

    def test_request_validation(self, client):
        resp = client.post("/validate", json={"name": "x", "age": "not-a-number"})
        body = resp.json()

        assert resp.status_code == 422
        assert body["success"] is False
        assert body["error"] == "Validation error"
        assert body["meta"]["fields"][0]["field"] == "body -> age"

    def test_unhandled_exception_is_generic_500(self, client):
        resp = client.get("/raise-unhandled")
        body = resp.json()

        assert resp.status_code == 500
        assert body["error"] == "Internal server error"
        assert "something unexpected" not in resp.text
