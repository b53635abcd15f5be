"""Shared test fixtures for the client test suite."""

from __future__ import annotations

import json
import os

import pytest

from omise.api.dispatch import Dispatcher
from omise.api.request import PreparedRequest, RequestBuilder
from omise.api.transport import RawResponse, SendOutcome
from omise.config.settings import OmiseSettings


# ---------------------------------------------------------------------------
# Ensure required env vars are set for OmiseSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so OmiseSettings can be instantiated in tests."""
    defaults = {
        "OMISE_SECRET_KEY": "skey_test_4xs8breq3htbkj03d2x",
        "OMISE_PUBLIC_KEY": "pkey_test_4xs8breq32civvobx15",
    }
    for key, value in defaults.items():
        if key not in os.environ:
            monkeypatch.setenv(key, value)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> OmiseSettings:
    """Test settings pointing at fake hosts."""
    return OmiseSettings(
        secret_key="skey_test_4xs8breq3htbkj03d2x",
        public_key="pkey_test_4xs8breq32civvobx15",
        api_url="https://api.omise.test",
        vault_url="https://vault.omise.test",
        api_version="2019-05-29",
        user_agent="omise-python/test",
        timeout_seconds=5.0,
    )


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------

class FakeTransport:
    """Records every request and replays queued outcomes.

    The last queued outcome is repeated once the queue is down to one item.
    """

    def __init__(self) -> None:
        self.requests: list[PreparedRequest] = []
        self._outcomes: list[SendOutcome] = []

    def queue(self, outcome: SendOutcome) -> FakeTransport:
        self._outcomes.append(outcome)
        return self

    def queue_json(self, status_code: int, payload: object) -> FakeTransport:
        return self.queue(
            RawResponse(status_code=status_code, body=json.dumps(payload).encode("utf-8"))
        )

    def send(self, request: PreparedRequest) -> SendOutcome:
        self.requests.append(request)
        if not self._outcomes:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        if len(self._outcomes) > 1:
            return self._outcomes.pop(0)
        return self._outcomes[0]

    @property
    def last_request(self) -> PreparedRequest:
        return self.requests[-1]


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def builder(settings: OmiseSettings) -> RequestBuilder:
    return RequestBuilder(
        settings.api_url,
        settings.secret_key,
        settings.api_version,
        settings.user_agent,
    )


@pytest.fixture
def dispatcher(builder: RequestBuilder, fake_transport: FakeTransport) -> Dispatcher:
    return Dispatcher(builder, fake_transport)
