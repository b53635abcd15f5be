"""Client facade wiring settings -> transport -> dispatchers -> resources.

Usage::

    settings = OmiseSettings()
    with OmiseClient(settings) as omise:
        result = omise.customers.retrieve("cust_test_4xtrb759599jsxlhkrb")
        if result.ok:
            print(result.value.email)
        else:
            print(result.error.message)
"""

from __future__ import annotations

import logging

from omise.api.dispatch import Dispatcher
from omise.api.request import RequestBuilder
from omise.api.transport import HttpxTransport, Transport
from omise.config.settings import OmiseSettings
from omise.resources import (
    AccountResource,
    BalanceResource,
    CardResource,
    ChargeResource,
    CustomerResource,
    DisputeResource,
    EventResource,
    RecipientResource,
    RefundResource,
    TokenResource,
    TransferResource,
)

logger = logging.getLogger(__name__)


class OmiseClient:
    """Entry point exposing every resource module.

    Parameters
    ----------
    settings:
        Keys, hosts, API version and timeout.
    transport:
        Transport shared by both hosts. Defaults to an ``HttpxTransport``
        owned (and closed) by this client.
    """

    def __init__(self, settings: OmiseSettings, transport: Transport | None = None) -> None:
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(
            timeout_seconds=settings.timeout_seconds
        )

        api = Dispatcher(
            RequestBuilder(
                settings.api_url,
                settings.secret_key,
                settings.api_version,
                settings.user_agent,
            ),
            self._transport,
        )
        vault = Dispatcher(
            RequestBuilder(
                settings.vault_url,
                settings.public_key or settings.secret_key,
                settings.api_version,
                settings.user_agent,
            ),
            self._transport,
        )

        self.account = AccountResource(api)
        self.balance = BalanceResource(api)
        self.cards = CardResource(api)
        self.charges = ChargeResource(api)
        self.customers = CustomerResource(api)
        self.disputes = DisputeResource(api)
        self.events = EventResource(api)
        self.recipients = RecipientResource(api)
        self.refunds = RefundResource(api)
        self.transfers = TransferResource(api)
        self.tokens = TokenResource(vault)

        logger.debug("Omise client ready for %s (vault %s)", settings.api_url, settings.vault_url)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()

    def __enter__(self) -> OmiseClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
