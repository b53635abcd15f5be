"""Per-resource endpoint modules bound to a dispatcher."""

from omise.resources.account import AccountResource, BalanceResource
from omise.resources.card import CardResource
from omise.resources.charge import ChargeResource
from omise.resources.customer import CustomerResource
from omise.resources.dispute import DisputeResource
from omise.resources.event import EventResource
from omise.resources.recipient import RecipientResource
from omise.resources.refund import RefundResource
from omise.resources.token import TokenResource
from omise.resources.transfer import TransferResource

__all__ = [
    "AccountResource",
    "BalanceResource",
    "CardResource",
    "ChargeResource",
    "CustomerResource",
    "DisputeResource",
    "EventResource",
    "RecipientResource",
    "RefundResource",
    "TokenResource",
    "TransferResource",
]
