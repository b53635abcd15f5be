"""Decoded API objects, the list envelope and target shape descriptors."""

from omise.models.account import Account, Balance
from omise.models.bank_account import BankAccount
from omise.models.base import OmiseObject
from omise.models.card import Card
from omise.models.charge import Charge
from omise.models.customer import Customer
from omise.models.dispute import Dispute, DisputeStatus
from omise.models.event import Event
from omise.models.list import OmiseList
from omise.models.recipient import Recipient
from omise.models.refund import Refund
from omise.models.shapes import Entity, ListOf, TargetShape
from omise.models.token import Token
from omise.models.transfer import Transfer

__all__ = [
    "Account",
    "Balance",
    "BankAccount",
    "Card",
    "Charge",
    "Customer",
    "Dispute",
    "DisputeStatus",
    "Entity",
    "Event",
    "ListOf",
    "OmiseList",
    "OmiseObject",
    "Recipient",
    "Refund",
    "TargetShape",
    "Token",
    "Transfer",
]
