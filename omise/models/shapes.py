"""Target shape descriptors.

A resource module tells the response mapper what it expects back: a single
entity (``Entity(Customer)``) or a page of entities (``ListOf(Customer)``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from omise.models.base import OmiseObject
from omise.models.list import OmiseList

T = TypeVar("T", bound=OmiseObject)


@dataclass(frozen=True)
class Entity(Generic[T]):
    """Decode the response body as one ``model``."""

    model: type[T]

    def validator_type(self) -> type[OmiseObject]:
        return self.model

    def describe(self) -> str:
        return self.model.__name__


@dataclass(frozen=True)
class ListOf(Generic[T]):
    """Decode the response body as ``OmiseList[model]``."""

    model: type[T]

    def validator_type(self) -> type[OmiseObject]:
        return OmiseList[self.model]  # type: ignore[name-defined]

    def describe(self) -> str:
        return f"list of {self.model.__name__}"


TargetShape = Union[Entity, ListOf]
