"""Two-outcome result returned by every dispatch call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from omise.api.errors import OmiseError, ResultError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A decoded entity or list envelope."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """An unsuccessful call, carrying the uniform error value."""

    error: OmiseError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise ResultError(self.error)


Result = Union[Success[T], Failure]
