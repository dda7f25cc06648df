"""
Tagged results passed through the request handling chain.

An Outcome is either a Success carrying a value or a Failure carrying an
ApplicationError. Expected failures (invalid payload, unknown ISBN,
duplicate ISBN) travel as values instead of exceptions.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from bookstore.domain.catalog.errors import ApplicationError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def then(self, step: "Callable[[T], Outcome[U]]") -> "Outcome[U]":
        """Forward the value to the next stage."""
        return step(self.value)


@dataclass(frozen=True)
class Failure:
    error: ApplicationError

    @property
    def ok(self) -> bool:
        return False

    def then(self, step: Callable) -> "Failure":
        """Short-circuit: the next stage is never invoked."""
        return self


Outcome = Union[Success[T], Failure]
