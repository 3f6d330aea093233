"""Success/failure containers returned by process calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from proccall.errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A completed call carrying its value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[object], F]) -> Success[T]:
        return self

    def bind(self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A failed call carrying its error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    def map(self, fn: Callable[[object], U]) -> Failure[E]:
        return self

    def map_error(self, fn: Callable[[E], F]) -> Failure[F]:
        return Failure(fn(self.error))

    def bind(self, fn: Callable[[object], Result[U, F]]) -> Failure[E]:
        return self

    def unwrap(self) -> object:
        """Raise the carried error.

        Raises:
            BaseException: The error itself when it is an exception.
            UnwrapError: When the error is a plain value.
        """

        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)


Result = Union[Success[T], Failure[E]]
