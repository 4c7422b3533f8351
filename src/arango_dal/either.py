"""Dual-mode results: a job receipt on the left, a payload on the right."""

from dataclasses import dataclass
from typing import Generic, Never, TypeVar, final

from arango_dal.errors import DalError, ErrorKind
from arango_dal.models.common import JobInfo

L = TypeVar("L")
R = TypeVar("R")


@final
@dataclass(frozen=True, slots=True)
class Left(Generic[L]):
    """The left branch; for `ArangoEither` it holds a `JobInfo`."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def unwrap_left(self) -> L:
        return self.value

    def unwrap_right(self) -> Never:
        msg = f"Expected a right value, got {self!r}"
        raise DalError(msg, kind=ErrorKind.INVALID_INPUT)


@final
@dataclass(frozen=True, slots=True)
class Right(Generic[R]):
    """The right branch; for `ArangoEither` it holds the decoded payload."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def unwrap_left(self) -> Never:
        msg = f"Expected a left value, got {self!r}"
        raise DalError(msg, kind=ErrorKind.INVALID_INPUT)

    def unwrap_right(self) -> R:
        return self.value


type Either[A, B] = Left[A] | Right[B]

# Result of every resource operation.
type ArangoEither[T] = Either[JobInfo, T]
