"""Outcome of a handler operation: a value or an operation failure."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OperationFailure:
    """An error raised by a store or a lookup, reduced to its kind and message."""

    name: str
    message: str

    @classmethod
    def from_exception(cls, error: BaseException) -> "OperationFailure":
        return cls(name=type(error).__name__, message=str(error))

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"name": self.name, "message": self.message}}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    failure: OperationFailure


Result = Ok[T] | Err
