"""Either-style result for services that return raw data."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .action_response import ActionResponse

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Carries either a value or the ActionResponse describing why there is none."""

    value: Optional[T] = None
    error: Optional[ActionResponse] = None

    @classmethod
    def right(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def left(cls, error: ActionResponse) -> "ServiceResult[T]":
        return cls(error=error)

    def is_right(self) -> bool:
        return self.error is None

    def is_left(self) -> bool:
        return self.error is not None
