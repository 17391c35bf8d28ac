"""
Result Value Object

Tagged outcome of a repository operation: a value on success, a
PexelsCacheException on failure. Failures are data, not aborts.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from ...core.exceptions import PexelsCacheException

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: PexelsCacheException | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PexelsCacheException) -> "Result[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def get_or_raise(self) -> T:
        """Return the value or raise the carried error"""
        if self.error is not None:
            raise self.error
        return self.value
