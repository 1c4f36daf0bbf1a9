"""Result wrapper for the non-raising ``try_*`` operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .exceptions import MultibaseError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a fallible operation: exactly one of ``value``/``error`` is meaningful."""

    value: T | None = None
    error: MultibaseError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: MultibaseError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> str | None:
        """Error code (e.g. ``"unsupported_prefix"``), or None on success."""
        return None if self.error is None else self.error.code

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.ok


def capture(func: Callable[..., T], /, *args: Any, **kwargs: Any) -> Result[T]:
    """Run ``func`` and fold any ``MultibaseError`` into a failed Result."""
    try:
        return Result.success(func(*args, **kwargs))
    except MultibaseError as err:
        return Result.failure(err)


__all__ = ["Result", "capture"]
