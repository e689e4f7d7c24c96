"""Outcome of a single CHPL API operation."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# Raised by field extraction when a document does not have the expected shape
EXTRACTION_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error message, never both.

    `reason` carries the HTTP reason phrase when a response was received,
    so callers can tell "empty" apart from "failed" and see why.
    """

    value: T | None = None
    error: str | None = None
    reason: str | None = None

    @classmethod
    def success(cls, value: T, reason: str | None = None) -> "Result[T]":
        return cls(value=value, reason=reason)

    @classmethod
    def failure(cls, error: str, reason: str | None = None) -> "Result[T]":
        return cls(error=error, reason=reason)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: Any) -> T:
        """Return the value, or `default` if this is a failure."""
        return self.value if self.ok else default

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Apply `fn` to a successful value.

        Extraction errors raised by `fn` turn into a failure.
        """
        if not self.ok:
            return Result.failure(self.error, self.reason)
        try:
            return Result.success(fn(self.value), self.reason)
        except EXTRACTION_ERRORS as e:
            return Result.failure(f"Unexpected response shape: {e!r}", self.reason)
