"""Operation Result — the success/failure envelope returned by every mutating service call.

Invariants:
    - success is True iff error is None
    - message is always human-readable (never a raw traceback)
    - value is only set on success

Design Decisions:
    - Result object instead of raising across the service boundary: callers
      (API routes, scripts) decide how to surface a failure
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from daybook.core.errors import DaybookError

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a mutating operation."""
    success: bool
    message: str
    value: T | None = None
    error: DaybookError | None = None

    @classmethod
    def ok(cls, message: str, value: T | None = None) -> "OperationResult[T]":
        return cls(success=True, message=message, value=value)

    @classmethod
    def fail(cls, error: DaybookError) -> "OperationResult[T]":
        return cls(success=False, message=error.message, error=error)

    def unwrap(self) -> T | None:
        """Return value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
