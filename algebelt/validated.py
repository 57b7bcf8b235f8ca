"""Accumulating validation over a series of results.

``Ok`` and ``Err`` describe the result of one operation that may fail.
``into_validated`` turns one of them into a ``Validated``, and adding further
results (or other ``Validated`` values) keeps every success value in order.
If any of them failed, it collects every error in order instead, so all
problems are reported at once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

__all__ = ["Err", "Ok", "Validated", "ValidationError", "into_validated"]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result holding ``value``."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result holding ``error``."""

    error: E


class ValidationError(Exception):
    """Raised when a failed ``Validated`` is turned into a result."""

    def __init__(self, errors: Iterable[Any]) -> None:
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} validation error(s): {self.errors!r}")


@dataclass(frozen=True)
class Validated:
    """Either the success values of all steps, or the errors of the failed ones.

    A ``Validated`` with ``errors`` set (even to an empty tuple) is a failure;
    otherwise it holds ``values``.
    """

    values: tuple = ()
    errors: tuple | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if self.errors is not None:
            object.__setattr__(self, "errors", tuple(self.errors))
            if self.values:
                raise ValueError("a failed Validated holds no values")

    @classmethod
    def ok(cls, *values: Any) -> Validated:
        """Return a successful ``Validated`` holding ``values``."""
        return cls(values=values)

    @classmethod
    def failure(cls, *errors: Any) -> Validated:
        """Return a failed ``Validated`` holding ``errors``."""
        return cls(errors=errors)

    def is_ok(self) -> bool:
        """Return True if every step succeeded."""
        return self.errors is None

    def is_err(self) -> bool:
        """Return True if any step failed."""
        return not self.is_ok()

    def into_result(self) -> tuple:
        """Return the success values, or raise ``ValidationError`` with all errors."""
        if self.errors is not None:
            raise ValidationError(self.errors)
        return self.values

    def __add__(self, other: Any) -> Validated:
        if isinstance(other, (Ok, Err)):
            other = into_validated(other)
        if not isinstance(other, Validated):
            return NotImplemented
        if self.errors is not None and other.errors is not None:
            return Validated(errors=self.errors + other.errors)
        if self.errors is not None:
            return self
        if other.errors is not None:
            return other
        return Validated(values=self.values + other.values)


def into_validated(result: Ok | Err) -> Validated:
    """Lift a single ``Ok`` or ``Err`` into a ``Validated``."""
    if isinstance(result, Ok):
        return Validated(values=(result.value,))
    if isinstance(result, Err):
        return Validated(errors=(result.error,))
    raise TypeError(f"expected Ok or Err, got {type(result).__name__}")