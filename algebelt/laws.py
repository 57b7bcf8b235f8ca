"""Laws that semigroup and monoid instances are expected to obey.

Each function returns whether the law holds for the given values, so they
can serve directly as property checks.
"""

from __future__ import annotations

from typing import Any as AnyType

from .monoid import empty
from .semigroup import combine

__all__ = ["associativity", "left_identity", "right_identity"]


def associativity(a: AnyType, b: AnyType, c: AnyType) -> bool:
    """Check that ``(a <> b) <> c == a <> (b <> c)``."""
    return combine(combine(a, b), c) == combine(a, combine(b, c))


def left_identity(a: AnyType, kind: AnyType) -> bool:
    """Check that ``empty <> a == a`` for the monoid named by ``kind``."""
    return combine(empty(kind), a) == a


def right_identity(a: AnyType, kind: AnyType) -> bool:
    """Check that ``a <> empty == a`` for the monoid named by ``kind``."""
    return combine(a, empty(kind)) == a