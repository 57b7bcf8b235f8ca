"""Semigroups: values that can be combined with an associative operation.

The ``combine`` function knows how to combine the built-in types:

* ``int``, ``float`` and ``complex`` are added;
* ``str``, ``bytes`` and ``list`` are concatenated;
* ``set`` and ``frozenset`` are joined by union;
* ``dict`` values are merged key by key, combining the values of shared keys;
* ``tuple`` values are combined element by element;
* ``None`` stands for an absent value, so the other side is kept.

Any object with a ``combine`` method is combined by calling it. The wrapper
classes ``Max``, ``Min``, ``Product``, ``All`` and ``Any`` select other
combinations of their wrapped values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any as AnyType
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = [
    "All",
    "Any",
    "Max",
    "Min",
    "Product",
    "combine",
    "combine_all_option",
    "combine_n",
]


def combine(a: AnyType, b: AnyType) -> AnyType:
    """Combine two values of the same semigroup."""
    if a is None:
        return b
    if b is None:
        return a
    method = getattr(a, "combine", None)
    if callable(method):
        return method(b)
    return _combine_builtin(a, b)


def _combine_builtin(a: AnyType, b: AnyType) -> AnyType:
    if isinstance(a, bool) or isinstance(b, bool):
        raise TypeError("bool values cannot be combined; wrap them in All or Any")
    if isinstance(a, (int, float, complex, str, bytes, list)):
        return a + b
    if isinstance(a, (set, frozenset)):
        return a | b
    if isinstance(a, tuple):
        if not isinstance(b, tuple):
            raise TypeError(f"cannot combine tuple with {type(b).__name__}")
        if len(a) != len(b):
            raise ValueError(
                f"cannot combine tuples of different lengths ({len(a)} and {len(b)})"
            )
        return tuple(combine(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        if not isinstance(b, Mapping):
            raise TypeError(f"cannot combine dict with {type(b).__name__}")
        merged = dict(a)
        for key, value in b.items():
            merged[key] = combine(merged[key], value) if key in merged else value
        return merged
    raise TypeError(f"{type(a).__name__} values cannot be combined")


def combine_n(value: T, times: int) -> T:
    """Return ``value`` combined with itself ``times`` times.

    A ``times`` of 0 or 1 gives the value itself.
    """
    if times < 0:
        raise ValueError("times must not be negative")
    result = value
    for _ in range(1, times):
        result = combine(value, result)
    return result


def combine_all_option(xs: Iterable[T]) -> T | None:
    """Combine all values in ``xs``; return ``None`` when there are none."""
    iterator = iter(xs)
    try:
        first = next(iterator)
    except StopIteration:
        return None
    return reduce(combine, iterator, first)


def _check_same(self: object, other: object) -> None:
    if type(other) is not type(self):
        raise TypeError(
            f"cannot combine {type(self).__name__} with {type(other).__name__}"
        )


@dataclass(frozen=True, order=True)
class Max(Generic[T]):
    """Wraps an ordered value; combining keeps the larger one."""

    value: T

    def combine(self, other: Max[T]) -> Max[T]:
        _check_same(self, other)
        return Max(other.value) if self.value < other.value else Max(self.value)


@dataclass(frozen=True, order=True)
class Min(Generic[T]):
    """Wraps an ordered value; combining keeps the smaller one."""

    value: T

    def combine(self, other: Min[T]) -> Min[T]:
        _check_same(self, other)
        return Min(self.value) if self.value < other.value else Min(other.value)


@dataclass(frozen=True, order=True)
class Product(Generic[T]):
    """Wraps a number; combining multiplies."""

    value: T

    def combine(self, other: Product[T]) -> Product[T]:
        _check_same(self, other)
        return Product(self.value * other.value)


@dataclass(frozen=True, order=True)
class All(Generic[T]):
    """Wraps a bool or integer; combining takes the bitwise and."""

    value: T

    def combine(self, other: All[T]) -> All[T]:
        _check_same(self, other)
        return All(self.value & other.value)


@dataclass(frozen=True, order=True)
class Any(Generic[T]):
    """Wraps a bool or integer; combining takes the bitwise or."""

    value: T

    def combine(self, other: Any[T]) -> Any[T]:
        _check_same(self, other)
        return Any(self.value | other.value)