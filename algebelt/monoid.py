"""Monoids: semigroups that also have an empty (identity) value.

A monoid kind is named by a type or a description of one:

* ``None`` is the optional monoid, whose empty value is ``None``;
* ``int``, ``float``, ``complex``, ``str``, ``bytes``, ``list``, ``set``,
  ``frozenset``, ``dict`` and ``tuple`` give their zero or empty value;
* ``Product``, ``Product[float]``, ``All[bool]``, ``All[int]``, ``Any[bool]``
  and ``Any[int]`` give the identity of the wrapped combination;
* a tuple of kinds, or ``tuple[int, str]``, gives a tuple of empty values;
* ``Optional[X]`` or ``X | None`` gives ``None``;
* any class with an ``empty`` class method gives what that method returns.
"""

from __future__ import annotations

import types
from collections.abc import Iterable
from functools import reduce
from typing import Any as AnyType
from typing import TypeVar, Union, get_args, get_origin

from .semigroup import All, Any, Product, combine
from .semigroup import combine_n as _semigroup_combine_n

T = TypeVar("T")

__all__ = ["combine_all", "combine_n", "empty"]

_FACTORIES = {
    int: int,
    float: float,
    complex: complex,
    str: str,
    bytes: bytes,
    list: list,
    set: set,
    frozenset: frozenset,
    dict: dict,
    tuple: tuple,
}


def _name(kind: AnyType) -> str:
    return getattr(kind, "__name__", repr(kind))


def empty(kind: AnyType) -> AnyType:
    """Return the empty value of the monoid named by ``kind``."""
    if kind is None:
        return None
    if isinstance(kind, tuple):
        return tuple(empty(k) for k in kind)
    origin = get_origin(kind)
    if origin is not None:
        return _empty_parametrised(origin, get_args(kind))
    if kind is bool:
        raise TypeError("bool has no monoid; use All[bool] or Any[bool]")
    if kind is Product:
        return Product(1)
    if kind is All or kind is Any:
        raise TypeError(
            f"{kind.__name__} needs an element type, such as {kind.__name__}[bool]"
        )
    factory = _FACTORIES.get(kind)
    if factory is not None:
        return factory()
    method = getattr(kind, "empty", None)
    if callable(method):
        return method()
    raise TypeError(f"{_name(kind)} has no empty value")


def _empty_parametrised(origin: AnyType, args: tuple) -> AnyType:
    if origin is Union or origin is types.UnionType:
        if type(None) in args:
            return None
        raise TypeError("only optional unions have an empty value")
    if origin is tuple:
        if Ellipsis in args:
            return ()
        return tuple(empty(a) for a in args)
    if origin in (Product, All, Any):
        if len(args) != 1:
            raise TypeError(f"{origin.__name__} takes exactly one element type")
        return _empty_wrapper(origin, args[0])
    return empty(origin)


def _empty_wrapper(wrapper: type, element: AnyType) -> AnyType:
    if wrapper is Product:
        if element in (int, float, complex):
            return Product(element(1))
    elif wrapper is All:
        if element is bool:
            return All(True)
        if element is int:
            return All(~0)
    elif element is bool:
        return Any(False)
    elif element is int:
        return Any(0)
    raise TypeError(f"{wrapper.__name__}[{_name(element)}] has no empty value")


def _kind_of(value: AnyType) -> AnyType:
    if value is None:
        return None
    if type(value) is tuple:
        return tuple(_kind_of(v) for v in value)
    if isinstance(value, (Product, All, Any)):
        return type(value)[type(value.value)]
    return type(value)


def combine_n(value: T, times: int) -> T:
    """Return ``value`` combined with itself ``times`` times.

    Zero times gives the empty value of the value's monoid.
    """
    if times == 0:
        return empty(_kind_of(value))
    return _semigroup_combine_n(value, times)


def combine_all(xs: Iterable[T], kind: AnyType = None) -> T:
    """Combine all values in ``xs``, starting from the empty value of ``kind``."""
    return reduce(combine, xs, empty(kind))