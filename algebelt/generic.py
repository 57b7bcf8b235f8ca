"""Generic representations of record types.

The generic representation of a record is the tuple of its field values in
declaration order. The labelled representation is a tuple of ``Field``
values that also carry the field names. Records are dataclasses, named
tuples or plain tuples; the fields of a plain tuple are named ``_0``,
``_1`` and so on.

Two record types with the same field layout can be converted into each other
through their generic representation; through the labelled representation
the field names must match as well.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from .labels import encode_label

R = TypeVar("R")

__all__ = [
    "Field",
    "convert_from",
    "field",
    "from_generic",
    "from_labelled_generic",
    "into_generic",
    "into_labelled_generic",
    "labelled_convert_from",
]


@dataclass(frozen=True)
class Field:
    """A value together with the name of the field that holds it."""

    name: str
    value: Any

    @property
    def label(self) -> tuple[str, ...]:
        """The encoded label of the field name."""
        return encode_label(self.name)


def field(value: Any, name: str) -> Field:
    """Return a ``Field`` named ``name`` holding ``value``."""
    encode_label(name)
    return Field(name, value)


def _is_named_tuple(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def _field_names(cls: type) -> tuple[str, ...] | None:
    """Return the field names of a record class, or None for plain tuples."""
    if not isinstance(cls, type):
        raise TypeError(f"{cls!r} is not a class")
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))
    if _is_named_tuple(cls):
        return tuple(cls._fields)
    if issubclass(cls, tuple):
        return None
    raise TypeError(
        f"{cls.__name__} has no generic representation; "
        "only dataclasses and tuples are supported"
    )


def _check_arity(cls: type, names: tuple[str, ...], values: tuple) -> None:
    if len(values) != len(names):
        raise ValueError(
            f"{cls.__name__} has {len(names)} fields, got {len(values)} values"
        )


def into_generic(obj: Any) -> tuple:
    """Return the field values of ``obj`` in declaration order."""
    cls = type(obj)
    names = _field_names(cls)
    if names is None or _is_named_tuple(cls):
        return tuple(obj)
    return tuple(getattr(obj, name) for name in names)


def from_generic(cls: type[R], values: Iterable[Any]) -> R:
    """Build a ``cls`` from its field values in declaration order."""
    values = tuple(values)
    names = _field_names(cls)
    if names is None:
        return cls(values)
    _check_arity(cls, names, values)
    if _is_named_tuple(cls):
        return cls._make(values)
    fields = dataclasses.fields(cls)
    init_args = {f.name: v for f, v in zip(fields, values) if f.init}
    obj = cls(**init_args)
    for f, v in zip(fields, values):
        if not f.init:
            object.__setattr__(obj, f.name, v)
    return obj


def convert_from(cls: type[R], obj: Any) -> R:
    """Convert ``obj`` into a ``cls`` with the same field layout."""
    return from_generic(cls, into_generic(obj))


def into_labelled_generic(obj: Any) -> tuple[Field, ...]:
    """Return the fields of ``obj`` as named ``Field`` values."""
    values = into_generic(obj)
    names = _field_names(type(obj))
    if names is None:
        names = tuple(f"_{index}" for index in range(len(values)))
    return tuple(Field(name, value) for name, value in zip(names, values))


def from_labelled_generic(cls: type[R], fields: Iterable[Field]) -> R:
    """Build a ``cls`` from named fields, which must match its fields in order."""
    fields = tuple(fields)
    for item in fields:
        if not isinstance(item, Field):
            raise TypeError(f"expected a Field, got {type(item).__name__}")
    names = _field_names(cls)
    if names is None:
        names = tuple(f"_{index}" for index in range(len(fields)))
    given = tuple(item.name for item in fields)
    if given != names:
        raise ValueError(
            f"fields {given} do not match the fields {names} of {cls.__name__}"
        )
    return from_generic(cls, (item.value for item in fields))


def labelled_convert_from(cls: type[R], obj: Any) -> R:
    """Convert ``obj`` into a ``cls`` whose fields have the same names and order."""
    return from_labelled_generic(cls, into_labelled_generic(obj))