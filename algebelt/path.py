"""Paths through nested records.

A ``Path`` is a sequence of field names. ``get`` follows it through the
labelled representation of each record it passes, so any record with the
right field names at the right depth can be traversed, whatever its type.
"""

from __future__ import annotations

from typing import Any

from .generic import into_labelled_generic
from .labels import parse_path

__all__ = ["Path", "path"]


class Path:
    """A non-empty sequence of field names to follow."""

    __slots__ = ("_names",)

    def __init__(self, *args: str) -> None:
        if not args:
            raise ValueError("a path needs at least one field name")
        for name in args:
            if not isinstance(name, str):
                raise TypeError(
                    f"a field name must be a str, not {type(name).__name__}"
                )
            if len(parse_path(name)) != 1:
                raise ValueError(f"{name!r} is not a single field name")
        self._names = tuple(args)

    @property
    def names(self) -> tuple[str, ...]:
        """The field names, outermost first."""
        return self._names

    def get(self, obj: Any) -> Any:
        """Return the value reached by following this path from ``obj``."""
        current = obj
        for depth, name in enumerate(self._names):
            fields = {f.name: f.value for f in into_labelled_generic(current)}
            if name not in fields:
                walked = ".".join(self._names[: depth + 1])
                raise KeyError(
                    f"{type(current).__name__} has no field {name!r} (at {walked})"
                )
            current = fields[name]
        return current

    def __add__(self, other: Any) -> Path:
        if not isinstance(other, Path):
            return NotImplemented
        return Path(*self._names, *other._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"path({'.'.join(self._names)!r})"


def path(expr: str) -> Path:
    """Build a ``Path`` from a dotted expression such as ``"address.name"``."""
    return Path(*parse_path(expr))