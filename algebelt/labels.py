"""Field labels and path expressions.

A label is the encoded form of a field name: a tuple of tokens, one or more
per character of the name.

* ASCII letters stand for themselves.
* The underscore and the digits get an underscore in front (``"_"`` becomes
  ``"__"`` and ``"7"`` becomes ``"_7"``).
* Any other character becomes ``"_uc"``, then the tokens of ``u`` and its
  lower-case hexadecimal code point, then ``"uc_"``.

The encoding is one-to-one, so two names share a label only when they are
equal.
"""

from __future__ import annotations

import string

__all__ = ["encode_label", "parse_path"]

_ALPHA_CHARS = frozenset(string.ascii_letters)
_UNDERSCORE_CHARS = frozenset("_" + string.digits)


def _encode_char(char: str) -> list[str]:
    if char in _ALPHA_CHARS:
        return [char]
    if char in _UNDERSCORE_CHARS:
        return ["_" + char]
    hex_form = f"u{ord(char):x}"
    inner = [token for c in hex_form for token in _encode_char(c)]
    return ["_uc", *inner, "uc_"]


def encode_label(name: str) -> tuple[str, ...]:
    """Return the label tokens for the field name ``name``."""
    if not isinstance(name, str):
        raise TypeError(f"a label name must be a str, not {type(name).__name__}")
    if not name:
        raise ValueError("a label name must not be empty")
    return tuple(token for char in name for token in _encode_char(char))


def parse_path(expr: str) -> tuple[str, ...]:
    """Split a dotted field path such as ``"address.name"`` into its names."""
    if not isinstance(expr, str):
        raise TypeError(f"a path must be a str, not {type(expr).__name__}")
    names = tuple(part.strip() for part in expr.split("."))
    for name in names:
        if "::" in name:
            raise ValueError(f"invalid name {name!r}; it has colons in it")
        if name.isdigit():
            raise ValueError(
                f"only named access is supported, not positional {name!r}"
            )
        if not name.isidentifier():
            raise ValueError(f"invalid path expression: {expr!r}")
    return names