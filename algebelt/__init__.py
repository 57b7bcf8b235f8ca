"""Semigroups, monoids, their laws, validated accumulation, generic record conversion and field paths."""

__version__ = "0.1.0"

__all__ = ["generic", "labels", "laws", "monoid", "path", "semigroup", "validated"]