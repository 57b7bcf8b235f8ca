# algebelt

A small toolbelt of algebraic building blocks for everyday Python data.

It has no dependencies outside the standard library.

## Modules

- `algebelt.semigroup` provides `combine(a, b)`.
  - Numbers are added.
  - Strings, bytes and lists are concatenated.
  - Sets are joined by union.
  - Dicts are merged key by key, and the values of shared keys are combined.
  - Tuples are combined element by element.
  - `None` stands for an absent value, so the other side is kept.
  - Any object with a `combine` method is combined by calling that method.

  The wrappers `Max`, `Min`, `Product`, `All` (bitwise and) and `Any` (bitwise or) select other combinations. There are also `combine_n(value, times)` and `combine_all_option(xs)`; the latter returns `None` for an empty sequence.
- `algebelt.monoid` provides `empty(kind)`, `combine_n(value, times)` and `combine_all(xs, kind)`.
  - A kind is a type such as `int`, `str`, `list` or `dict`.
  - A kind can also be a wrapper with its element type, such as `Product[int]`, `All[bool]` or `Any[int]`.
  - A tuple of kinds, or `tuple[int, str]`, is a kind too.
  - `None`, `Optional[X]` and `X | None` name the optional monoid.
  - So does any class with an `empty` class method.

  `combine_all` folds a sequence starting from the empty value of `kind`.
- `algebelt.laws` provides `associativity(a, b, c)`, `left_identity(a, kind)` and `right_identity(a, kind)`. Each returns whether the law holds, which suits property-based tests.
- `algebelt.validated` provides `Ok`, `Err`, `into_validated` and `Validated`. Add results to a `Validated` to keep every success value in order, or, if anything failed, every error in order. `into_result()` returns the tuple of values, or raises `ValidationError` whose `errors` lists all the errors.
- `algebelt.generic` converts between records.
  - A record is a dataclass, a named tuple or a plain tuple.
  - `into_generic`, `from_generic` and `convert_from` convert by position.
  - `Field`, `field`, `into_labelled_generic`, `from_labelled_generic` and `labelled_convert_from` work by field name.
  - The fields of a plain tuple are named `_0`, `_1` and so on.
- `algebelt.labels` provides `encode_label(name)`, which returns the one-to-one token encoding of a field name. It also provides `parse_path(expr)`, which splits a dotted path such as `"address.name"`.
- `algebelt.path` provides `Path` and `path(expr)`.
  - A path follows field names through nested records of any type that has them.
  - `Path.get(obj)` raises `KeyError` if a field is missing.
  - Paths can be joined with `+`.

## Examples

```python
from algebelt.semigroup import combine, Max
from algebelt.monoid import combine_all

combine((1, "hi", [1]), (2, " world", [2]))   # (3, "hi world", [1, 2])
combine(Max(1), Max(2))                       # Max(value=2)
combine_all([1, 2, 3], int)                   # 6
combine_all([], None)                         # None
```

```python
from algebelt.validated import Ok, Err, into_validated

v = into_validated(Ok("James")) + Err("no age") + Err("no email")
v.is_err()          # True
v.into_result()     # raises ValidationError; .errors == ["no age", "no email"]

into_validated(Ok("James")) + Ok(32)   # Validated(values=("James", 32))
```

```python
from dataclasses import dataclass
from algebelt.path import path

@dataclass
class Dimensions:
    height: int
    width: int

@dataclass
class Dog:
    name: str
    dimensions: Dimensions

dog = Dog("Joe", Dimensions(10, 5))
path("dimensions.height").get(dog)   # 10
```

## What it does not do

There are no helpers for mapping a different function over each element of a tuple by element type. Use plain Python functions for that.

## Running the tests

```
pip install -e ".[test]"
pytest
```