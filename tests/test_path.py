from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import pytest

from algebelt.path import Path, path


class SizeUnit(Enum):
    Cm = "Cm"
    Inch = "Inch"


@dataclass
class Dimensions:
    height: int
    width: int
    unit: SizeUnit


@dataclass
class Dog:
    name: str
    dimensions: Dimensions


@dataclass
class Cat:
    name: str
    dimensions: Dimensions


@dataclass
class Address:
    name: str


@dataclass
class User:
    name: str
    address: Address


@dataclass
class Inner5:
    v: int


@dataclass
class Inner4:
    v: Inner5


@dataclass
class Inner3:
    v: Inner4


@dataclass
class Inner2:
    v: Inner3


@dataclass
class Outer:
    v: Inner2


class Point(NamedTuple):
    x: int
    y: int


def print_height(obj):
    height = path("dimensions.height").get(obj)
    unit = path("dimensions.unit").get(obj)
    return f"Height [{height} {unit.name}]"


def test_shape_dependent_traversal():
    dog = Dog("Joe", Dimensions(10, 5, SizeUnit.Inch))
    cat = Cat("Schmoe", Dimensions(7, 3, SizeUnit.Cm))
    assert print_height(dog) == "Height [10 Inch]"
    assert print_height(cat) == "Height [7 Cm]"


def test_single_name_path():
    u = User("Joe", Address("blue pond"))
    assert path("name").get(u) == "Joe"


def test_added_paths():
    u = User("Joe", Address("blue pond"))
    address_name_path = path("address") + path("name")
    assert address_name_path.get(u) == "blue pond"
    assert address_name_path == path("address.name")


def test_deep_path():
    o = Outer(Inner2(Inner3(Inner4(Inner5(3)))))
    assert path("v.v.v.v.v").get(o) + 1 == 4


def test_addition_is_associative():
    a, b, c = path("a"), path("b"), path("c")
    assert (a + b) + c == a + (b + c)
    assert ((a + b) + c).names == ("a", "b", "c")


def test_path_constructor_matches_dotted_form():
    assert Path("dimensions", "height") == path("dimensions.height")
    assert hash(Path("dimensions", "height")) == hash(path("dimensions.height"))


def test_named_tuple_and_plain_tuple_fields():
    assert path("y").get(Point(1, 2)) == 2
    assert path("_1").get(("a", "b")) == "b"


def test_missing_field_raises_key_error():
    with pytest.raises(KeyError):
        path("address.street").get(User("Joe", Address("blue pond")))


def test_traversing_into_non_record_raises():
    with pytest.raises(TypeError):
        path("name.first").get(User("Joe", Address("blue pond")))


def test_empty_path_is_rejected():
    with pytest.raises(ValueError):
        Path()


def test_invalid_expressions_are_rejected():
    with pytest.raises(ValueError):
        path("a..b")
    with pytest.raises(ValueError):
        path("a.0")
    with pytest.raises(ValueError):
        Path("a.b")


def test_adding_non_path_raises():
    with pytest.raises(TypeError):
        path("a") + "b"