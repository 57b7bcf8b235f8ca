from typing import Optional

import pytest

from algebelt import monoid
from algebelt.monoid import combine_all, combine_n, empty
from algebelt.semigroup import All, Any, Max, Product


class Bag:
    @classmethod
    def empty(cls):
        return "bag"


def test_empty_numeric():
    assert empty(int) == 0
    assert empty(float) == 0.0
    assert empty(Product[float]) == Product(1.0)
    assert empty(Product) == Product(1)


def test_empty_collections_are_fresh():
    first = empty(list)
    first.append(1)
    assert empty(list) == []
    assert empty(dict) == {}
    assert empty(set) == set()
    assert empty(str) == ""


def test_empty_tuple_of_kinds():
    assert empty((int, str, None)) == (0, "", None)
    assert empty(tuple[int, list]) == (0, [])


def test_empty_optional():
    assert empty(None) is None
    assert empty(Optional[int]) is None
    assert empty(int | None) is None


def test_empty_custom_class():
    result = monoid.empty(Bag)
    assert result == "bag"


@pytest.mark.parametrize("kind", [bool, Max, All, Any, Product[str], object])
def test_empty_rejects(kind):
    with pytest.raises(TypeError):
        empty(kind)


def test_combine_n():
    assert combine_n(1, 0) == 0
    assert combine_n(2, 1) == 2
    assert combine_n(2, 4) == 8
    assert combine_n(Product(3), 0) == Product(1)
    assert combine_n("ab", 0) == ""
    assert combine_n((1, "x"), 0) == (0, "")


def test_combine_n_negative():
    with pytest.raises(ValueError):
        combine_n(1, -1)


def test_combine_all_basic():
    assert combine_all([1, 2, 3], int) == 6
    assert combine_all([], int) == 0
    assert combine_all([]) is None
    assert combine_all([1, 3]) == 4
    assert combine_all(["Hello", " World"]) == "Hello World"


def test_combine_all_hashset():
    assert combine_all([], set) == empty(set)
    assert combine_all([{1}, {2}, {3}], set) == {1, 2, 3}


def test_combine_all_hashmap():
    assert combine_all([], dict) == empty(dict)
    h1 = {1: "Hello"}
    h2 = {1: " World", 2: "Goodbye"}
    h3 = {3: "Cruel World"}
    expected = {1: "Hello World", 2: "Goodbye", 3: "Cruel World"}
    assert combine_all([h1, h2, h3], dict) == expected


def test_combine_all_all():
    assert combine_all([], All[int]) == All(~0)
    assert combine_all([All(3), All(7)], All[int]) == All(3)
    assert combine_all([], All[bool]) == All(True)
    assert combine_all([All(False), All(False)], All[bool]) == All(False)
    assert combine_all([All(True), All(True)], All[bool]) == All(True)


def test_combine_all_any():
    assert combine_all([], Any[int]) == Any(0)
    assert combine_all([Any(3), Any(8)], Any[int]) == Any(11)
    assert combine_all([], Any[bool]) == Any(False)
    assert combine_all([Any(False), Any(False)], Any[bool]) == Any(False)
    assert combine_all([Any(True), Any(False)], Any[bool]) == Any(True)


def test_combine_all_tuple():
    tuples = [
        (1, 2.5, "hi", 3),
        (1, 2.5, " world", None),
        (1, 2.5, ", goodbye", 10),
    ]
    expected = (3, 7.5, "hi world, goodbye", 13)
    assert combine_all(tuples, (int, float, str, None)) == expected


def test_combine_all_product():
    assert combine_all([Product(2), Product(3), Product(4)], Product[int]) == Product(24)


def test_combine_all_accepts_iterators():
    assert combine_all(iter([[1], [2, 3]]), list) == [1, 2, 3]