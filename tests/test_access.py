from dataclasses import dataclass

import pytest

from arraykit import ABSENT
from arraykit.access import contains, first_element, last_element


@dataclass
class Point:
    x: int
    y: int


@pytest.mark.parametrize(
    ("array", "element", "expected"),
    [
        ([1, 2, 3], 2, True),
        ([1, 2, 3], 5, False),
        ([], 1, False),
        ((None, 0), None, True),
        ("abc", "b", True),
    ],
)
def test_contains(array, element, expected) -> None:
    assert contains(array, element) is expected


def test_contains_matches_same_instance() -> None:
    point = Point(1, 2)
    assert contains([Point(0, 0), point], point)


@pytest.mark.parametrize(
    ("array", "expected"),
    [
        ([7, 8], 7),
        ([7], 7),
        ((4, 5, 6), 4),
    ],
)
def test_first_element(array, expected) -> None:
    assert first_element(array) == expected


@pytest.mark.parametrize(
    ("array", "expected"),
    [
        ([7, 8], 8),
        ([7], 7),
        ((4, 5, 6), 6),
    ],
)
def test_last_element(array, expected) -> None:
    assert last_element(array) == expected


@pytest.mark.parametrize("accessor", [first_element, last_element])
def test_empty_sequence_returns_absent(accessor) -> None:
    assert accessor([]) is ABSENT
    assert accessor(()) is ABSENT


@pytest.mark.parametrize("accessor", [first_element, last_element])
def test_none_element_is_not_absent(accessor) -> None:
    """A stored None is a real element and must not be confused with ABSENT."""
    result = accessor([None])
    assert result is None
    assert result is not ABSENT


def test_accessors_do_not_mutate_input() -> None:
    array = [1, 2, 3]
    first_element(array)
    last_element(array)
    contains(array, 2)
    assert array == [1, 2, 3]
