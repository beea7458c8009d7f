"""Read-only access helpers for sequences.

These helpers never mutate their input and never raise for an empty
sequence. Absence is reported with the :data:`~arraykit.sentinels.ABSENT`
sentinel so that ``None`` elements stay distinguishable from "no element".
"""

from typing import Sequence, TypeVar

from typing_extensions import Sentinel

from arraykit.sentinels import ABSENT

_T = TypeVar("_T")


def contains(array: Sequence[_T], element: _T) -> bool:
    """Check whether ``element`` is present in ``array``.

    Uses the sequence's own linear search, so matching follows Python's
    containment rules (identity first, then ``==``).

    Args:
        array: The sequence to search.
        element: The value to look for.

    Returns:
        True if ``element`` is found, False otherwise.

    Example:
        >>> contains([1, 2, 3], 2)
        True
    """
    return element in array


def first_element(array: Sequence[_T]) -> _T | Sentinel:
    """Return the first element of ``array``, or ``ABSENT`` if it is empty.

    Example:
        >>> first_element([7, 8])
        7
        >>> first_element([]) is ABSENT
        True
    """
    return ABSENT if len(array) == 0 else array[0]


def last_element(array: Sequence[_T]) -> _T | Sentinel:
    """Return the last element of ``array``, or ``ABSENT`` if it is empty."""
    return ABSENT if len(array) == 0 else array[-1]
