"""Non-mutating counterparts of the usual list mutations.

Every helper here returns a freshly allocated list and leaves the sequence it
was given untouched. Matching for update and removal is delegated entirely to
the caller's predicate.
"""

from logging import getLogger
from typing import Callable, Sequence, TypeVar

_T = TypeVar("_T")

#: A callable that decides whether an element is selected.
Predicate = Callable[[_T], bool]

logger = getLogger(__name__)


def push_element(array: Sequence[_T], element: _T) -> list[_T]:
    """Return a new list with ``element`` appended to the items of ``array``.

    Example:
        >>> push_element([1, 2], 3)
        [1, 2, 3]
    """
    return [*array, element]


def update_element(array: Sequence[_T], element: _T, predicate: Predicate[_T]) -> list[_T]:
    """Replace every element matching ``predicate`` with ``element``.

    Args:
        array: The source sequence.
        element: The replacement value.
        predicate: Called once per item; items for which it returns True are
            replaced.

    Returns:
        A new list of the same length as ``array``. If nothing matches, the
        result is an equal copy.

    Example:
        >>> update_element([1, 2, 3], 9, lambda x: x == 2)
        [1, 9, 3]
    """
    return [element if predicate(current) else current for current in array]


def remove_element(array: Sequence[_T], predicate: Predicate[_T]) -> list[_T]:
    """Return the items of ``array`` for which ``predicate`` is false.

    Example:
        >>> remove_element([1, 2, 3, 2], lambda x: x == 2)
        [1, 3]
    """
    return [current for current in array if not predicate(current)]


def remove_index(array: Sequence[_T], index: int) -> list[_T]:
    """Return the items of ``array`` without the one at ``index``.

    Only ``0 <= index < len(array)`` removes anything. Any other index,
    negative ones included, is a no-op and the result is a full copy. Callers
    that need strict bounds must check them first.

    Args:
        array: The source sequence.
        index: Position of the item to drop.

    Returns:
        A new list with at most one item removed.

    Example:
        >>> remove_index([1, 2, 3], 1)
        [1, 3]
        >>> remove_index([1, 2, 3], 10)
        [1, 2, 3]
    """
    if not 0 <= index < len(array):
        logger.debug("Index %d out of range for sequence of length %d", index, len(array))
    return [current for position, current in enumerate(array) if position != index]
