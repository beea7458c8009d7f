"""Iteration with caller-requested early exit.

``array_each`` walks a sequence and lets the visitor ask to stop. The stop is
a plain loop exit, so exceptions raised by the visitor or the stop callback
reach the caller exactly as they were raised.
"""

from logging import getLogger
from typing import Callable, Sequence, TypeVar

_T = TypeVar("_T")

#: Visitor called with ``(element, index)``; a truthy result requests a stop.
EachCallback = Callable[[_T, int], bool | None]

#: Called with the ``(element, index)`` that requested the stop.
StopCallback = Callable[[_T, int], None]

logger = getLogger(__name__)


def array_each(
    array: Sequence[_T],
    each: EachCallback[_T],
    stop: StopCallback[_T] | None = None,
) -> bool:
    """Visit each element in order until the visitor asks to stop.

    Args:
        array: The sequence to visit.
        each: Called as ``each(element, index)``. Returning a truthy value
            halts iteration immediately; ``False`` or ``None`` continues.
        stop: Optional callback invoked as ``stop(element, index)`` with the
            element that halted iteration. Not called when iteration
            completes.

    Returns:
        True if every element was visited, False if iteration was halted.

    Example::

        seen = []
        array_each(
            [1, 2, 3, 4],
            lambda x, i: x == 3,
            stop=lambda x, i: seen.append((x, i)),
        )  # Returns False, seen == [(3, 2)]
    """
    for index, element in enumerate(array):
        if each(element, index):
            logger.debug("Iteration stopped at index %d", index)
            if stop is not None:
                stop(element, index)
            return False
    return True
