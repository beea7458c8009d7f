"""Reductions over sequences: distinct values and keyed accumulation.

``reduce_distinct`` keeps the first occurrence of each mapped value.
``map_to_reduce`` groups elements by a string key and folds each group into
an accumulator that is created once and then updated in place.

Example:
    Summing values per key::

        totals = map_to_reduce(
            [{"k": "a", "v": 1}, {"k": "a", "v": 2}, {"k": "b", "v": 3}],
            identifier=lambda e: e["k"],
            factory=lambda e: {"total": 0},
            reducer=lambda e, acc: acc.update(total=acc["total"] + e["v"]),
        )
        # [{"total": 3}, {"total": 3}]
"""

from __future__ import annotations

from logging import getLogger
from typing import Callable, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

_T = TypeVar("_T")
_E = TypeVar("_E")
_V = TypeVar("_V")

logger = getLogger(__name__)


def reduce_distinct(array: Sequence[_T], reducer: Callable[[_T], _V]) -> list[_V]:
    """Map each element and keep every distinct result once.

    Results are compared with a linear ``in`` check against the values kept so
    far, so unhashable values are supported and composite values are matched
    by ``==`` rather than by a hash.

    Args:
        array: The source sequence.
        reducer: Maps an element to the value to deduplicate on.

    Returns:
        The distinct mapped values in order of first occurrence.

    Example:
        >>> reduce_distinct([1, 2, 2, 3, 1], lambda x: x)
        [1, 2, 3]
    """
    result: list[_V] = []
    for element in array:
        value = reducer(element)
        if value not in result:
            result.append(value)
    return result


class MapReduce(BaseModel, Generic[_E, _V]):
    """Reusable bundle of the callables driving :func:`map_to_reduce`.

    Attributes:
        identifier: Computes the group key of an element.
        factory: Builds the initial accumulator for the first element of a
            group.
        reducer: Folds one element into its group's accumulator in place.

    Example:
        count_by_kind = MapReduce(
            identifier=lambda e: e.kind,
            factory=lambda e: [e.kind, 0],
            reducer=lambda e, acc: acc.__setitem__(1, acc[1] + 1),
        )
        count_by_kind(events)
    """

    model_config = ConfigDict(frozen=True)

    identifier: Callable[[_E], str]
    factory: Callable[[_E], _V]
    reducer: Callable[[_E, _V], None]

    def __call__(self, array: Sequence[_E]) -> list[_V]:
        return map_to_reduce(array, self)


def _resolve_strategy(
    strategy: MapReduce[_E, _V] | None,
    identifier: Callable[[_E], str] | None,
    factory: Callable[[_E], _V] | None,
    reducer: Callable[[_E, _V], None] | None,
) -> MapReduce[_E, _V]:
    callables = (identifier, factory, reducer)
    if strategy is not None:
        if any(it is not None for it in callables):
            raise TypeError("Pass either a MapReduce strategy or identifier/factory/reducer, not both")
        return strategy
    if identifier is None or factory is None or reducer is None:
        raise TypeError("identifier, factory and reducer are all required without a strategy")
    return MapReduce(identifier=identifier, factory=factory, reducer=reducer)


def map_to_reduce(
    array: Sequence[_E],
    strategy: MapReduce[_E, _V] | None = None,
    *,
    identifier: Callable[[_E], str] | None = None,
    factory: Callable[[_E], _V] | None = None,
    reducer: Callable[[_E, _V], None] | None = None,
) -> list[_V]:
    """Group elements by key and fold each group into one accumulator.

    For every element, in order, the key is computed with ``identifier``. The
    first element seen for a key creates that group's accumulator with
    ``factory``. Every element, including the one that created the group, is
    then passed to ``reducer`` together with the accumulator. The same
    accumulator object is used for every element of a group, so ``reducer``
    is expected to update it in place.

    A group is considered to exist as soon as its key has been stored, so
    falsy accumulators such as ``0`` or ``[]`` are never rebuilt.

    Args:
        array: The elements to group.
        strategy: A :class:`MapReduce` bundling the three callables. Mutually
            exclusive with the keyword callables.
        identifier: Computes the group key of an element.
        factory: Builds a group's initial accumulator.
        reducer: Folds an element into its group's accumulator.

    Returns:
        One accumulator per distinct key, in order of each key's first
        occurrence.

    Raises:
        TypeError: If both a strategy and keyword callables are given, or if
            any callable is missing.
    """
    resolved = _resolve_strategy(strategy, identifier, factory, reducer)

    accumulators: dict[str, _V] = {}
    for element in array:
        key = resolved.identifier(element)
        if key not in accumulators:
            logger.debug("Creating accumulator for group %r", key)
            accumulators[key] = resolved.factory(element)
        resolved.reducer(element, accumulators[key])

    return list(accumulators.values())
