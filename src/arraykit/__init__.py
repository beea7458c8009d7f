from arraykit.sentinels import ABSENT
from arraykit.access import contains, first_element, last_element
from arraykit.immutable import push_element, update_element, remove_element, remove_index
from arraykit.iteration import array_each
from arraykit.reduction import MapReduce, map_to_reduce, reduce_distinct
from arraykit._version import __version__

__all__ = [
    "ABSENT",
    "contains",
    "first_element",
    "last_element",
    "push_element",
    "update_element",
    "remove_element",
    "remove_index",
    "array_each",
    "reduce_distinct",
    "map_to_reduce",
    "MapReduce",
    "__version__",
]
