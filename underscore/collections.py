"""
collection functions. every function takes any iterable, never mutates it,
and returns a new container or a scalar.
"""
from __future__ import annotations

import operator
from collections.abc import Reversible, Sized, Set as AbstractSet, Mapping
from functools import cmp_to_key

import pandas as pd

from .capabilities import build, default_kind, resolve_adapter
from .errors import EmptySequenceError
from .types import *


def each(container: Iterable[T], function: Action[T]) -> None:
    """call function on every element for its side effects"""
    for item in container:
        function(item)


def map(container: Iterable[T], function: Selector[T, U], into: ContainerKind = list) -> Any:
    """project every element through function into a new container of kind `into`"""
    return build(into, (function(item) for item in container))


def reduce(container: Iterable[T], function: Accumulator[M, T], memo: M) -> M:
    """fold left to right, threading memo through function(memo, item)"""
    for item in container:
        memo = function(memo, item)
    return memo


def reduce_right(container: Iterable[T], function: Accumulator[M, T], memo: M) -> M:
    """fold right to left"""
    for item in _reversed(container):
        memo = function(memo, item)
    return memo


def _reversed(container: Iterable[T]) -> Iterator[T]:
    # sets, generators and arrays have no __reversed__, walk a snapshot instead
    if isinstance(container, Reversible):
        return reversed(container)
    return reversed(list(container))


def find(container: Iterable[T], predicate: Predicate[T]) -> int:
    """
    position of the first element matching predicate.
    when nothing matches the result is one past the last position, i.e.
    find(c, p) == size(c), mirroring an end iterator.
    """
    position = 0
    for item in container:
        if predicate(item):
            return position
        position += 1
    return position


def detect(container: Iterable[T], predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
    """the first element matching predicate, or default"""
    for item in container:
        if predicate(item):
            return item
    return default


def filter(container: Iterable[T], predicate: Predicate[T], into: Optional[ContainerKind] = None) -> Any:
    """keep elements matching predicate. rebuilds the input's kind unless `into` is given"""
    kind = into if into is not None else default_kind(container)
    return build(kind, (item for item in container if predicate(item)), like=container)


def reject(container: Iterable[T], predicate: Predicate[T], into: Optional[ContainerKind] = None) -> Any:
    """the complement of filter: drop elements matching predicate"""
    kind = into if into is not None else default_kind(container)
    return build(kind, (item for item in container if not predicate(item)), like=container)


def all(container: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true when every element satisfies predicate (vacuously true when empty)"""
    test = predicate if predicate is not None else bool
    for item in container:
        if not test(item):
            return False
    return True


def any(container: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true when at least one element satisfies predicate"""
    test = predicate if predicate is not None else bool
    for item in container:
        if test(item):
            return True
    return False


def include(container: Iterable[T], value: T) -> bool:
    """element-wise membership. strings are searched per character, not as substrings"""
    if isinstance(container, (AbstractSet, Mapping)):
        try:
            return value in container
        except TypeError:
            # unhashable values can't be members of a hashed container
            return False
    for item in container:
        if item == value:
            return True
    return False


def max(container: Iterable[T], key: Optional[KeySelector[T, K]] = None) -> int:
    """position of the largest element (first one on ties)"""
    return _extreme(container, key, operator.gt, 'max')


def min(container: Iterable[T], key: Optional[KeySelector[T, K]] = None) -> int:
    """position of the smallest element (first one on ties)"""
    return _extreme(container, key, operator.lt, 'min')


def _extreme(container: Iterable[T], key: Optional[KeySelector[T, K]],
             better: Callable[[Any, Any], bool], operation: str) -> int:
    best_position = -1
    best = None
    for position, item in enumerate(container):
        rank = key(item) if key is not None else item
        if best_position < 0 or better(rank, best):
            best_position, best = position, rank
    if best_position < 0:
        raise EmptySequenceError(operation)
    return best_position


def sort_by(container: Iterable[T], key: Optional[KeySelector[T, K]] = None,
            compare: Optional[Comparer[T]] = None, reverse: bool = False,
            into: Optional[ContainerKind] = None) -> Any:
    """
    sort ascending by key (or by a cmp-style compare function) into a new
    container of the input's kind. python's sort is stable, so ties keep
    their input order.
    """
    if key is not None and compare is not None:
        raise ValueError("sort_by accepts either key or compare, not both")
    if compare is not None:
        key = cmp_to_key(compare)
    kind = into if into is not None else default_kind(container)
    resolve_adapter(kind)
    return build(kind, sorted(container, key=key, reverse=reverse), like=container)


def to_array(container: Iterable[T]) -> List[T]:
    """a fresh list holding every element; the caller owns it"""
    return list(container)


def size(container: Iterable[T]) -> int:
    """number of elements iteration yields. iterators are consumed to count them"""
    if isinstance(container, pd.DataFrame):
        # len() counts rows, but a frame iterates its column labels
        return len(container.columns)
    if isinstance(container, Sized):
        return len(container)
    return sum(1 for _ in container)
