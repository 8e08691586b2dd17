from __future__ import annotations

import builtins
from itertools import islice

from .errors import EmptySequenceError
from .types import *


def zip(left: Iterable[T], right: Iterable[U]) -> List[Pair[T, U]]:
    """pair elements up; the longer side's extra elements are dropped"""
    return list(builtins.zip(left, right))


def first(container: Iterable[T], n: Optional[int] = None) -> Union[T, List[T]]:
    """the first element, or a list of the first n elements"""
    if n is not None:
        return list(islice(container, max(n, 0)))
    for item in container:
        return item
    raise EmptySequenceError('first')


def last(container: Iterable[T], n: Optional[int] = None) -> Union[T, List[T]]:
    """the last element, or a list of the last n elements"""
    data = list(container)
    if n is not None:
        return data[max(len(data) - n, 0):] if n > 0 else []
    if not data:
        raise EmptySequenceError('last')
    return data[-1]


def initial(container: Iterable[T], n: int = 1) -> List[T]:
    """everything but the last n elements"""
    data = list(container)
    return data[:max(len(data) - n, 0)] if n > 0 else data


def rest(container: Iterable[T], n: int = 1) -> List[T]:
    """everything but the first n elements"""
    return list(islice(container, max(n, 0), None))


def compact(container: Iterable[T]) -> List[T]:
    """drop falsy values"""
    return [item for item in container if item]


def flatten(container: Iterable[Any], shallow: bool = False) -> List[Any]:
    """
    flatten nested lists and tuples. strings and bytes are atoms.
    with shallow=True only one level is removed.
    """
    def flatten_recursive(items, depth_left):
        result = []
        for item in items:
            if isinstance(item, (list, tuple)) and depth_left != 0:
                result.extend(flatten_recursive(item, depth_left - 1))
            else:
                result.append(item)
        return result

    return flatten_recursive(container, 1 if shallow else -1)


def without(container: Iterable[T], *values: T) -> List[T]:
    """elements that equal none of values"""
    return [item for item in container if item not in values]


def uniq(container: Iterable[T]) -> List[T]:
    """first occurrence of every element, input order kept"""
    seen_hashable = set()
    seen_other = []
    result = []
    for item in container:
        try:
            if item in seen_hashable:
                continue
            seen_hashable.add(item)
        except TypeError:
            # unhashable (lists, dicts): fall back to equality
            if item in seen_other:
                continue
            seen_other.append(item)
        result.append(item)
    return result


def union(*containers: Iterable[T]) -> List[T]:
    """every distinct element across containers, in first-seen order"""
    return uniq(item for container in containers for item in container)


def intersection(first_container: Iterable[T], *others: Iterable[T]) -> List[T]:
    """distinct elements of the first container present in every other one"""
    other_lists = [list(other) for other in others]
    return [item for item in uniq(first_container) if all(item in other for other in other_lists)]


def difference(container: Iterable[T], *others: Iterable[T]) -> List[T]:
    """elements of container present in none of the others (duplicates kept)"""
    excluded = [item for other in others for item in other]
    return [item for item in container if item not in excluded]


def index_of(container: Iterable[T], value: T) -> int:
    """position of the first element equal to value, or -1"""
    for position, item in enumerate(container):
        if item == value:
            return position
    return -1


def last_index_of(container: Iterable[T], value: T) -> int:
    """position of the last element equal to value, or -1"""
    found = -1
    for position, item in enumerate(container):
        if item == value:
            found = position
    return found


def range_of(start: int, stop: Optional[int] = None, step: int = 1) -> List[int]:
    """list of ints, range() semantics: range_of(3) == [0, 1, 2]"""
    if step == 0:
        raise ValueError("range_of step must not be zero")
    if stop is None:
        start, stop = 0, start
    return list(range(start, stop, step))
