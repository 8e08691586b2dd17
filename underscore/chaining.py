from __future__ import annotations

import numpy as np
import pandas as pd

from . import arrays, collections
from .types import *


class Wrapper(Generic[T]):
    """
    holds one container value and applies collection functions fluently.
    every call runs eagerly and returns a new wrapper; the wrapper it was
    called on keeps its value. each() is the exception: it returns self.
    """

    def __init__(self, container: Any):
        self._value = container
        self.to = TerminalAccessor(self)

    def value(self) -> Any:
        """unwrap, ending the chain"""
        return self._value

    def each(self, function: Action[T]) -> 'Wrapper[T]':
        collections.each(self._value, function)
        return self

    def map(self, function: Selector[T, U], into: ContainerKind = list) -> 'Wrapper[U]':
        return Wrapper(collections.map(self._value, function, into))

    def reduce(self, function: Accumulator[M, T], memo: M) -> 'Wrapper[M]':
        return Wrapper(collections.reduce(self._value, function, memo))

    def reduce_right(self, function: Accumulator[M, T], memo: M) -> 'Wrapper[M]':
        return Wrapper(collections.reduce_right(self._value, function, memo))

    def filter(self, predicate: Predicate[T], into: Optional[ContainerKind] = None) -> 'Wrapper[T]':
        return Wrapper(collections.filter(self._value, predicate, into))

    def reject(self, predicate: Predicate[T], into: Optional[ContainerKind] = None) -> 'Wrapper[T]':
        return Wrapper(collections.reject(self._value, predicate, into))

    def sort_by(self, key: Optional[KeySelector[T, K]] = None, compare: Optional[Comparer[T]] = None,
                reverse: bool = False, into: Optional[ContainerKind] = None) -> 'Wrapper[T]':
        return Wrapper(collections.sort_by(self._value, key, compare, reverse, into))

    def zip(self, other: Iterable[U]) -> 'Wrapper[Pair[T, U]]':
        return Wrapper(arrays.zip(self._value, other))

    def __iter__(self) -> Iterator[T]:
        return iter(self._value)

    def __repr__(self) -> str:
        return f"Wrapper({self._value!r})"


class TerminalAccessor(Generic[T]):
    """terminal operations: leave the chain with a concrete value"""

    def __init__(self, wrapper: 'Wrapper[T]'):
        self._wrapper = wrapper

    def list(self) -> List[T]:
        return collections.to_array(self._wrapper.value())

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._wrapper.value())

    def set(self) -> Set[T]:
        return set(self._wrapper.value())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe (rows of dicts, tuples or lists)"""
        return pd.DataFrame(self.list())

    def size(self) -> int:
        return collections.size(self._wrapper.value())

    def all(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return collections.all(self._wrapper.value(), predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return collections.any(self._wrapper.value(), predicate)

    def include(self, value: T) -> bool:
        return collections.include(self._wrapper.value(), value)

    def max(self, key: Optional[KeySelector[T, K]] = None) -> T:
        """the largest element itself (not its position)"""
        data = self.list()
        return data[collections.max(data, key)]

    def min(self, key: Optional[KeySelector[T, K]] = None) -> T:
        """the smallest element itself (not its position)"""
        data = self.list()
        return data[collections.min(data, key)]


def chain(container: Any) -> Wrapper[Any]:
    """start a chain"""
    return Wrapper(container)


def value(wrapper: Wrapper[T]) -> Any:
    return wrapper.value()


# --- aliases ---
_ = chain
