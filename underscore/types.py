from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
M = TypeVar('M')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[M, T], M]
Action = Callable[[T], Any]

# a result container kind: list, set, tuple, np.ndarray, a user class...
ContainerKind = Type[Any]

Pair = Tuple[T, U]
