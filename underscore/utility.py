from __future__ import annotations

from .types import *


def identity(value: T) -> T:
    return value


def times(n: int, function: Callable[[int], U]) -> List[U]:
    """call function n times with the iteration index, collecting the results"""
    return [function(index) for index in range(n)]
