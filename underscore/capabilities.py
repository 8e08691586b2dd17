"""
capability detection: decide, once per container kind, how to insert one
element into it, so the collection functions can build any result kind.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from array import array
from collections import deque, OrderedDict
from collections.abc import MutableMapping
from functools import lru_cache
from typing import Protocol, runtime_checkable

import numpy as np
import pandas as pd

from .errors import UnsupportedContainerError
from .types import *

logger = logging.getLogger(__name__)


# --- capabilities ---

@runtime_checkable
class SupportsAppend(Protocol):
    """end-append capability (list, deque, bytearray...)"""
    def append(self, value: Any) -> Any: ...


@runtime_checkable
class SupportsAdd(Protocol):
    """associative insert capability (set and friends)"""
    def add(self, value: Any) -> Any: ...


# --- adapters ---

class Adapter(ABC):
    """
    builds one container kind: create an empty builder, insert, finish.
    `like` is the source container when the input's own kind is being
    rebuilt, so typecodes and dtypes can be carried over.
    """

    # immutable kinds are built through a buffer and can't take add_to_collection
    mutable = True
    # false when iterating the kind doesn't yield what it is built from (dict keys, frame columns)
    rebuilds_source = True

    def create(self, kind: ContainerKind, like: Optional[Any] = None) -> Any:
        return kind()

    @abstractmethod
    def insert(self, builder: Any, value: Any) -> None:
        pass

    def finish(self, builder: Any, like: Optional[Any] = None) -> Any:
        return builder

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AppendAdapter(Adapter):
    def insert(self, builder: SupportsAppend, value: Any) -> None:
        builder.append(value)


class ArrayAdapter(AppendAdapter):
    """array.array appends, but can only be created with a typecode"""

    def create(self, kind: ContainerKind, like: Optional[Any] = None) -> Any:
        if like is None:
            raise UnsupportedContainerError(kind, "array.array needs a typecode, rebuild it from a source array")
        return kind(like.typecode)


class AddAdapter(Adapter):
    def insert(self, builder: SupportsAdd, value: Any) -> None:
        builder.add(value)


class MappingAdapter(Adapter):
    """mapping kinds take (key, value) pairs"""
    rebuilds_source = False

    def insert(self, builder: MutableMapping, value: Any) -> None:
        try:
            key, item = value
        except (TypeError, ValueError):
            raise ValueError(f"mapping results need (key, value) pairs, got {value!r}") from None
        builder[key] = item


class CollectingAdapter(Adapter):
    """
    immutable kinds (tuple, str, ndarray...) have no insert at all, so values
    are collected into a list and converted once in finish().
    """
    mutable = False

    def __init__(self, convert: Callable[..., Any], rebuilds_source: bool = True):
        self._convert = convert
        self.rebuilds_source = rebuilds_source

    def create(self, kind: ContainerKind, like: Optional[Any] = None) -> List[Any]:
        return []

    def insert(self, builder: List[Any], value: Any) -> None:
        builder.append(value)

    def finish(self, builder: List[Any], like: Optional[Any] = None) -> Any:
        return self._convert(builder)


class DtypeAdapter(CollectingAdapter):
    """numpy and pandas kinds keep the source dtype, even when nothing is left"""

    def finish(self, builder: List[Any], like: Optional[Any] = None) -> Any:
        dtype = getattr(like, 'dtype', None)
        if dtype is None:
            return self._convert(builder)
        return self._convert(builder, dtype=dtype)


APPEND = AppendAdapter()
ADD = AddAdapter()
MAPPING = MappingAdapter()

# numpy and pandas kinds carry arithmetic add() and a copying append(), so they
# are registered explicitly and never detected by method name
_registry: Dict[type, Adapter] = {
    list: APPEND,
    deque: APPEND,
    bytearray: APPEND,
    array: ArrayAdapter(),
    set: ADD,
    dict: MAPPING,
    OrderedDict: MAPPING,
    tuple: CollectingAdapter(tuple),
    frozenset: CollectingAdapter(frozenset),
    str: CollectingAdapter(''.join),
    bytes: CollectingAdapter(bytes),
    np.ndarray: DtypeAdapter(np.array),
    pd.Series: DtypeAdapter(pd.Series),
    pd.Index: DtypeAdapter(pd.Index),
    # a frame is built from rows, but iterating one yields its column labels
    pd.DataFrame: CollectingAdapter(pd.DataFrame, rebuilds_source=False),
}


def register_adapter(kind: ContainerKind, adapter: Adapter) -> None:
    """teach underscore how to build a container kind it can't detect on its own."""
    if not isinstance(kind, type):
        raise TypeError(f"kind must be a type, got {kind!r}")
    _registry[kind] = adapter
    _resolve.cache_clear()
    logger.debug(f"registered {adapter!r} for {kind.__qualname__}")


def resolve_adapter(kind: ContainerKind) -> Adapter:
    """
    pick the insertion adapter for a container kind.
    order: exact registration, an immutable registration on a base class,
    append capability, any other registration on a base class, add
    capability, mutable mapping. append beats add when a kind has both.
    """
    if not isinstance(kind, type):
        raise UnsupportedContainerError(type(kind), f"{kind!r} is not a container type")
    return _resolve(kind)


@lru_cache(maxsize=None)
def _resolve(kind: type) -> Adapter:
    adapter = _registry.get(kind)
    if adapter is None:
        adapter = _detect(kind)
    logger.debug(f"resolved {kind.__qualname__} -> {adapter!r}")
    return adapter


def _registered_base(kind: type, mutable: bool) -> Optional[Adapter]:
    for base in kind.__mro__[1:]:
        adapter = _registry.get(base)
        if adapter is not None and adapter.mutable == mutable:
            return adapter
    return None


def _detect(kind: type) -> Adapter:
    # subclasses of value kinds (RangeIndex, ndarray subclasses) keep their
    # base's adapter whatever methods they expose
    adapter = _registered_base(kind, mutable=False)
    if adapter is not None:
        return adapter
    if issubclass(kind, SupportsAppend):
        return APPEND
    adapter = _registered_base(kind, mutable=True)
    if adapter is not None:
        return adapter
    if issubclass(kind, SupportsAdd):
        return ADD
    if issubclass(kind, MutableMapping):
        return MAPPING
    raise UnsupportedContainerError(kind)


def default_kind(container: Iterable[Any]) -> ContainerKind:
    """
    the kind filter-like operations rebuild by default: the input's own type
    when it can be built and iterating it yields its elements, list otherwise
    (generators, ranges, dict views, mappings, data frames).
    """
    kind = type(container)
    try:
        adapter = resolve_adapter(kind)
    except UnsupportedContainerError:
        return list
    if not adapter.rebuilds_source:
        return list
    return kind


def add_to_collection(container: Any, value: Any) -> Any:
    """insert one value into an existing container, returns the container"""
    adapter = resolve_adapter(type(container))
    if not adapter.mutable:
        raise UnsupportedContainerError(type(container), "container is immutable")
    adapter.insert(container, value)
    return container


def build(kind: ContainerKind, values: Iterable[Any], like: Optional[Any] = None) -> Any:
    """
    build a container of the given kind from values.
    the kind is resolved before values is consumed, so a lazy values
    iterable never runs against a kind that can't be built. `like` is only
    used when it is itself an instance of kind.
    """
    adapter = resolve_adapter(kind)
    if not isinstance(like, kind):
        like = None
    builder = adapter.create(kind, like)
    for value in values:
        adapter.insert(builder, value)
    return adapter.finish(builder, like)
