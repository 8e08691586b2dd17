r"""
'                   _
'    _   _ _ __   __| | ___ _ __ ___  ___ ___  _ __ ___
'   | | | | '_ \ / _` |/ _ \ '__/ __|/ __/ _ \| '__/ _ \
'   | |_| | | | | (_| |  __/ |  \__ \ (_| (_) | | |  __/
'    \__,_|_| |_|\__,_|\___|_|  |___/\___\___/|_|  \___|
'   _______________________________________________________
"""
import logging

# expose the collection functions
from .collections import (
    each,
    map,
    reduce,
    reduce_right,
    find,
    detect,
    filter,
    reject,
    all,
    any,
    include,
    max,
    min,
    sort_by,
    to_array,
    size
)

# expose the array helpers
from .arrays import (
    zip,
    first,
    last,
    initial,
    rest,
    compact,
    flatten,
    without,
    uniq,
    union,
    intersection,
    difference,
    index_of,
    last_index_of,
    range_of
)

from .utility import identity, times

# expose chaining
from .chaining import Wrapper, TerminalAccessor, chain, value, _

# expose capability detection for custom container kinds
from .capabilities import (
    Adapter,
    AppendAdapter,
    AddAdapter,
    MappingAdapter,
    CollectingAdapter,
    ArrayAdapter,
    DtypeAdapter,
    SupportsAppend,
    SupportsAdd,
    add_to_collection,
    build,
    register_adapter,
    resolve_adapter
)

from .errors import UnderscoreError, EmptySequenceError, UnsupportedContainerError

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does (builtin-shadowing names stay explicit imports)
__all__ = [
    "each",
    "reduce",
    "reduce_right",
    "find",
    "detect",
    "reject",
    "include",
    "sort_by",
    "to_array",
    "size",
    "first",
    "last",
    "initial",
    "rest",
    "compact",
    "flatten",
    "without",
    "uniq",
    "union",
    "intersection",
    "difference",
    "index_of",
    "last_index_of",
    "range_of",
    "identity",
    "times",
    "Wrapper",
    "TerminalAccessor",
    "chain",
    "value",
    "_",
    "Adapter",
    "AppendAdapter",
    "AddAdapter",
    "MappingAdapter",
    "CollectingAdapter",
    "ArrayAdapter",
    "DtypeAdapter",
    "SupportsAppend",
    "SupportsAdd",
    "add_to_collection",
    "build",
    "register_adapter",
    "resolve_adapter",
    "UnderscoreError",
    "EmptySequenceError",
    "UnsupportedContainerError"
]
