"""
RON (Rusty Object Notation) - Python Serializer

Encodes structured Python values to RON text, either compact or
pretty-printed with configurable layout.

Usage:
    import ron

    ron.encode({"name": "Alice", "tags": ["a", "b"]})
    # '{"name":"Alice","tags":["a","b",],}'

    from ron import PrettyConfig

    ron.encode_pretty(value, PrettyConfig(new_line="\\n"))
    ron.encode_pretty(value, PrettyConfig.default_with(separate_tuple_members=True))

Types that need a custom shape implement ``serialize(serializer)`` and
call the ``Serializer`` protocol methods directly.
"""

__version__ = "0.2.0"

from .encode import encode, encode_pretty
from .errors import SerializeError
from .serializer import (
    MapSerializer,
    SeqSerializer,
    Serializer,
    StructSerializer,
    TupleSerializer,
)
from .types import Char, PrettyConfig, Serialize, Some
from .value import serialize_value

__all__ = [
    # Version
    "__version__",
    # Main API
    "encode",
    "encode_pretty",
    # Options
    "PrettyConfig",
    # Protocol
    "Serializer",
    "SeqSerializer",
    "TupleSerializer",
    "MapSerializer",
    "StructSerializer",
    "Serialize",
    "serialize_value",
    # Types
    "Some",
    "Char",
    # Errors
    "SerializeError",
]
