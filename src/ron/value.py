"""Drive the serializer protocol for plain Python values."""

import dataclasses
import enum
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import SerializeError
from .types import Char, Serialize, Some

if TYPE_CHECKING:
    from .serializer import Serializer


def serialize_value(value: Any, serializer: "Serializer") -> None:
    """
    Feed a value to ``serializer`` as a sequence of protocol calls.

    Objects with their own ``serialize`` method are handed the serializer.
    Everything else maps by type:

    - None, ``Some(x)``: ``None``, ``Some(x)``
    - bool, int, float, ``Char``, str, bytes: scalars
    - Enum members: unit variants
    - dataclasses: structs (unit structs when they have no fields)
    - named tuples: structs
    - tuples: tuples; lists, sets: sequences; mappings: maps

    Args:
        value: The value to serialize.
        serializer: The serializer receiving the calls.

    Raises:
        SerializeError: If the value has no RON representation.
    """
    if isinstance(value, Serialize) and not isinstance(value, type):
        value.serialize(serializer)
        return

    if value is None:
        serializer.serialize_none()
        return

    if isinstance(value, Some):
        serializer.serialize_some(value.value)
        return

    if isinstance(value, bool):
        serializer.serialize_bool(value)
        return

    if isinstance(value, enum.Enum):
        # Checked before int so IntEnum members stay variants
        _serialize_enum_member(value, serializer)
        return

    if isinstance(value, int):
        serializer.serialize_i64(value)
        return

    if isinstance(value, float):
        serializer.serialize_f64(value)
        return

    if isinstance(value, Char):
        serializer.serialize_char(value.value)
        return

    if isinstance(value, str):
        serializer.serialize_str(value)
        return

    if isinstance(value, (bytes, bytearray, memoryview)):
        serializer.serialize_bytes(bytes(value))
        return

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        _serialize_dataclass(value, serializer)
        return

    if isinstance(value, tuple):
        if hasattr(value, "_fields"):
            _serialize_named_tuple(value, serializer)
        else:
            tup = serializer.serialize_tuple(len(value))
            for item in value:
                tup.serialize_element(item)
            tup.end()
        return

    if isinstance(value, list):
        _serialize_items(value, serializer)
        return

    if isinstance(value, (set, frozenset)):
        # Sort for deterministic output
        _serialize_items(sorted(value, key=str), serializer)
        return

    if isinstance(value, Mapping):
        map_ser = serializer.serialize_map(len(value))
        for key, item in value.items():
            map_ser.serialize_entry(key, item)
        map_ser.end()
        return

    raise SerializeError.custom(f"cannot serialize value of type {type(value).__name__}")


def _serialize_items(items: list, serializer: "Serializer") -> None:
    seq = serializer.serialize_seq(len(items))
    for item in items:
        seq.serialize_element(item)
    seq.end()


def _serialize_enum_member(member: enum.Enum, serializer: "Serializer") -> None:
    enum_cls = type(member)
    index = list(enum_cls).index(member)
    serializer.serialize_unit_variant(enum_cls.__name__, index, member.name)


def _serialize_dataclass(obj: Any, serializer: "Serializer") -> None:
    name = type(obj).__name__
    obj_fields = dataclasses.fields(obj)
    if not obj_fields:
        serializer.serialize_unit_struct(name)
        return

    struct = serializer.serialize_struct(name, len(obj_fields))
    for f in obj_fields:
        struct.serialize_field(f.name, getattr(obj, f.name))
    struct.end()


def _serialize_named_tuple(value: tuple, serializer: "Serializer") -> None:
    struct = serializer.serialize_struct(type(value).__name__, len(value))
    for name, item in zip(value._fields, value):
        struct.serialize_field(name, item)
    struct.end()
