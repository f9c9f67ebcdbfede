"""The RON serializer: visiting protocol and indentation state."""

from typing import Any

from .primitives import (
    encode_char,
    encode_string_literal,
    format_bool,
    format_float,
    format_int,
    widen_f32,
)
from .types import PrettyConfig
from .value import serialize_value


class Serializer:
    """
    Consumes protocol calls and builds RON text.

    A caller walks its value and invokes one method per shape. Scalar
    methods append their text directly; compound methods write the
    opening delimiter and return a compound serializer that takes the
    element calls and the closing ``end()``.

    One instance serves exactly one encode run. Use ``encode`` or
    ``encode_pretty`` unless you need to drive the protocol by hand.
    """

    def __init__(self, config: PrettyConfig):
        self._config = config
        self._output: list[str] = []
        self._indent = 0

    @property
    def config(self) -> PrettyConfig:
        return self._config

    @property
    def indent(self) -> int:
        """Current block depth."""
        return self._indent

    @property
    def output(self) -> str:
        """The text written so far."""
        return "".join(self._output)

    # -- layout helpers --------------------------------------------------

    def _write(self, text: str) -> None:
        if text:
            self._output.append(text)

    def _start_indent(self) -> None:
        self._indent += 1
        self._write(self._config.new_line)

    def _write_indent(self) -> None:
        self._write(self._config.indentor * self._indent)

    def _end_indent(self) -> None:
        self._indent -= 1
        self._write_indent()

    def _trim(self, count: int) -> None:
        """Drop the last ``count`` characters of output."""
        while count > 0 and self._output:
            last = self._output.pop()
            if len(last) > count:
                self._output.append(last[:-count])
                return
            count -= len(last)

    def _write_name(self, name: str) -> None:
        if self._config.struct_names:
            self._write(name)

    def _nested(self, value: Any) -> None:
        serialize_value(value, self)

    # -- scalars ---------------------------------------------------------

    def serialize_bool(self, v: bool) -> None:
        self._write(format_bool(v))

    def serialize_i8(self, v: int) -> None:
        self.serialize_i64(v)

    def serialize_i16(self, v: int) -> None:
        self.serialize_i64(v)

    def serialize_i32(self, v: int) -> None:
        self.serialize_i64(v)

    def serialize_i64(self, v: int) -> None:
        self._write(format_int(v))

    def serialize_u8(self, v: int) -> None:
        self.serialize_u64(v)

    def serialize_u16(self, v: int) -> None:
        self.serialize_u64(v)

    def serialize_u32(self, v: int) -> None:
        self.serialize_u64(v)

    def serialize_u64(self, v: int) -> None:
        self._write(format_int(v))

    def serialize_f32(self, v: float) -> None:
        self.serialize_f64(widen_f32(v))

    def serialize_f64(self, v: float) -> None:
        self._write(format_float(v))

    def serialize_char(self, v: str) -> None:
        self._write(encode_char(v))

    def serialize_str(self, v: str) -> None:
        self._write(encode_string_literal(v))

    def serialize_bytes(self, v: bytes) -> None:
        """Bytes are written as a sequence of ``u8`` values."""
        seq = self.serialize_seq(len(v))
        for byte in bytes(v):
            seq.serialize_element(byte)
        seq.end()

    def serialize_none(self) -> None:
        self._write("None")

    def serialize_some(self, value: Any) -> None:
        self._write("Some(")
        self._nested(value)
        self._write(")")

    def serialize_unit(self) -> None:
        self._write("()")

    def serialize_unit_struct(self, name: str) -> None:
        if self._config.struct_names:
            self._write(name)
        else:
            self.serialize_unit()

    def serialize_unit_variant(self, name: str, index: int, variant: str) -> None:
        # Variant names are written whatever struct_names says
        self._write(variant)

    def serialize_newtype_struct(self, name: str, value: Any) -> None:
        self._write_name(name)
        self._write("(")
        self._nested(value)
        self._write(")")

    def serialize_newtype_variant(
        self, name: str, index: int, variant: str, value: Any
    ) -> None:
        self._write(variant)
        self._write("(")
        self._nested(value)
        self._write(")")

    # -- compounds -------------------------------------------------------

    def serialize_seq(self, length: int | None = None) -> "SeqSerializer":
        self._write("[")
        self._start_indent()
        return SeqSerializer(self)

    def serialize_tuple(self, length: int) -> "TupleSerializer":
        self._write("(")
        if self._config.separate_tuple_members:
            self._start_indent()
        return TupleSerializer(self)

    def serialize_tuple_struct(self, name: str, length: int) -> "TupleSerializer":
        self._write_name(name)
        return self.serialize_tuple(length)

    def serialize_tuple_variant(
        self, name: str, index: int, variant: str, length: int
    ) -> "TupleSerializer":
        self._write(variant)
        return self.serialize_tuple(length)

    def serialize_map(self, length: int | None = None) -> "MapSerializer":
        self._write("{")
        self._start_indent()
        return MapSerializer(self)

    def serialize_struct(self, name: str, length: int) -> "StructSerializer":
        self._write_name(name)
        self._write("(")
        self._start_indent()
        return StructSerializer(self)

    def serialize_struct_variant(
        self, name: str, index: int, variant: str, length: int
    ) -> "StructSerializer":
        self._write(variant)
        self._write("(")
        self._start_indent()
        return StructSerializer(self)


class SeqSerializer:
    """Element calls for a ``[...]`` sequence."""

    def __init__(self, ser: Serializer):
        self._ser = ser

    def serialize_element(self, value: Any) -> None:
        ser = self._ser
        ser._write_indent()
        ser._nested(value)
        ser._write(",")
        ser._write(ser.config.new_line)

    def end(self) -> None:
        self._ser._end_indent()
        self._ser._write("]")


class TupleSerializer:
    """
    Element calls for tuples, tuple structs and tuple variants.

    Without ``separate_tuple_members`` every element is followed by a
    comma and the separator space; ``end()`` takes the last space back
    off before the closing paren.
    """

    def __init__(self, ser: Serializer):
        self._ser = ser
        self._count = 0

    def serialize_element(self, value: Any) -> None:
        ser = self._ser
        separate = ser.config.separate_tuple_members
        if separate:
            ser._write_indent()
        ser._nested(value)
        ser._write(",")
        if separate:
            ser._write(ser.config.new_line)
        else:
            ser._write(ser.config.space)
        self._count += 1

    serialize_field = serialize_element

    def end(self) -> None:
        ser = self._ser
        if ser.config.separate_tuple_members:
            ser._end_indent()
        elif self._count:
            ser._trim(len(ser.config.space))
        ser._write(")")


class MapSerializer:
    """Key and value calls for a ``{...}`` map."""

    def __init__(self, ser: Serializer):
        self._ser = ser

    def serialize_key(self, key: Any) -> None:
        self._ser._write_indent()
        self._ser._nested(key)

    def serialize_value(self, value: Any) -> None:
        ser = self._ser
        ser._write(":")
        ser._write(ser.config.space)
        ser._nested(value)
        ser._write(",")
        ser._write(ser.config.new_line)

    def serialize_entry(self, key: Any, value: Any) -> None:
        self.serialize_key(key)
        self.serialize_value(value)

    def end(self) -> None:
        self._ser._end_indent()
        self._ser._write("}")


class StructSerializer:
    """Field calls for structs and struct variants."""

    def __init__(self, ser: Serializer):
        self._ser = ser

    def serialize_field(self, key: str, value: Any) -> None:
        ser = self._ser
        ser._write_indent()
        ser._write(key)
        ser._write(":")
        ser._write(ser.config.space)
        ser._nested(value)
        ser._write(",")
        ser._write(ser.config.new_line)

    def end(self) -> None:
        # Structs close with a paren, unlike maps
        self._ser._end_indent()
        self._ser._write(")")
