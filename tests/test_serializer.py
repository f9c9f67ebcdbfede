"""Tests for driving the serializer protocol directly."""

import pytest

from ron import Char, PrettyConfig, SerializeError, Serializer, Some, serialize_value

from .samples import Color, MyStruct, Point, TupleStruct, VariantC, VariantD

LF = PrettyConfig(new_line="\n")
SEPARATE = PrettyConfig(new_line="\n", separate_tuple_members=True)


class CountingSerializer(Serializer):
    """Records how many blocks were opened and closed."""

    def __init__(self, config):
        super().__init__(config)
        self.opened = 0
        self.closed = 0

    def _start_indent(self):
        self.opened += 1
        super()._start_indent()

    def _end_indent(self):
        self.closed += 1
        super()._end_indent()


NESTED = {
    "points": [Point(1, 2), Point(3, 4)],
    "pairs": [(1, (2, 3)), ()],
    "maybe": Some({"inner": [MyStruct(1.0, 2.0)]}),
    "variants": [VariantC(True, 0.5), VariantD(1, 2), Color.RED],
    "raw": b"\x01",
    "tuple": TupleStruct(1.0, 2.0),
    "empty": [[], {}],
}


class TestScalars:
    """Test scalar protocol calls."""

    def test_integer_widths(self):
        ser = Serializer(PrettyConfig.basic(False))
        ser.serialize_i8(-8)
        ser.serialize_u16(16)
        ser.serialize_i32(-32)
        ser.serialize_u64(64)
        assert ser.output == "-816-3264"

    def test_f32_widened(self):
        ser = Serializer(PrettyConfig.basic(False))
        ser.serialize_f32(0.1)
        assert ser.output == "0.10000000149011612"

    def test_unit(self):
        ser = Serializer(LF)
        ser.serialize_unit()
        assert ser.output == "()"

    def test_unit_struct_name(self):
        named = Serializer(LF)
        named.serialize_unit_struct("Marker")
        anonymous = Serializer(PrettyConfig.basic(False))
        anonymous.serialize_unit_struct("Marker")
        assert named.output == "Marker"
        assert anonymous.output == "()"

    def test_unit_variant_ignores_struct_names(self):
        ser = Serializer(PrettyConfig.basic(False))
        ser.serialize_unit_variant("Shape", 0, "Circle")
        assert ser.output == "Circle"

    def test_newtype_variant(self):
        ser = Serializer(PrettyConfig.basic(False))
        ser.serialize_newtype_variant("Shape", 1, "Square", 2.0)
        assert ser.output == "Square(2)"


class TestCompounds:
    """Test compound protocol calls."""

    def test_seq(self):
        ser = Serializer(PrettyConfig.basic(True))
        seq = ser.serialize_seq(2)
        assert ser.indent == 1
        seq.serialize_element(1)
        seq.serialize_element(Some(Char("x")))
        seq.end()
        assert ser.indent == 0
        assert ser.output == "[1,Some('x'),]"

    def test_seq_without_length(self):
        ser = Serializer(LF)
        seq = ser.serialize_seq()
        seq.serialize_element("a")
        seq.end()
        assert ser.output == '[\n    "a",\n]'

    def test_tuple_does_not_open_block(self):
        ser = Serializer(LF)
        tup = ser.serialize_tuple(2)
        assert ser.indent == 0
        tup.serialize_element(1)
        tup.serialize_element(2)
        tup.end()
        assert ser.output == "(1, 2,)"

    def test_tuple_separated_opens_block(self):
        ser = Serializer(SEPARATE)
        tup = ser.serialize_tuple(1)
        assert ser.indent == 1
        tup.serialize_element(1)
        tup.end()
        assert ser.output == "(\n    1,\n)"

    def test_tuple_trim_keeps_wide_space_elements(self):
        ser = Serializer(LF)
        tup = ser.serialize_tuple(1)
        tup.serialize_element(" ")
        tup.end()
        assert ser.output == '(" ",)'

    def test_map_entries(self):
        ser = Serializer(LF)
        map_ser = ser.serialize_map(2)
        map_ser.serialize_key("a")
        map_ser.serialize_value(1)
        map_ser.serialize_entry(Color.GREEN, None)
        map_ser.end()
        assert ser.output == '{\n    "a": 1,\n    GREEN: None,\n}'

    def test_struct_closes_with_paren(self):
        ser = Serializer(PrettyConfig.basic(False))
        struct = ser.serialize_struct("Unit", 0)
        struct.end()
        assert ser.output == "()"

    def test_struct_variant_name(self):
        ser = Serializer(PrettyConfig.basic(False))
        struct = ser.serialize_struct_variant("Shape", 2, "Rect", 2)
        struct.serialize_field("w", 3)
        struct.serialize_field("h", 4)
        struct.end()
        assert ser.output == "Rect(w:3,h:4,)"

    def test_tuple_struct_name(self):
        ser = Serializer(LF)
        tup = ser.serialize_tuple_struct("Pair", 2)
        tup.serialize_field(Char("a"))
        tup.serialize_field(Char("b"))
        tup.end()
        assert ser.output == "Pair('a', 'b',)"


class TestIndentBalance:
    """Blocks opened during a run are all closed again."""

    @pytest.mark.parametrize(
        "config",
        [LF, SEPARATE, PrettyConfig.basic(False), PrettyConfig.basic(True)],
        ids=["pretty", "separate", "basic", "basic-names"],
    )
    def test_balanced(self, config):
        ser = CountingSerializer(config)
        serialize_value(NESTED, ser)
        assert ser.opened == ser.closed
        assert ser.opened > 0
        assert ser.indent == 0

    def test_closing_delimiter_aligned_with_opening_line(self):
        ser = Serializer(LF)
        serialize_value({"k": [1]}, ser)
        lines = ser.output.split("\n")
        assert lines == ["{", '    "k": [', "        1,", "    ],", "}"]

    def test_error_aborts_run(self):
        class Failing:
            def serialize(self, serializer):
                raise SerializeError.custom("broken")

        ser = Serializer(LF)
        with pytest.raises(SerializeError, match="broken"):
            serialize_value([1, Failing()], ser)
