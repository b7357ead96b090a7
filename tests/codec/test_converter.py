"""Tests for SNBTConverter.

Covers per-type rendering and suffixes, both top-level grammars, entry
ordering, nested compounds, null handling, typed arrays and the TypeError
raised for values outside the closed node set.
"""

from __future__ import annotations

import pytest

from craftitem_snbt.codec.converter import SNBTConverter
from craftitem_snbt.config import OutputFormat
from craftitem_snbt.tree.nodes import (
    Boolean,
    Byte,
    ByteArray,
    Compound,
    Double,
    Float,
    Int,
    IntArray,
    List,
    Long,
    LongArray,
    Raw,
    Short,
    Str,
)


@pytest.fixture
def converter() -> SNBTConverter:
    return SNBTConverter()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class TestScalars:
    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (Boolean(True), "true"),
            (Boolean(False), "false"),
            (Byte(5), "5b"),
            (Byte(-128), "-128b"),
            (Short(12), "12s"),
            (Int(42), "42"),
            (Int(-7), "-7"),
            (Long(10000000000), "10000000000L"),
            (Float(1.5), "1.5f"),
            (Float(123.45), "123.45f"),
            (Float(1.0), "1.0f"),
            (Double(0.5), "0.5"),
            (Double(3.0), "3.0"),
            (Double(0.1), "0.1"),
        ],
    )
    def test_numeric_rendering(
        self, converter: SNBTConverter, node: object, expected: str
    ) -> None:
        assert converter.render(node) == expected  # type: ignore[arg-type]

    def test_double_exponent_keeps_decimal_point(
        self, converter: SNBTConverter
    ) -> None:
        assert converter.render(Double(1e16)) == "1.0e+16"

    def test_plain_string(self, converter: SNBTConverter) -> None:
        assert converter.render(Str("Sword")) == "Sword"

    def test_string_needing_quotes(self, converter: SNBTConverter) -> None:
        assert converter.render(Str("Enchanted Sword")) == '"Enchanted Sword"'

    def test_numeric_looking_string_is_quoted(self, converter: SNBTConverter) -> None:
        assert converter.render(Str("123")) == '"123"'

    def test_raw_is_verbatim(self, converter: SNBTConverter) -> None:
        fragment = '{text:"Hello",color:"gold"}'
        assert converter.render(Raw(fragment)) == fragment

    def test_raw_is_never_escaped(self, converter: SNBTConverter) -> None:
        assert converter.render(Raw("a b")) == "a b"

    def test_nested_none_is_empty_string(self, converter: SNBTConverter) -> None:
        assert converter.render(None) == '""'


# ---------------------------------------------------------------------------
# Lists and arrays
# ---------------------------------------------------------------------------


class TestSequences:
    def test_list(self, converter: SNBTConverter) -> None:
        node = List((Str("a"), Int(1), Byte(2)))
        assert converter.render(node) == "[a,1,2b]"

    def test_empty_list(self, converter: SNBTConverter) -> None:
        assert converter.render(List()) == "[]"

    def test_list_with_null(self, converter: SNBTConverter) -> None:
        assert converter.render(List((None, Int(1)))) == '["",1]'

    def test_byte_array(self, converter: SNBTConverter) -> None:
        assert converter.render(ByteArray([1, -2, 3])) == "[B;1b,-2b,3b]"

    def test_int_array(self, converter: SNBTConverter) -> None:
        assert converter.render(IntArray([1, 2])) == "[I;1,2]"

    def test_long_array(self, converter: SNBTConverter) -> None:
        assert converter.render(LongArray([7])) == "[L;7L]"

    def test_empty_arrays(self, converter: SNBTConverter) -> None:
        assert converter.render(ByteArray([])) == "[B;]"
        assert converter.render(IntArray([])) == "[I;]"
        assert converter.render(LongArray([])) == "[L;]"

    def test_list_of_compounds(self, converter: SNBTConverter) -> None:
        node = List(
            (
                Compound({"id": Str("minecraft:sharpness"), "lvl": Short(5)}),
                Compound({"id": Str("minecraft:unbreaking"), "lvl": Short(3)}),
            )
        )
        assert converter.render(node) == (
            '[{id:"minecraft:sharpness",lvl:5s},{id:"minecraft:unbreaking",lvl:3s}]'
        )


# ---------------------------------------------------------------------------
# Compounds and output formats
# ---------------------------------------------------------------------------


class TestCompound:
    def test_standard_form(self, converter: SNBTConverter) -> None:
        assert converter.convert(Compound({"a": Int(1)})) == "{a:1}"

    def test_component_form(self, converter: SNBTConverter) -> None:
        result = converter.convert(Compound({"a": Int(1)}), OutputFormat.COMPONENT)
        assert result == "[a=1]"

    def test_bool_flag_selects_format(self, converter: SNBTConverter) -> None:
        node = Compound({"a": Int(1)})
        assert converter.convert(node, True) == "[a=1]"
        assert converter.convert(node, False) == "{a:1}"

    def test_string_format_value(self, converter: SNBTConverter) -> None:
        node = Compound({"a": Int(1)})
        assert converter.convert(node, "component") == "[a=1]"  # type: ignore[arg-type]

    def test_entries_in_insertion_order(self, converter: SNBTConverter) -> None:
        node = Compound({"z": Int(1), "a": Int(2), "m": Int(3)})
        assert converter.convert(node) == "{z:1,a:2,m:3}"

    def test_no_trailing_comma(self, converter: SNBTConverter) -> None:
        assert not converter.convert(Compound({"a": Int(1), "b": Int(2)})).endswith(
            ",}"
        )

    def test_empty_compound(self, converter: SNBTConverter) -> None:
        assert converter.convert(Compound({})) == "{}"
        assert converter.convert(Compound({}), OutputFormat.COMPONENT) == "[]"

    def test_nested_compound_stays_brace_form(self, converter: SNBTConverter) -> None:
        node = Compound(
            {"custom_data": Compound({"tag": Str("x")}), "max_stack_size": Int(16)}
        )
        assert converter.convert(node, OutputFormat.COMPONENT) == (
            "[custom_data={tag:x},max_stack_size=16]"
        )

    def test_compound_inside_list_stays_brace_form(
        self, converter: SNBTConverter
    ) -> None:
        node = Compound({"lore": List((Compound({"text": Str("a")}),))})
        assert converter.convert(node, True) == "[lore=[{text:a}]]"

    def test_keys_are_escaped(self, converter: SNBTConverter) -> None:
        node = Compound({"my key": Int(1), "5b": Int(2), "minecraft:x": Int(3)})
        assert converter.convert(node) == '{"my key":1,5b:2,"minecraft:x":3}'

    def test_null_entry(self, converter: SNBTConverter) -> None:
        assert converter.convert(Compound({"a": None})) == '{a:""}'

    def test_full_item(self, converter: SNBTConverter) -> None:
        node = Compound(
            {
                "display": Compound({"Name": Str("Enchanted Sword")}),
                "Unbreakable": Boolean(True),
                "CustomModelData": Int(1001),
            }
        )
        assert converter.convert(node) == (
            '{display:{Name:"Enchanted Sword"},Unbreakable:true,CustomModelData:1001}'
        )


# ---------------------------------------------------------------------------
# Top-level non-compound values
# ---------------------------------------------------------------------------


class TestTopLevel:
    def test_none_standard(self, converter: SNBTConverter) -> None:
        assert converter.convert(None) == "{}"

    def test_none_component(self, converter: SNBTConverter) -> None:
        assert converter.convert(None, OutputFormat.COMPONENT) == "[]"

    def test_scalar_renders_directly(self, converter: SNBTConverter) -> None:
        assert converter.convert(Byte(1)) == "1b"
        assert converter.convert(Byte(1), True) == "1b"

    def test_list_ignores_component_format(self, converter: SNBTConverter) -> None:
        assert converter.convert(List((Int(1),)), True) == "[1]"

    def test_raw_top_level(self, converter: SNBTConverter) -> None:
        assert converter.convert(Raw("{a:1}"), True) == "{a:1}"

    def test_unknown_format_raises(self, converter: SNBTConverter) -> None:
        with pytest.raises(ValueError):
            converter.convert(Compound({}), "xml")  # type: ignore[arg-type]


class TestUnsupported:
    @pytest.mark.parametrize("value", [1, "text", 1.5, [1], {"a": 1}, object()])
    def test_non_node_raises_type_error(
        self, converter: SNBTConverter, value: object
    ) -> None:
        with pytest.raises(TypeError, match="Unsupported SNBT value type"):
            converter.render(value)  # type: ignore[arg-type]

    def test_non_node_inside_list_raises(self, converter: SNBTConverter) -> None:
        with pytest.raises(TypeError):
            converter.convert(List(("plain",)))  # type: ignore[arg-type]

    def test_converter_is_reusable(self, converter: SNBTConverter) -> None:
        node = Compound({"a": List((Int(1),))})
        assert converter.convert(node) == converter.convert(node)
