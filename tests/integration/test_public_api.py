"""Integration tests for the public API surface.

All imports are from the top-level ``craftitem_snbt`` package, never from
internal submodules.  Covers realistic item payloads in both output syntaxes,
the error hierarchy, and the modifier wiring end to end.
"""

from __future__ import annotations

import pytest

from craftitem_snbt import (
    InvalidNumericLiteralError,
    ItemTarget,
    NormalizationError,
    NormalizerConfig,
    SNBTError,
    SNBTModifier,
    TypeMismatchError,
    to_snbt,
)


class TestLegacyItemCompound:
    """Pre-1.20.5 item tag built from configuration strings."""

    def test_display_lore_and_flags(self) -> None:
        raw = {
            "display": {
                "Name": {
                    "$type": "raw",
                    "$value": '\'{"text":"Relic","italic":false}\'',
                },
                "Lore": ["First line", "Second line"],
            },
            "HideFlags": "63i",
            "Unbreakable": {"$type": "byte", "$value": "1"},
        }
        assert to_snbt(raw) == (
            "{display:{Name:'{\"text\":\"Relic\",\"italic\":false}',"
            'Lore:["First line","Second line"]},'
            "HideFlags:63,Unbreakable:1b}"
        )

    def test_attribute_modifier_uuid(self) -> None:
        raw = {
            "AttributeModifiers": [
                {
                    "AttributeName": "generic.attack_damage",
                    "Amount": {"$type": "double", "$value": "7"},
                    "UUID": {"$type": "int_array", "$value": [1, 2, 3, 4]},
                }
            ]
        }
        assert to_snbt(raw) == (
            "{AttributeModifiers:[{AttributeName:generic.attack_damage,"
            "Amount:7.0,UUID:[I;1,2,3,4]}]}"
        )


class TestDataComponents:
    """1.20.5+ data component strings."""

    def test_component_string(self) -> None:
        raw = {
            "max_stack_size": 16,
            "enchantment_glint_override": True,
            "custom_data": {"quest": "intro", "stage": "2b"},
        }
        assert to_snbt(raw, use_bracket_form=True) == (
            "[max_stack_size=16,enchantment_glint_override=true,"
            "custom_data={quest:intro,stage:2b}]"
        )

    def test_modifier_prefixes_material(self) -> None:
        class Item:
            material_key = "minecraft:paper"

            def __init__(self) -> None:
                self.snbt = ""

            def apply_snbt(self, snbt: str, component: bool) -> None:
                assert component is True
                self.snbt = snbt

        item = Item()
        assert isinstance(item, ItemTarget)
        SNBTModifier({"rarity": "epic"}, use_data_component=True).modify(item)
        assert item.snbt == "minecraft:paper[rarity=epic]"


class TestErrorHierarchy:
    def test_all_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            to_snbt({"$type": "short", "$value": "lots"})

    def test_numeric_error_details(self) -> None:
        with pytest.raises(InvalidNumericLiteralError) as exc_info:
            to_snbt({"stats": [{"power": {"$type": "short", "$value": "lots"}}]})
        err = exc_info.value
        assert isinstance(err, NormalizationError)
        assert isinstance(err, SNBTError)
        assert err.path == "/stats/0/power"

    def test_type_mismatch_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            to_snbt({"$type": "compound", "$value": "nope"})
        with pytest.raises(TypeMismatchError):
            to_snbt({"$type": "compound", "$value": "nope"})


class TestCustomReservedKeys:
    def test_alternate_directive_keys(self) -> None:
        config = NormalizerConfig(type_key="==type", value_key="==value")
        raw = {"a": {"==type": "long", "==value": 3}, "$type": "plain"}
        assert to_snbt(raw, config=config) == '{a:3L,"$type":plain}'
