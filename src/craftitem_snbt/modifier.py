"""SNBTModifier: normalize, convert and apply NBT data to an item.

This is the wiring layer between the raw configuration value and an
``ItemTarget``:

- ``render()`` normalizes the raw value with the caller's translator,
  converts the typed tree to SNBT and, in data component form, prefixes the
  material key (``minecraft:stone[custom_name="x"]``).
- ``modify()`` renders with the item's own material key and hands the text
  to ``item.apply_snbt``.

Each call builds a fresh Normalizer and SNBTConverter, so a single modifier
can be shared between threads.  Errors from normalization and from the item
target propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from craftitem_snbt.codec.converter import SNBTConverter
from craftitem_snbt.config import NormalizerConfig, OutputFormat
from craftitem_snbt.tree.normalizer import Normalizer, Translator, identity

if TYPE_CHECKING:
    from craftitem_snbt.protocols import ItemTarget

__all__ = ["SNBTModifier"]

logger = logging.getLogger(__name__)


class SNBTModifier:
    """Applies a raw NBT value to items.

    Example::

        modifier = SNBTModifier(
            {"display": {"Name": "Enchanted Sword"},
             "Enchantments": [{"id": "minecraft:sharpness", "lvl": "5s"}]},
        )
        modifier.render()
        # {display:{Name:"Enchanted Sword"},Enchantments:[{id:"minecraft:sharpness",lvl:5s}]}

        SNBTModifier({"max_stack_size": 16}, use_data_component=True).render(
            material="minecraft:stone"
        )
        # minecraft:stone[max_stack_size=16]
    """

    def __init__(
        self,
        value: Any,
        use_data_component: bool = False,
        config: NormalizerConfig | None = None,
    ) -> None:
        """Initialise the modifier.

        Args:
            value: The raw NBT data, typically a mapping from configuration.
            use_data_component: When True, render data component syntax
                (Minecraft 1.20.5+) instead of a legacy SNBT compound.
            config: Normalizer options.  Defaults to ``NormalizerConfig()``.
        """
        self._value = value
        self._config = config if config is not None else NormalizerConfig()
        self._output_format = OutputFormat.from_flag(use_data_component)

    @property
    def use_data_component(self) -> bool:
        return self._output_format is OutputFormat.COMPONENT

    def render(
        self,
        translator: Translator | None = None,
        material: str | None = None,
    ) -> str:
        """Return the SNBT text for this modifier's value.

        Args:
            translator: String translator for variable substitution.
                Defaults to identity.
            material: Material key prefixed to data component strings.
                Ignored for legacy compounds.
        """
        normalizer = Normalizer(
            translator=translator if translator is not None else identity,
            config=self._config,
        )
        typed = normalizer.normalize(self._value)
        snbt = SNBTConverter().convert(typed, self._output_format)
        if self.use_data_component and material:
            snbt = material + snbt
        return snbt

    def modify(self, item: ItemTarget, translator: Translator | None = None) -> None:
        """Render for ``item``'s material and apply the text to it."""
        snbt = self.render(translator, material=item.material_key)
        logger.debug(
            "Applying %s NBT to %s: %s", self._output_format, item.material_key, snbt
        )
        item.apply_snbt(snbt, self.use_data_component)
