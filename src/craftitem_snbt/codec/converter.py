"""SNBTConverter: serializes a typed Value tree to SNBT text.

Two top-level grammars are supported:

- OutputFormat.COMPOUND:  ``{key:value,...}``
- OutputFormat.COMPONENT: ``[key=value,...]`` (data component syntax)

Only the top-level compound honours the component syntax.  Compounds nested
inside lists or other compounds are always rendered in brace form.

Rendering per node type::

    Boolean  -> true / false        Str        -> escape(value)
    Byte     -> 5b                  Raw        -> value, verbatim
    Short    -> 5s                  List       -> [a,b,c]
    Int      -> 5                   ByteArray  -> [B;1b,2b]
    Long     -> 5L                  IntArray   -> [I;1,2]
    Float    -> 1.5f                LongArray  -> [L;1L,2L]
    Double   -> 1.5                 None       -> "" (nested only)
"""

from __future__ import annotations

import math

import numpy as np

from craftitem_snbt.codec.escape import escape, escape_key
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
    Value,
)

__all__ = ["SNBTConverter"]


def _format_double(number: float) -> str:
    # An unsuffixed double must contain a decimal point to be read as a double
    text = repr(number)
    if math.isfinite(number) and "." not in text:
        mantissa, sep, exponent = text.partition("e")
        text = f"{mantissa}.0{sep}{exponent}"
    return text


def _format_float(number: float) -> str:
    return str(np.float32(number))


class SNBTConverter:
    """Serializes typed ``Value`` trees to SNBT strings.

    The converter is stateless and total over well-formed trees.  A node that
    is not one of the ``Value`` variants is a programming error and raises
    ``TypeError``.

    Non-finite ``Float`` and ``Double`` nodes are never produced by the
    normalizer.  When built by hand they render as ``nan`` or ``inf``, which the
    game reads back as strings.

    Example::

        converter = SNBTConverter()
        converter.convert(Compound({"key": Int(42), "name": Str("test")}))
        # {key:42,name:test}

        converter.convert(Compound({"key": Int(42)}), OutputFormat.COMPONENT)
        # [key=42]
    """

    def convert(
        self,
        value: Value,
        output_format: OutputFormat | bool = OutputFormat.COMPOUND,
    ) -> str:
        """Convert a value to SNBT.

        Args:
            value:         The typed tree to serialize.  A top-level None
                           yields an empty compound in the chosen syntax.
            output_format: An ``OutputFormat``, or a bool where True selects
                           the data component syntax.

        Returns:
            The SNBT string.
        """
        if isinstance(output_format, bool):
            output_format = OutputFormat.from_flag(output_format)
        else:
            output_format = OutputFormat(output_format)

        if value is None:
            return "[]" if output_format is OutputFormat.COMPONENT else "{}"
        if isinstance(value, Compound):
            return self._render_compound(value, output_format)
        return self.render(value)

    def render(self, value: Value) -> str:
        """Render a single node in standard (brace) form."""
        if value is None:
            return '""'

        if isinstance(value, Raw):
            return value.value

        if isinstance(value, Compound):
            return self._render_compound(value, OutputFormat.COMPOUND)

        if isinstance(value, Boolean):
            return "true" if value.value else "false"

        if isinstance(value, Byte):
            return f"{value.value}b"
        if isinstance(value, Short):
            return f"{value.value}s"
        if isinstance(value, Int):
            return str(value.value)
        if isinstance(value, Long):
            return f"{value.value}L"
        if isinstance(value, Float):
            return f"{_format_float(value.value)}f"
        if isinstance(value, Double):
            return _format_double(value.value)

        if isinstance(value, Str):
            return escape(value.value)

        if isinstance(value, List):
            return "[" + ",".join(self.render(item) for item in value.items) + "]"

        if isinstance(value, ByteArray):
            return "[B;" + ",".join(f"{n}b" for n in value.values.tolist()) + "]"
        if isinstance(value, IntArray):
            return "[I;" + ",".join(str(n) for n in value.values.tolist()) + "]"
        if isinstance(value, LongArray):
            return "[L;" + ",".join(f"{n}L" for n in value.values.tolist()) + "]"

        msg = f"Unsupported SNBT value type: {type(value)!r}"
        raise TypeError(msg)

    def _render_compound(self, compound: Compound, output_format: OutputFormat) -> str:
        if output_format is OutputFormat.COMPONENT:
            open_, separator, close = "[", "=", "]"
        else:
            open_, separator, close = "{", ":", "}"
        body = ",".join(
            f"{escape_key(key)}{separator}{self.render(item)}"
            for key, item in compound.entries.items()
        )
        return f"{open_}{body}{close}"
