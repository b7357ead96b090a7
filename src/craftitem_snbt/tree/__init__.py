"""Tree subpackage: typed SNBT value nodes and raw-tree normalization.

Re-exports the public API for the tree module:
- TagType: StrEnum of the forced-value type tags (byte, int, byte_array, ...)
- Value node types: Boolean, Byte, Short, Int, Long, Float, Double, Str, Raw,
  List, Compound, ByteArray, IntArray, LongArray (None is the null value)
- Normalizer: converts a loosely typed raw tree into a typed Value tree
"""

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
    TagType,
    Value,
)
from craftitem_snbt.tree.normalizer import Normalizer, Translator

__all__ = [
    "Boolean",
    "Byte",
    "ByteArray",
    "Compound",
    "Double",
    "Float",
    "Int",
    "IntArray",
    "List",
    "Long",
    "LongArray",
    "Normalizer",
    "Raw",
    "Short",
    "Str",
    "TagType",
    "Translator",
    "Value",
]
