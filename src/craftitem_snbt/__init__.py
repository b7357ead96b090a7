"""craftitem-snbt - typed normalization and SNBT serialization of item NBT data."""

from __future__ import annotations

from craftitem_snbt.api import convert, escape, escape_key, normalize, to_snbt
from craftitem_snbt.codec.converter import SNBTConverter
from craftitem_snbt.config import NormalizerConfig, OutputFormat
from craftitem_snbt.errors import (
    InvalidNumericLiteralError,
    InvalidTypeKeyError,
    MissingValueKeyError,
    NormalizationError,
    SNBTError,
    TypeMismatchError,
    UnknownTypeError,
)
from craftitem_snbt.modifier import SNBTModifier
from craftitem_snbt.protocols import ItemTarget
from craftitem_snbt.tree.normalizer import Normalizer

__version__: str = "0.1.0"
__all__: list[str] = [
    "InvalidNumericLiteralError",
    "InvalidTypeKeyError",
    "ItemTarget",
    "MissingValueKeyError",
    "NormalizationError",
    "Normalizer",
    "NormalizerConfig",
    "OutputFormat",
    "SNBTConverter",
    "SNBTError",
    "SNBTModifier",
    "TypeMismatchError",
    "UnknownTypeError",
    "convert",
    "escape",
    "escape_key",
    "normalize",
    "to_snbt",
]
