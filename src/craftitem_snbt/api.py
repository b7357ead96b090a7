"""Public API functions for craftitem-snbt.

This module provides the user-facing functions: normalize, convert, to_snbt,
escape and escape_key.  Each call creates a fresh Normalizer / SNBTConverter
to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from craftitem_snbt.codec.converter import SNBTConverter
from craftitem_snbt.codec.escape import escape, escape_key
from craftitem_snbt.config import NormalizerConfig, OutputFormat
from craftitem_snbt.tree.nodes import Value
from craftitem_snbt.tree.normalizer import Normalizer, Translator, identity

__all__ = ["convert", "escape", "escape_key", "normalize", "to_snbt"]


def normalize(
    raw: Any,
    translator: Translator | None = None,
    config: NormalizerConfig | None = None,
) -> Value:
    """Normalize a raw value tree into a typed ``Value`` tree.

    Args:
        raw:        Raw tree: mappings, sequences, strings, numbers, booleans,
                    byte/int/long arrays, typed nodes or None.
        translator: Applied to every string scalar before interpretation.
                    Defaults to identity.
        config:     Normalizer options.  Defaults to ``NormalizerConfig()``.

    Returns:
        The typed ``Value`` tree.

    Raises:
        NormalizationError: On the first invalid node (missing ``$value``,
            non-string or unknown ``$type``, bad numeric literal, or a value
            of the wrong shape).
    """
    normalizer = Normalizer(
        translator=translator if translator is not None else identity,
        config=config if config is not None else NormalizerConfig(),
    )
    return normalizer.normalize(raw)


def convert(value: Value, use_bracket_form: bool | OutputFormat = False) -> str:
    """Serialize a typed ``Value`` tree to SNBT.

    Args:
        value:            The typed tree.  None yields ``{}`` or ``[]``.
        use_bracket_form: True (or ``OutputFormat.COMPONENT``) for data
                          component syntax ``[k=v]``; False for ``{k:v}``.

    Returns:
        The SNBT string.
    """
    return SNBTConverter().convert(value, use_bracket_form)


def to_snbt(
    raw: Any,
    translator: Translator | None = None,
    use_bracket_form: bool | OutputFormat = False,
    config: NormalizerConfig | None = None,
) -> str:
    """Normalize ``raw`` and serialize the result in one call.

    Equivalent to ``convert(normalize(raw, translator, config), use_bracket_form)``.
    """
    return convert(normalize(raw, translator, config), use_bracket_form)
