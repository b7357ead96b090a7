"""NormalizerConfig and OutputFormat for SNBT normalization and conversion.

NormalizerConfig is a frozen (immutable) dataclass holding the normalizer
options.  OutputFormat selects which of the two SNBT grammars the converter
emits at the top level: standard compound syntax or data component syntax.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["NormalizerConfig", "OutputFormat"]


class OutputFormat(StrEnum):
    """Top-level SNBT grammar produced by the converter.

    - COMPOUND:  Standard compound syntax, ``{key:value,...}``.
    - COMPONENT: Data component syntax, ``[key=value,...]``, used by item
                 component strings since Minecraft 1.20.5.
    """

    COMPOUND = auto()
    COMPONENT = auto()

    @classmethod
    def from_flag(cls, use_bracket_form: bool) -> OutputFormat:
        return cls.COMPONENT if use_bracket_form else cls.COMPOUND


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Immutable configuration for the Normalizer.

    Attributes:
        type_key: Reserved key that marks a mapping as a forced-value
            directive.  Default ``"$type"``.
        value_key: Reserved key holding the directive's value.
            Default ``"$value"``.
        infer_literals: When True, every string scalar outside a directive is
            checked for a suffixed numeric literal (``"5b"`` -> Byte 5).
            Default True.
        trim_strings: When True, string scalars have surrounding whitespace
            stripped before translation.  Default True.
    """

    type_key: str = "$type"
    value_key: str = "$value"
    infer_literals: bool = True
    trim_strings: bool = True

    def __post_init__(self) -> None:
        if not self.type_key:
            msg = "type_key must be a non-empty string"
            raise ValueError(msg)
        if not self.value_key:
            msg = "value_key must be a non-empty string"
            raise ValueError(msg)
        if self.type_key == self.value_key:
            msg = f"type_key and value_key must differ, both are {self.type_key!r}"
            raise ValueError(msg)
