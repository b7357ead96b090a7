"""Normalizer: converts a loosely typed raw tree into a typed Value tree.

Raw trees usually come from configuration parsing (YAML, JSON, TOML), where
most scalars arrive as strings.  The normalizer walks the tree depth first,
applies the caller's translator to every string scalar, detects suffixed
numeric literals (``"5b"``, ``"1.5f"``, ``"10L"``) and resolves forced-value
directives::

    {"$type": "float", "$value": "123.45"}   ->  Float(123.45)
    {"$type": "byte_array", "$value": [1, "2b"]}  ->  ByteArray([1, 2])

Error paths are JSON Pointer style: root is "", each level appends
"/{key_or_index}".
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any

import numpy as np

from craftitem_snbt.config import NormalizerConfig
from craftitem_snbt.errors import (
    InvalidNumericLiteralError,
    InvalidTypeKeyError,
    MissingValueKeyError,
    TypeMismatchError,
    UnknownTypeError,
)
from craftitem_snbt.tree.literals import (
    NUMERIC_TAGS,
    NumericValue,
    parse_numeric,
    parse_suffixed_literal,
    strip_suffix,
    wrap_integer,
)
from craftitem_snbt.tree.nodes import (
    VALUE_TYPES,
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

__all__ = ["Normalizer", "Translator", "identity"]

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]

_INT_RANGE = np.iinfo(np.int32)
_LONG_RANGE = np.iinfo(np.int64)

# numpy scalar dtype -> node type, for values already typed by the caller
_NUMPY_SCALARS: dict[np.dtype[Any], type[Value]] = {
    np.dtype(np.int8): Byte,
    np.dtype(np.int16): Short,
    np.dtype(np.int32): Int,
    np.dtype(np.int64): Long,
    np.dtype(np.float32): Float,
    np.dtype(np.float64): Double,
}

_ARRAY_TAGS: dict[TagType, tuple[type[ByteArray | IntArray | LongArray], TagType]] = {
    TagType.BYTE_ARRAY: (ByteArray, TagType.BYTE),
    TagType.INT_ARRAY: (IntArray, TagType.INT),
    TagType.LONG_ARRAY: (LongArray, TagType.LONG),
}

_NUMERIC_NODES = (Byte, Short, Int, Long, Float, Double)


def identity(text: str) -> str:
    """Translator that returns its input unchanged."""
    return text


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _finite_float(number: Real, tag: TagType, path: str) -> float:
    try:
        result = float(number)
    except OverflowError as exc:
        raise InvalidNumericLiteralError(number, tag, path) from exc
    if not math.isfinite(result):
        raise InvalidNumericLiteralError(number, tag, path)
    return result


def _stringify(value: object, path: str) -> str:
    if value is None:
        raise TypeMismatchError(value, "a value that can be stringified", path)
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, (Str, Raw, Boolean, *_NUMERIC_NODES)):
        return _stringify(value.value, path)
    return str(value)


@dataclass
class Normalizer:
    """Converts a raw value tree into a typed ``Value`` tree.

    Dispatch order matters: ``bool`` MUST be checked before ``Integral``
    because bool is a subclass of int in Python, and typed ``Value`` nodes are
    checked first so that normalizing an already typed tree is a no-op.

    The translator is called synchronously, once for every string scalar met
    (keys are never translated).  Its results are not memoized.

    Example::

        normalizer = Normalizer(translator=lambda s: s.replace("{lvl}", "5"))
        normalizer.normalize({"lvl": "{lvl}s", "name": "Sword"})
        # Compound({"lvl": Short(5), "name": Str("Sword")})
    """

    translator: Translator = identity
    config: NormalizerConfig = field(default_factory=NormalizerConfig)

    def normalize(self, raw: Any, path: str = "") -> Value:
        """Normalize a raw value.

        Args:
            raw:  Mapping, sequence, string, number, boolean, bytes, numpy
                  scalar/array, typed ``Value`` node, or None.
            path: JSON Pointer path of ``raw``, used in error messages.
                  Defaults to "" (root).

        Returns:
            The typed ``Value`` tree.

        Raises:
            NormalizationError: On the first invalid node; no partial tree is
                returned.
        """
        if raw is None:
            return None

        if isinstance(raw, VALUE_TYPES):
            return raw

        # CRITICAL: bool MUST be checked before Integral, bool subclasses int
        if isinstance(raw, (bool, np.bool_)):
            return Boolean(bool(raw))

        if isinstance(raw, Mapping):
            return self._normalize_mapping(raw, path)

        if isinstance(raw, str):
            return self._normalize_string(raw)

        if isinstance(raw, (bytes, bytearray)):
            return ByteArray(raw)

        if isinstance(raw, np.ndarray):
            return self._normalize_ndarray(raw, path)

        if isinstance(raw, np.generic):
            node_type = _NUMPY_SCALARS.get(raw.dtype)
            if node_type is None:
                return self.normalize(raw.item(), path)
            if node_type is Float:
                return Float(_finite_float(raw.item(), TagType.FLOAT, path))
            if node_type is Double:
                return Double(_finite_float(raw.item(), TagType.DOUBLE, path))
            return node_type(raw.item())  # type: ignore[call-arg]

        if isinstance(raw, Integral):
            return self._normalize_integer(int(raw), path)

        if isinstance(raw, Real):
            return Double(_finite_float(raw, TagType.DOUBLE, path))

        if _is_sequence(raw):
            return self._normalize_sequence(raw, path)

        raise TypeMismatchError(
            raw, "a mapping, sequence, string, number, boolean, array or None", path
        )

    # ------------------------------------------------------------------
    # General path
    # ------------------------------------------------------------------

    def _prepare(self, text: str) -> str:
        if self.config.trim_strings:
            text = text.strip()
        return self.translator(text)

    def _normalize_string(self, raw: str) -> Value:
        text = self._prepare(raw)
        if self.config.infer_literals:
            literal = parse_suffixed_literal(text)
            if literal is not None:
                return literal
        return Str(text)

    def _normalize_integer(self, value: int, path: str) -> Value:
        if _INT_RANGE.min <= value <= _INT_RANGE.max:
            return Int(value)
        if _LONG_RANGE.min <= value <= _LONG_RANGE.max:
            return Long(value)
        raise InvalidNumericLiteralError(value, TagType.LONG, path)

    def _normalize_sequence(self, raw: Sequence[Any], path: str) -> List:
        return List(
            tuple(self.normalize(item, f"{path}/{idx}") for idx, item in enumerate(raw))
        )

    def _normalize_mapping(self, raw: Mapping[Any, Any], path: str) -> Value:
        type_key = self.config.type_key
        value_key = self.config.value_key

        if type_key in raw:
            if value_key not in raw:
                raise MissingValueKeyError(type_key, value_key, path)
            return self.coerce(raw[type_key], raw[value_key], path)

        entries: dict[str, Value] = {}
        for key, value in raw.items():
            if not isinstance(key, str):
                raise TypeMismatchError(key, "a string key", path)
            entries[key] = self.normalize(value, f"{path}/{key}")
        return Compound(entries)

    def _normalize_ndarray(self, raw: np.ndarray, path: str) -> Value:
        if raw.ndim != 1:
            raise TypeMismatchError(raw, "a one-dimensional array", path)
        for array_type in (ByteArray, IntArray, LongArray):
            if raw.dtype == array_type.dtype:
                return array_type(raw)
        return self._normalize_sequence(raw.tolist(), path)

    # ------------------------------------------------------------------
    # Forced-value directives
    # ------------------------------------------------------------------

    def coerce(self, type_name: Any, value: Any, path: str = "") -> Value:
        """Resolve a forced-value directive ``{type_key: type_name, value_key: value}``.

        Raises:
            InvalidTypeKeyError: ``type_name`` is not a string.
            UnknownTypeError: ``type_name`` is not a supported tag.
            InvalidNumericLiteralError: A string does not parse as the target.
            TypeMismatchError: ``value`` has the wrong shape for the target.
        """
        if not isinstance(type_name, str):
            raise InvalidTypeKeyError(type_name, path)
        tag = TagType.parse(type_name)
        if tag is None:
            raise UnknownTypeError(type_name.lower(), path)

        logger.debug("Forcing %s value at %r", tag, path or "/")

        if tag in NUMERIC_TAGS:
            return self._coerce_number(value, tag, path)
        if tag is TagType.BOOLEAN:
            return self._coerce_boolean(value, path)
        if tag is TagType.STRING:
            return Str(self.translator(_stringify(value, path)))
        if tag is TagType.RAW:
            return Raw(self.translator(_stringify(value, path)))
        if tag is TagType.LIST:
            if isinstance(value, List):
                return value
            if not _is_sequence(value):
                raise TypeMismatchError(value, "a list", path)
            return self._normalize_sequence(value, path)
        if tag is TagType.COMPOUND:
            if isinstance(value, Compound):
                return value
            if not isinstance(value, Mapping):
                raise TypeMismatchError(value, "a mapping", path)
            return self._normalize_mapping(value, path)
        return self._coerce_array(value, tag, path)

    def _coerce_number(self, value: Any, tag: TagType, path: str) -> NumericValue:
        if isinstance(value, _NUMERIC_NODES):
            value = value.value

        if isinstance(value, str):
            text = strip_suffix(self._prepare(value), tag)
            try:
                return parse_numeric(text, tag)
            except ValueError as exc:
                raise InvalidNumericLiteralError(value, tag, path) from exc

        if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
            raise TypeMismatchError(value, "a number or string", path)

        if tag is TagType.DOUBLE:
            return Double(_finite_float(value, tag, path))
        if tag is TagType.FLOAT:
            number = _finite_float(value, tag, path)
            try:
                return Float(number)
            except ValueError as exc:
                raise InvalidNumericLiteralError(value, tag, path) from exc

        wrapped = wrap_integer(value, tag)
        if tag is TagType.BYTE:
            return Byte(wrapped)
        if tag is TagType.SHORT:
            return Short(wrapped)
        if tag is TagType.INT:
            return Int(wrapped)
        return Long(wrapped)

    def _coerce_boolean(self, value: Any, path: str) -> Boolean:
        if isinstance(value, Boolean):
            return value
        if isinstance(value, (bool, np.bool_)):
            return Boolean(bool(value))
        if isinstance(value, _NUMERIC_NODES):
            value = value.value
        if isinstance(value, Real):
            return Boolean(wrap_integer(value, TagType.INT) != 0)
        if isinstance(value, str):
            text = self._prepare(value).lower()
            if text == "true":
                return Boolean(True)
            if text == "false":
                return Boolean(False)
            try:
                return Boolean(parse_numeric(text, TagType.INT).value != 0)
            except ValueError as exc:
                raise InvalidNumericLiteralError(value, TagType.BOOLEAN, path) from exc
        raise TypeMismatchError(value, "a boolean, number or string", path)

    def _coerce_array(
        self, value: Any, tag: TagType, path: str
    ) -> ByteArray | IntArray | LongArray:
        array_type, element_tag = _ARRAY_TAGS[tag]

        if isinstance(value, array_type):
            return value
        if array_type is ByteArray and isinstance(value, (bytes, bytearray)):
            return ByteArray(value)
        if isinstance(value, np.ndarray):
            if value.ndim != 1:
                raise TypeMismatchError(value, "a one-dimensional array", path)
            if value.dtype == array_type.dtype:
                return array_type(value)
            value = value.tolist()
        if not _is_sequence(value):
            raise TypeMismatchError(value, f"{tag} or a list", path)

        elements = [
            self._coerce_number(item, element_tag, f"{path}/{idx}").value
            for idx, item in enumerate(value)
        ]
        return array_type(elements)
