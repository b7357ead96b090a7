"""Typed value nodes and the TagType StrEnum for SNBT value trees.

A ``Value`` is one of a closed set of node types.  ``None`` stands for the
null value; every other variant is a small frozen dataclass wrapping a Python
scalar, a tuple/dict of child values, or a read-only numpy array.

Numeric variants are width exact: constructing ``Byte(200)`` raises
``ValueError`` instead of silently wrapping.  Narrowing with wrap-around is a
normalization concern (see ``tree.literals.wrap_integer``), never a node one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, ClassVar, TypeAlias

import numpy as np

__all__ = [
    "VALUE_TYPES",
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
    "Raw",
    "Short",
    "Str",
    "TagType",
    "Value",
]


class TagType(StrEnum):
    """Type tags accepted by forced-value directives.

    StrEnum values are the lowercased member names:
    - BYTE_ARRAY -> "byte_array"
    - INT        -> "int"
    - ...

    ``TagType.parse`` also accepts the legacy aliases ``integer``,
    ``bytearray``, ``intarray`` and ``longarray``, case-insensitively.
    """

    BYTE = auto()
    BOOLEAN = auto()
    SHORT = auto()
    INT = auto()
    LONG = auto()
    FLOAT = auto()
    DOUBLE = auto()
    STRING = auto()
    RAW = auto()
    LIST = auto()
    COMPOUND = auto()
    BYTE_ARRAY = auto()
    INT_ARRAY = auto()
    LONG_ARRAY = auto()

    @classmethod
    def parse(cls, name: str) -> TagType | None:
        """Resolve a type tag name, returning None when it is not supported."""
        lowered = name.lower()
        if lowered in _TAG_ALIASES:
            return _TAG_ALIASES[lowered]
        try:
            return cls(lowered)
        except ValueError:
            return None


_TAG_ALIASES: dict[str, TagType] = {
    "integer": TagType.INT,
    "bytearray": TagType.BYTE_ARRAY,
    "intarray": TagType.INT_ARRAY,
    "longarray": TagType.LONG_ARRAY,
}


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bool(self.value))


@dataclass(frozen=True, slots=True)
class _Integral:
    """Shared width check for the four signed integer variants."""

    value: int
    dtype: ClassVar[type[np.signedinteger[Any]]]

    def __post_init__(self) -> None:
        value = int(self.value)
        info = np.iinfo(self.dtype)
        if not info.min <= value <= info.max:
            msg = (
                f"{type(self).__name__} value must be in "
                f"[{info.min}, {info.max}], got {value}"
            )
            raise ValueError(msg)
        object.__setattr__(self, "value", value)


@dataclass(frozen=True, slots=True)
class Byte(_Integral):
    dtype = np.int8


@dataclass(frozen=True, slots=True)
class Short(_Integral):
    dtype = np.int16


@dataclass(frozen=True, slots=True)
class Int(_Integral):
    dtype = np.int32


@dataclass(frozen=True, slots=True)
class Long(_Integral):
    dtype = np.int64


@dataclass(frozen=True, slots=True)
class Float:
    """Single precision float; the stored value is rounded to float32."""

    value: float

    def __post_init__(self) -> None:
        value = float(self.value)
        with np.errstate(over="ignore"):
            single = float(np.float32(value))
        if math.isfinite(value) and not math.isfinite(single):
            msg = f"Float value out of single precision range: {value}"
            raise ValueError(msg)
        object.__setattr__(self, "value", single)


@dataclass(frozen=True, slots=True)
class Double:
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, slots=True)
class Str:
    value: str


@dataclass(frozen=True, slots=True)
class Raw:
    """A pre-formatted SNBT fragment, emitted verbatim by the converter."""

    value: str


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class List:
    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class Compound:
    """Insertion-ordered mapping of unique keys to values.

    The entries dict is copied on construction so later changes to the
    caller's dict never leak into the tree.
    """

    entries: dict[str, Value]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", dict(self.entries))


# ---------------------------------------------------------------------------
# Typed arrays
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, eq=False)
class _TypedArray:
    """Read-only 1-D numpy array of a fixed signed integer dtype.

    Accepts any iterable of integers (or a numpy integer array); every element
    must already fit the dtype.  ``bytes``/``bytearray`` are reinterpreted as
    signed bytes.
    """

    values: np.ndarray
    dtype: ClassVar[type[np.signedinteger[Any]]]

    def __post_init__(self) -> None:
        raw: Any = self.values
        if isinstance(raw, (bytes, bytearray)):
            source = np.frombuffer(bytes(raw), dtype=np.uint8).view(np.int8)
        elif isinstance(raw, np.ndarray):
            source = raw
        else:
            try:
                source = np.asarray(list(raw))
            except OverflowError as exc:
                msg = f"{type(self).__name__} element out of range"
                raise ValueError(msg) from exc
        if source.ndim != 1:
            msg = f"{type(self).__name__} must be one-dimensional"
            raise ValueError(msg)
        if source.size:
            if source.dtype.kind not in "iu":
                msg = f"{type(self).__name__} elements must be integers"
                raise ValueError(msg)
            info = np.iinfo(self.dtype)
            if int(source.min()) < info.min or int(source.max()) > info.max:
                msg = (
                    f"{type(self).__name__} elements must be in "
                    f"[{info.min}, {info.max}]"
                )
                raise ValueError(msg)
        array = source.astype(self.dtype)
        array.flags.writeable = False
        object.__setattr__(self, "values", array)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.values.tobytes()))

    def __len__(self) -> int:
        return int(self.values.size)


@dataclass(frozen=True, slots=True, eq=False)
class ByteArray(_TypedArray):
    dtype = np.int8


@dataclass(frozen=True, slots=True, eq=False)
class IntArray(_TypedArray):
    dtype = np.int32


@dataclass(frozen=True, slots=True, eq=False)
class LongArray(_TypedArray):
    dtype = np.int64


Value: TypeAlias = (
    Boolean
    | Byte
    | Short
    | Int
    | Long
    | Float
    | Double
    | Str
    | Raw
    | List
    | Compound
    | ByteArray
    | IntArray
    | LongArray
    | None
)

# Every non-null variant, for isinstance() checks
VALUE_TYPES: tuple[type, ...] = (
    Boolean,
    Byte,
    Short,
    Int,
    Long,
    Float,
    Double,
    Str,
    Raw,
    List,
    Compound,
    ByteArray,
    IntArray,
    LongArray,
)
