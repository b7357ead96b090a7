"""Numeric literal grammar shared by the normalizer's general and forced paths.

Two kinds of parsing live here:

- ``parse_numeric(body, tag)``: strict parse of an unsuffixed body into the
  numeric node for ``tag``.  Integers accept an optional sign and ASCII
  digits only; decimals accept ``1``, ``1.``, ``.5``, ``1.5e3`` and signs.
  Anything else (underscores, embedded whitespace, ``nan``, ``inf``) is
  rejected with ``ValueError``, as is a value outside the target width.
- ``parse_suffixed_literal(text)``: SNBT-style literal detection.  A string
  of length >= 2 whose last character is a type suffix (``b s l f d i``, any
  case) becomes the matching numeric node when its body parses; otherwise
  the result is None and the caller keeps the text as a string.

``parse_suffixed_literal`` is a pure function of its argument, so results are
memoized in a module-level LRU cache.  The nodes it returns are immutable and
safe to share between callers and threads.
"""

from __future__ import annotations

import math
import re
import threading
from numbers import Integral, Real
from typing import Any

import numpy as np
from cachetools import LRUCache, cached

from craftitem_snbt.tree.nodes import (
    Byte,
    Double,
    Float,
    Int,
    Long,
    Short,
    TagType,
)

__all__ = [
    "NUMERIC_TAGS",
    "NumericValue",
    "parse_numeric",
    "parse_suffixed_literal",
    "strip_suffix",
    "wrap_integer",
]

NumericValue = Byte | Short | Int | Long | Float | Double

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Suffix letter (lowercased) -> numeric tag
_SUFFIXES: dict[str, TagType] = {
    "b": TagType.BYTE,
    "s": TagType.SHORT,
    "l": TagType.LONG,
    "f": TagType.FLOAT,
    "d": TagType.DOUBLE,
    "i": TagType.INT,
}

# Suffix letters a forced-type string may carry for each numeric tag
_STRIPPABLE: dict[TagType, str] = {
    TagType.BYTE: "bB",
    TagType.SHORT: "sS",
    TagType.INT: "iI",
    TagType.LONG: "lL",
    TagType.FLOAT: "fFdD",
    TagType.DOUBLE: "dDfF",
}

_NODES: dict[TagType, type[NumericValue]] = {
    TagType.BYTE: Byte,
    TagType.SHORT: Short,
    TagType.INT: Int,
    TagType.LONG: Long,
    TagType.FLOAT: Float,
    TagType.DOUBLE: Double,
}

_INTEGER_DTYPES: dict[TagType, type[np.signedinteger[Any]]] = {
    TagType.BYTE: np.int8,
    TagType.SHORT: np.int16,
    TagType.INT: np.int32,
    TagType.LONG: np.int64,
}

NUMERIC_TAGS: frozenset[TagType] = frozenset(_NODES)

_literal_cache: LRUCache[str, NumericValue | None] = LRUCache(maxsize=2048)


def parse_numeric(body: str, tag: TagType) -> NumericValue:
    """Parse an unsuffixed numeric body into the node for ``tag``.

    Raises:
        ValueError: If the body is not a valid literal for ``tag`` or the
            value does not fit the target width.
    """
    node_type = _NODES[tag]
    if tag in _INTEGER_DTYPES:
        if not _INTEGER_RE.fullmatch(body):
            msg = f"invalid integer literal: {body!r}"
            raise ValueError(msg)
        return node_type(int(body))

    if not _DECIMAL_RE.fullmatch(body):
        msg = f"invalid decimal literal: {body!r}"
        raise ValueError(msg)
    number = float(body)
    if not math.isfinite(number):
        msg = f"decimal literal out of range: {body!r}"
        raise ValueError(msg)
    return node_type(number)


@cached(cache=_literal_cache, lock=threading.Lock())
def parse_suffixed_literal(text: str) -> NumericValue | None:
    """Return the numeric node for a suffixed literal like ``"5b"``, else None."""
    if len(text) < 2:
        return None
    tag = _SUFFIXES.get(text[-1].lower())
    if tag is None:
        return None
    try:
        return parse_numeric(text[:-1], tag)
    except ValueError:
        return None


def strip_suffix(text: str, tag: TagType) -> str:
    """Drop one trailing suffix letter that is valid for ``tag``."""
    if len(text) > 1 and text[-1] in _STRIPPABLE[tag]:
        return text[:-1]
    return text


def wrap_integer(number: Real, tag: TagType) -> int:
    """Narrow a number to the width of ``tag`` with two's-complement wrap.

    Floating point input is truncated toward zero and saturated at the 32-bit
    range (64-bit for ``LONG``) before wrapping; NaN becomes 0.
    """
    if isinstance(number, Integral):
        whole = int(number)
    else:
        real = float(number)
        wide = np.iinfo(np.int64 if tag is TagType.LONG else np.int32)
        if math.isnan(real):
            whole = 0
        elif math.isinf(real):
            whole = wide.max if real > 0 else wide.min
        else:
            whole = max(wide.min, min(wide.max, math.trunc(real)))

    bits = np.iinfo(_INTEGER_DTYPES[tag]).bits
    wrapped = whole & ((1 << bits) - 1)
    if wrapped >= 1 << (bits - 1):
        wrapped -= 1 << bits
    return wrapped
