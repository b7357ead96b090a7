"""Exception hierarchy for craftitem-snbt.

Every error raised while normalizing a raw value tree derives from
``NormalizationError``, which in turn derives from ``SNBTError`` (a
``ValueError``).  A single invalid node aborts the whole ``normalize()`` call;
callers should report these as configuration errors to whoever authored the
input data.

Each normalization error records ``path``: a JSON Pointer style location of
the offending node ("" for the root, "/display/Name", "/Lore/0", ...).
"""

from __future__ import annotations

__all__ = [
    "InvalidNumericLiteralError",
    "InvalidTypeKeyError",
    "MissingValueKeyError",
    "NormalizationError",
    "SNBTError",
    "TypeMismatchError",
    "UnknownTypeError",
]


class SNBTError(ValueError):
    """Base class for all errors raised by craftitem-snbt."""


class NormalizationError(SNBTError):
    """A raw value tree could not be normalized into a typed tree."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        if path:
            message = f"{message} (at {path!r})"
        super().__init__(message)


class MissingValueKeyError(NormalizationError):
    """A forced-value directive has a type key but no value key."""

    def __init__(self, type_key: str, value_key: str, path: str = "") -> None:
        self.type_key = type_key
        self.value_key = value_key
        msg = f"Map with {type_key!r} entry must also have {value_key!r} entry"
        super().__init__(msg, path)


class InvalidTypeKeyError(NormalizationError):
    """The type key of a forced-value directive is not a string."""

    def __init__(self, type_value: object, path: str = "") -> None:
        self.type_value = type_value
        msg = f"Type must be a string, got {type(type_value).__name__}"
        super().__init__(msg, path)


class UnknownTypeError(NormalizationError):
    """The type key names a type tag that is not supported."""

    def __init__(self, type_name: str, path: str = "") -> None:
        self.type_name = type_name
        super().__init__(f"Unknown type: {type_name}", path)


class InvalidNumericLiteralError(NormalizationError):
    """A string could not be parsed as the requested numeric type."""

    def __init__(self, value: object, target: str, path: str = "") -> None:
        self.value = value
        self.target = target
        super().__init__(f"Cannot convert {value!r} to {target}", path)


class TypeMismatchError(NormalizationError, TypeError):
    """The shape of a value is incompatible with the requested type."""

    def __init__(self, value: object, expected: str, path: str = "") -> None:
        self.value = value
        self.expected = expected
        msg = f"Value must be {expected}, got {type(value).__name__}"
        super().__init__(msg, path)
