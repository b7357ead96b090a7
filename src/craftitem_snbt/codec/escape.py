"""SNBT string and key quoting.

A bare (unquoted) SNBT token may only contain ASCII letters, digits and
``_ - . +``.  String values additionally must not start with a digit or one of
``- . +``, otherwise the game would read them back as numbers.  Keys are never
read as numbers, so only the character class applies to them.

Quoted form wraps the text in double quotes, escaping ``\\`` and ``"``.
"""

import re

__all__ = ["escape", "escape_key", "needs_quotes", "needs_quotes_for_key"]

_BARE_KEY = re.compile(r"[A-Za-z0-9_\-.+]+")

# Same character class, but the first character must not look numeric
_BARE_VALUE = re.compile(r"[A-Za-z_][A-Za-z0-9_\-.+]*")


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def needs_quotes(text: str) -> bool:
    """Return True if ``text`` must be quoted when emitted as a string value."""
    return _BARE_VALUE.fullmatch(text) is None


def needs_quotes_for_key(key: str) -> bool:
    """Return True if ``key`` must be quoted when emitted as a compound key."""
    return _BARE_KEY.fullmatch(key) is None


def escape(text: str) -> str:
    """Escape a string value for SNBT.

    Example::

        escape("hello_world")  # hello_world
        escape("hi there")     # "hi there"
        escape("1abc")         # "1abc"
        escape("")             # ""
    """
    return _quote(text) if needs_quotes(text) else text


def escape_key(key: str) -> str:
    """Escape a compound key for SNBT; a leading digit does not force quotes."""
    return _quote(key) if needs_quotes_for_key(key) else key
