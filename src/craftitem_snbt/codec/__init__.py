"""codec subpackage: SNBT text serialization.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from craftitem_snbt.codec import SNBTConverter
    from craftitem_snbt.tree import Compound, Int

    SNBTConverter().convert(Compound({"a": Int(1)}), True)   # [a=1]
"""

from __future__ import annotations

from craftitem_snbt.codec.converter import SNBTConverter
from craftitem_snbt.codec.escape import escape, escape_key

__all__ = ["SNBTConverter", "escape", "escape_key"]
