"""ItemTarget Protocol: the external item object SNBT text is applied to.

craftitem-snbt never touches a game server's object model.  An item target
is any object that can report its material key and accept SNBT text, so
server adapters plug in without inheriting from any base class.

Example::

    from craftitem_snbt.protocols import ItemTarget

    class RecordingItem:
        material_key = "minecraft:diamond_sword"

        def __init__(self) -> None:
            self.applied: list[tuple[str, bool]] = []

        def apply_snbt(self, snbt: str, component: bool) -> None:
            self.applied.append((snbt, component))

    assert isinstance(RecordingItem(), ItemTarget)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["ItemTarget"]


@runtime_checkable
class ItemTarget(Protocol):
    """Structural protocol for items that accept SNBT data.

    - ``material_key`` is the namespaced material id, e.g.
      ``"minecraft:diamond_sword"``.  It prefixes data component strings.
    - ``apply_snbt`` receives either a full SNBT compound (``component`` is
      False) or a material-prefixed component string (``component`` is True).
    """

    @property
    def material_key(self) -> str: ...

    def apply_snbt(self, snbt: str, component: bool) -> None: ...
