"""Per-member item inventory."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ebkit.core.binary import BinaryWriter

ITEM_SLOTS = 14
EMPTY_SLOT = 0


def _empty_slots() -> List[int]:
    return [EMPTY_SLOT] * ITEM_SLOTS


@dataclass(slots=True)
class PlayerInventory:
    """Fixed slot list of item ids owned by one party member."""

    slots: List[int] = field(default_factory=_empty_slots)

    def __post_init__(self) -> None:
        if len(self.slots) > ITEM_SLOTS:
            raise ValueError(f"Inventory holds at most {ITEM_SLOTS} items.")
        self.slots = list(self.slots) + [EMPTY_SLOT] * (ITEM_SLOTS - len(self.slots))

    @property
    def items(self) -> List[int]:
        return [item_id for item_id in self.slots if item_id != EMPTY_SLOT]

    @property
    def is_full(self) -> bool:
        return EMPTY_SLOT not in self.slots

    def add(self, item_id: int) -> bool:
        if item_id == EMPTY_SLOT:
            raise ValueError("Item id 0 marks an empty slot.")
        try:
            index = self.slots.index(EMPTY_SLOT)
        except ValueError:
            return False
        self.slots[index] = item_id
        return True

    def remove(self, item_id: int) -> bool:
        """Remove the first matching item and close the gap it leaves."""
        if item_id == EMPTY_SLOT:
            return False
        try:
            index = self.slots.index(item_id)
        except ValueError:
            return False
        del self.slots[index]
        self.slots.append(EMPTY_SLOT)
        return True

    def encode(self, writer: BinaryWriter) -> None:
        for item_id in self.slots:
            writer.write_uint8(item_id, "item_id")
