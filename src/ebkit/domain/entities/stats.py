"""Stat value types shared by characters and party members."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from ebkit.core.binary import BinaryWriter

StatModifier = Callable[[int], int]


@dataclass(slots=True)
class RollingStat:
    """A pool with a current value and a maximum (HP, PP).

    0 <= current <= max_value is expected but not enforced here; the encoder
    writes whatever it finds.
    """

    current: int
    max_value: int

    @property
    def is_full(self) -> bool:
        return self.current >= self.max_value

    def restore(self) -> None:
        self.current = self.max_value

    def damage(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Damage amount must be non-negative.")
        self.current = max(0, self.current - amount)

    def heal(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Heal amount must be non-negative.")
        self.current = min(self.max_value, self.current + amount)

    def encode(self, writer: BinaryWriter) -> None:
        """Write current then max as uint16 values."""
        writer.write_uint16(self.current, "current")
        writer.write_uint16(self.max_value, "max_value")


@dataclass(slots=True, eq=False)
class EquipmentChangeableStat:
    """A base stat that equipment can raise or lower.

    Arithmetic, comparisons and int conversion use the base value; only
    ``effective`` applies the equipment modifier.
    """

    value: int
    modifier: StatModifier | None = field(default=None, repr=False)

    @property
    def effective(self) -> int:
        if self.modifier is None:
            return self.value
        return self.modifier(self.value)

    def encode(self, writer: BinaryWriter) -> None:
        writer.write_uint8(self.value, "stat")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __add__(self, other: object) -> int:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value + int(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> int:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value - int(other)

    def __rsub__(self, other: object) -> int:
        if not isinstance(other, int):
            return NotImplemented
        return other - self.value

    def __mul__(self, other: object) -> int:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value * int(other)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value == int(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value < int(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value <= int(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value > int(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (int, EquipmentChangeableStat)):
            return NotImplemented
        return self.value >= int(other)

    def __hash__(self) -> int:
        return hash(self.value)
