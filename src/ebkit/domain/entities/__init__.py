"""Runtime entity exports."""

from .character import NAME_WIDTH, Character
from .party_member import UNSUPPORTED_FIELDS, PartyMember
from .stats import EquipmentChangeableStat, RollingStat

__all__ = [
    "Character",
    "EquipmentChangeableStat",
    "NAME_WIDTH",
    "PartyMember",
    "RollingStat",
    "UNSUPPORTED_FIELDS",
]
