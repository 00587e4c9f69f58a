"""Status-effect groups stored on every character record."""
from __future__ import annotations

from enum import IntEnum


class PermanentStatusEffect(IntEnum):
    """Ailments that persist after battle until cured."""

    NONE = 0
    UNCONSCIOUS = 1
    DIAMONDIZED = 2
    PARALYZED = 3
    NAUSEOUS = 4
    POISONED = 5
    SUNSTROKE = 6
    SNIFFLING = 7


class PossessionStatus(IntEnum):
    NONE = 0
    MUSHROOMIZED = 1
    POSSESSED = 2


class BattleStatusEffect(IntEnum):
    """Ailments cleared when a battle ends."""

    NONE = 0
    ASLEEP = 1
    CRYING = 2
    IMMOBILIZED = 3
    SOLIDIFIED = 4
