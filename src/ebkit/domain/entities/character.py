"""Base character record shared by every playable character."""
from __future__ import annotations

from dataclasses import dataclass, field

from ebkit.domain.status import BattleStatusEffect, PermanentStatusEffect, PossessionStatus

from .stats import EquipmentChangeableStat, RollingStat

NAME_WIDTH = 5


def _stat() -> EquipmentChangeableStat:
    return EquipmentChangeableStat(0)


def _pool() -> RollingStat:
    return RollingStat(current=0, max_value=0)


@dataclass(slots=True)
class Character:
    """Name, progression, pools, status groups and combat stats.

    Names longer than NAME_WIDTH characters are cut when written to a save
    record.
    """

    name: str
    level: int = 1
    experience: int = 0
    hp: RollingStat = field(default_factory=_pool)
    pp: RollingStat = field(default_factory=_pool)
    permanent_status_effect: PermanentStatusEffect = PermanentStatusEffect.NONE
    possession_status: PossessionStatus = PossessionStatus.NONE
    battle_status_effect: BattleStatusEffect = BattleStatusEffect.NONE
    feeling_strange: bool = False
    cant_concentrate_turns: int = 0
    homesick: bool = False
    offense: EquipmentChangeableStat = field(default_factory=_stat)
    defense: EquipmentChangeableStat = field(default_factory=_stat)
    speed: EquipmentChangeableStat = field(default_factory=_stat)
    guts: EquipmentChangeableStat = field(default_factory=_stat)
    luck: EquipmentChangeableStat = field(default_factory=_stat)

    @property
    def name_fits(self) -> bool:
        return len(self.name) <= NAME_WIDTH
