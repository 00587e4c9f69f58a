"""Party member definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ebkit.domain.leveling import PsychicPointsState


@dataclass(slots=True)
class PartyMemberDef:
    """Defines a party member's starting record."""

    id: str
    name: str
    level: int
    experience: int
    hp_current: int
    hp_max: int
    pp_current: int
    pp_max: int
    stats: Dict[str, int]
    psychic_points_state: PsychicPointsState
    inventory: Tuple[int, ...] = ()
