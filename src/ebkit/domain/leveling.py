"""Level-up growth estimates for the HP and PP pools.

The estimates follow the Starmen.net equations: the new HP max is Vitality
times 15 and the new PP max is IQ times the member's psychic points rate.
Both are wrong when the driver stat did not change since the previous level;
the game then adds a random 1..3 to the pool max instead. The estimate
functions never apply that fallback, ``project_level_up`` does.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, SupportsIndex

from ebkit.core.rng import RNG

if TYPE_CHECKING:
    from ebkit.domain.entities import PartyMember

VITALITY_MULTIPLIER = 15
UNCHANGED_STAT_INCREASE: tuple[int, int] = (1, 3)


class PsychicPointsState(IntEnum):
    """How a member's PP max grows on level up; the value is the IQ multiplier."""

    NO_PSYCHIC_POINTS = 0
    NORMAL = 5
    NESS_POST_MAGICANT = 10


@dataclass(frozen=True, slots=True)
class LevelUpProjection:
    estimated_hp_max: int
    estimated_pp_max: int
    projected_hp_max: int
    projected_pp_max: int
    hp_used_fallback: bool
    pp_used_fallback: bool


def estimate_new_hp_max(vitality: SupportsIndex) -> int:
    return operator.index(vitality) * VITALITY_MULTIPLIER


def estimate_new_pp_max(iq: SupportsIndex, psychic_points_state: PsychicPointsState) -> int:
    return operator.index(iq) * int(psychic_points_state)


def roll_unchanged_stat_increase(rng: RNG) -> int:
    low, high = UNCHANGED_STAT_INCREASE
    return rng.randint(low, high)


def project_level_up(
    member: PartyMember,
    psychic_points_state: PsychicPointsState,
    *,
    previous_vitality: SupportsIndex | None = None,
    previous_iq: SupportsIndex | None = None,
    rng: RNG,
) -> LevelUpProjection:
    """Project the pool maxima after the next level, game-accurately.

    When a driver stat equals its value at the previous level the pool max
    grows by a random 1..3 over its current max instead of the estimate.
    A member without psychic points never gains PP. A previous value of
    None means it is unknown and the plain estimate is used.
    """
    estimated_hp = estimate_new_hp_max(member.vitality)
    estimated_pp = estimate_new_pp_max(member.iq, psychic_points_state)

    hp_unchanged = previous_vitality is not None and operator.index(member.vitality) == operator.index(
        previous_vitality
    )
    if hp_unchanged:
        projected_hp = member.character.hp.max_value + roll_unchanged_stat_increase(rng)
    else:
        projected_hp = estimated_hp

    has_pp = int(psychic_points_state) != PsychicPointsState.NO_PSYCHIC_POINTS
    pp_unchanged = (
        has_pp and previous_iq is not None and operator.index(member.iq) == operator.index(previous_iq)
    )
    if pp_unchanged:
        projected_pp = member.character.pp.max_value + roll_unchanged_stat_increase(rng)
    else:
        projected_pp = estimated_pp

    return LevelUpProjection(
        estimated_hp_max=estimated_hp,
        estimated_pp_max=estimated_pp,
        projected_hp_max=projected_hp,
        projected_pp_max=projected_pp,
        hp_used_fallback=hp_unchanged,
        pp_used_fallback=pp_unchanged,
    )
