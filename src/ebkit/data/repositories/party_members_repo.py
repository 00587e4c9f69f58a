"""Party member repository."""
from __future__ import annotations

from typing import Dict

from ebkit.data.errors import DataValidationError
from ebkit.data.repositories.base import RepositoryBase
from ebkit.domain.defs import PartyMemberDef
from ebkit.domain.leveling import PsychicPointsState

_PSYCHIC_POINTS_STATES: Dict[str, PsychicPointsState] = {
    "none": PsychicPointsState.NO_PSYCHIC_POINTS,
    "normal": PsychicPointsState.NORMAL,
    "ness_post_magicant": PsychicPointsState.NESS_POST_MAGICANT,
}
_STAT_KEYS = ("offense", "defense", "speed", "guts", "luck", "vitality", "iq")


class PartyMembersRepository(RepositoryBase[PartyMemberDef]):
    """Loads starting party member definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("party_members.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, PartyMemberDef]:
        members: Dict[str, PartyMemberDef] = {}
        for raw_id, payload in raw.items():
            context = f"party member '{raw_id}'"
            member_data = self._require_mapping(payload, context)
            hp = self._require_mapping(member_data.get("hp"), f"{context} hp")
            pp = self._require_mapping(member_data.get("pp"), f"{context} pp")
            stats = self._require_mapping(member_data.get("stats"), f"{context} stats")

            members[raw_id] = PartyMemberDef(
                id=raw_id,
                name=self._require_str(member_data.get("name"), f"{context} name"),
                level=self._require_int(member_data.get("level"), f"{context} level"),
                experience=self._require_int(member_data.get("experience", 0), f"{context} experience"),
                hp_current=self._require_int(hp.get("current"), f"{context} hp.current"),
                hp_max=self._require_int(hp.get("max"), f"{context} hp.max"),
                pp_current=self._require_int(pp.get("current"), f"{context} pp.current"),
                pp_max=self._require_int(pp.get("max"), f"{context} pp.max"),
                stats={key: self._require_int(stats.get(key), f"{context} stats.{key}") for key in _STAT_KEYS},
                psychic_points_state=self._require_psychic_points_state(
                    member_data.get("psychic_points_state"), f"{context} psychic_points_state"
                ),
                inventory=tuple(self._require_int_list(member_data.get("inventory", []), f"{context} inventory")),
            )
        return members

    @staticmethod
    def _require_psychic_points_state(value: object, context: str) -> PsychicPointsState:
        if not isinstance(value, str) or value not in _PSYCHIC_POINTS_STATES:
            allowed = ", ".join(sorted(_PSYCHIC_POINTS_STATES))
            raise DataValidationError(f"{context} must be one of: {allowed}.")
        return _PSYCHIC_POINTS_STATES[value]
