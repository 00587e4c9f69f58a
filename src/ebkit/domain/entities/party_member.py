"""Party members and their binary save record."""
from __future__ import annotations

from dataclasses import dataclass, field

from ebkit.core.binary import BinaryWriter
from ebkit.core.errors import UnsupportedFieldError
from ebkit.domain.inventory import PlayerInventory
from ebkit.domain.leveling import PsychicPointsState, estimate_new_hp_max, estimate_new_pp_max
from ebkit.domain.text import EarthboundPlainTextEncoding, NameEncoder

from .character import NAME_WIDTH, Character
from .stats import EquipmentChangeableStat

UNSUPPORTED_FIELDS: tuple[str, ...] = ("shield", "weaknesses", "miss_rates", "permanent_boosts")


def _stat() -> EquipmentChangeableStat:
    return EquipmentChangeableStat(0)


@dataclass(slots=True)
class PartyMember:
    """A playable character with the Vitality and IQ growth drivers.

    Character fields live on ``character`` and can also be read directly
    from the party member (``member.hp`` is ``member.character.hp``).
    """

    character: Character
    vitality: EquipmentChangeableStat = field(default_factory=_stat)
    iq: EquipmentChangeableStat = field(default_factory=_stat)
    inventory: PlayerInventory = field(default_factory=PlayerInventory)

    def __getattr__(self, name: str):
        if name == "character":
            raise AttributeError(name)
        return getattr(self.character, name)

    def estimated_max_hp_on_new_level(self) -> int:
        return estimate_new_hp_max(self.vitality)

    def estimated_max_pp_on_new_level(self, psychic_points_state: PsychicPointsState) -> int:
        return estimate_new_pp_max(self.iq, psychic_points_state)

    def encode(self, writer: BinaryWriter, name_encoder: NameEncoder | None = None) -> None:
        """Write the save record for this member.

        Always raises UnsupportedFieldError once the full HP/PP pools are
        written; the record is incomplete until shields, weaknesses, miss
        rates and permanent boosts exist on the model.
        """
        encoder = name_encoder or EarthboundPlainTextEncoding()
        character = self.character

        writer.write_bytes(encoder.encode_padded(character.name, NAME_WIDTH))
        writer.write_uint16(character.level, "level")
        writer.write_uint32(character.experience, "experience")
        writer.write_uint16(character.hp.max_value, "hp.max_value")
        writer.write_uint16(character.pp.max_value, "pp.max_value")
        writer.write_uint8(int(character.permanent_status_effect), "permanent_status_effect")
        writer.write_uint8(int(character.possession_status), "possession_status")
        writer.write_uint8(int(character.battle_status_effect), "battle_status_effect")
        writer.write_bool(character.feeling_strange, "feeling_strange")
        writer.write_uint8(character.cant_concentrate_turns, "cant_concentrate_turns")
        writer.write_bool(character.homesick, "homesick")
        # Shield goes here once the model has one.
        character.offense.encode(writer)
        character.defense.encode(writer)
        character.speed.encode(writer)
        character.guts.encode(writer)
        character.luck.encode(writer)
        self.vitality.encode(writer)
        self.iq.encode(writer)
        self.inventory.encode(writer)
        character.hp.encode(writer)
        character.pp.encode(writer)
        raise UnsupportedFieldError(UNSUPPORTED_FIELDS, bytes_written=writer.bytes_written)
