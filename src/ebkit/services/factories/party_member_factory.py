"""Factory for creating party members from definitions."""
from __future__ import annotations

from ebkit.core.binary import UINT8_MAX, UINT16_MAX, UINT32_MAX
from ebkit.data.repositories import PartyMembersRepository
from ebkit.domain.defs import PartyMemberDef
from ebkit.domain.entities import Character, EquipmentChangeableStat, PartyMember, RollingStat
from ebkit.domain.inventory import ITEM_SLOTS, PlayerInventory
from ebkit.services.errors import FactoryError


def create_party_member(member_id: str, party_members_repo: PartyMembersRepository) -> PartyMember:
    """Instantiate a fresh party member from its definition."""
    try:
        member_def = party_members_repo.get(member_id)
    except KeyError as exc:
        raise FactoryError(f"Party member '{member_id}' not found.") from exc

    _validate_ranges(member_def)

    def stat(key: str) -> EquipmentChangeableStat:
        return EquipmentChangeableStat(member_def.stats[key])

    character = Character(
        name=member_def.name,
        level=member_def.level,
        experience=member_def.experience,
        hp=RollingStat(current=member_def.hp_current, max_value=member_def.hp_max),
        pp=RollingStat(current=member_def.pp_current, max_value=member_def.pp_max),
        offense=stat("offense"),
        defense=stat("defense"),
        speed=stat("speed"),
        guts=stat("guts"),
        luck=stat("luck"),
    )
    return PartyMember(
        character=character,
        vitality=stat("vitality"),
        iq=stat("iq"),
        inventory=PlayerInventory(slots=list(member_def.inventory)),
    )


def _validate_ranges(member_def: PartyMemberDef) -> None:
    checks = [
        ("level", member_def.level, UINT16_MAX),
        ("experience", member_def.experience, UINT32_MAX),
        ("hp.current", member_def.hp_current, member_def.hp_max),
        ("hp.max", member_def.hp_max, UINT16_MAX),
        ("pp.current", member_def.pp_current, member_def.pp_max),
        ("pp.max", member_def.pp_max, UINT16_MAX),
    ]
    checks.extend((f"stats.{key}", value, UINT8_MAX) for key, value in member_def.stats.items())
    for label, value, maximum in checks:
        if not 0 <= value <= maximum:
            raise FactoryError(f"Party member '{member_def.id}' {label}={value} is outside 0..{maximum}.")

    if len(member_def.inventory) > ITEM_SLOTS:
        raise FactoryError(f"Party member '{member_def.id}' carries more than {ITEM_SLOTS} items.")
    for item_id in member_def.inventory:
        if not 1 <= item_id <= UINT8_MAX:
            raise FactoryError(f"Party member '{member_def.id}' has invalid item id {item_id}.")
