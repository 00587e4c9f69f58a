from __future__ import annotations

import json
from pathlib import Path

import pytest

from ebkit.data.repositories import PartyMembersRepository
from ebkit.domain.entities import PartyMember
from ebkit.services import FactoryError
from ebkit.services.factories import create_party_member


def _repo_with(tmp_path: Path, **overrides: object) -> PartyMembersRepository:
    payload = {
        "name": "Poo",
        "level": 1,
        "hp": {"current": 33, "max": 33},
        "pp": {"current": 14, "max": 14},
        "stats": {"offense": 3, "defense": 3, "speed": 5, "guts": 3, "luck": 3, "vitality": 3, "iq": 3},
        "psychic_points_state": "normal",
        "inventory": [],
    }
    payload.update(overrides)
    (tmp_path / "party_members.json").write_text(json.dumps({"poo": payload}), encoding="utf-8")
    return PartyMembersRepository(tmp_path)


def test_create_party_member_from_definition() -> None:
    member = create_party_member("ness", PartyMembersRepository())
    assert isinstance(member, PartyMember)
    assert member.character.name == "Ness"
    assert member.character.hp.max_value == 30
    assert member.vitality == 2
    assert member.inventory.items == [17]


def test_each_member_gets_its_own_inventory_and_pools() -> None:
    repo = PartyMembersRepository()
    first = create_party_member("ness", repo)
    second = create_party_member("ness", repo)
    first.inventory.add(5)
    first.character.hp.damage(10)
    assert second.inventory.items == [17]
    assert second.character.hp.current == 30


def test_unknown_member_raises_factory_error() -> None:
    with pytest.raises(FactoryError, match="pokey"):
        create_party_member("pokey", PartyMembersRepository())


def test_stat_out_of_byte_range_raises(tmp_path: Path) -> None:
    repo = _repo_with(
        tmp_path,
        stats={"offense": 300, "defense": 3, "speed": 5, "guts": 3, "luck": 3, "vitality": 3, "iq": 3},
    )
    with pytest.raises(FactoryError, match="stats.offense"):
        create_party_member("poo", repo)


def test_current_hp_above_max_raises(tmp_path: Path) -> None:
    repo = _repo_with(tmp_path, hp={"current": 40, "max": 33})
    with pytest.raises(FactoryError, match="hp.current"):
        create_party_member("poo", repo)


def test_too_many_items_raise(tmp_path: Path) -> None:
    repo = _repo_with(tmp_path, inventory=list(range(1, 16)))
    with pytest.raises(FactoryError, match="more than 14"):
        create_party_member("poo", repo)


def test_empty_slot_id_in_definition_raises(tmp_path: Path) -> None:
    repo = _repo_with(tmp_path, inventory=[0])
    with pytest.raises(FactoryError, match="item id 0"):
        create_party_member("poo", repo)
