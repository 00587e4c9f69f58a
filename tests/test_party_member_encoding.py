from __future__ import annotations

import io
import struct

import pytest

from ebkit.core.binary import BinaryWriter
from ebkit.core.errors import EncodingError, RangeError, UnsupportedFieldError
from ebkit.domain.entities import (
    UNSUPPORTED_FIELDS,
    Character,
    EquipmentChangeableStat,
    PartyMember,
    RollingStat,
)
from ebkit.domain.inventory import PlayerInventory
from ebkit.domain.status import BattleStatusEffect, PermanentStatusEffect, PossessionStatus
from ebkit.domain.text import EarthboundPlainTextEncoding

RECORD_SIZE = 50


def _sentinel_member() -> PartyMember:
    character = Character(
        name="Paula",
        level=0x0102,
        experience=0x03040506,
        hp=RollingStat(current=0x0708, max_value=0x090A),
        pp=RollingStat(current=0x0B0C, max_value=0x0D0E),
        permanent_status_effect=PermanentStatusEffect.POISONED,
        possession_status=PossessionStatus.POSSESSED,
        battle_status_effect=BattleStatusEffect.CRYING,
        feeling_strange=True,
        cant_concentrate_turns=0x11,
        homesick=True,
        offense=EquipmentChangeableStat(0x21),
        defense=EquipmentChangeableStat(0x22),
        speed=EquipmentChangeableStat(0x23),
        guts=EquipmentChangeableStat(0x24),
        luck=EquipmentChangeableStat(0x25),
    )
    return PartyMember(
        character=character,
        vitality=EquipmentChangeableStat(0x26),
        iq=EquipmentChangeableStat(0x27),
        inventory=PlayerInventory(slots=[0x31, 0x32, 0x33]),
    )


def _encode(member: PartyMember, **kwargs) -> tuple[bytes, UnsupportedFieldError]:
    stream = io.BytesIO()
    with pytest.raises(UnsupportedFieldError) as excinfo:
        member.encode(BinaryWriter(stream), **kwargs)
    return stream.getvalue(), excinfo.value


def _expected_record(member: PartyMember) -> bytes:
    character = member.character
    parts = [
        EarthboundPlainTextEncoding().encode_padded(character.name, 5),
        struct.pack("<H", character.level),
        struct.pack("<I", character.experience),
        struct.pack("<H", character.hp.max_value),
        struct.pack("<H", character.pp.max_value),
        bytes([character.permanent_status_effect, character.possession_status, character.battle_status_effect]),
        bytes([character.feeling_strange, character.cant_concentrate_turns, character.homesick]),
        bytes(
            int(stat)
            for stat in (
                character.offense,
                character.defense,
                character.speed,
                character.guts,
                character.luck,
                member.vitality,
                member.iq,
            )
        ),
        bytes(member.inventory.slots),
        struct.pack("<HH", character.hp.current, character.hp.max_value),
        struct.pack("<HH", character.pp.current, character.pp.max_value),
    ]
    return b"".join(parts)


def test_record_fields_are_written_in_order_before_failing() -> None:
    member = _sentinel_member()
    data, error = _encode(member)
    assert data == _expected_record(member)
    assert len(data) == RECORD_SIZE
    assert error.bytes_written == RECORD_SIZE


def test_hp_max_appears_both_early_and_in_full_pool() -> None:
    data, _ = _encode(_sentinel_member())
    assert data[11:13] == b"\x0a\x09"
    assert data[42:46] == b"\x08\x07\x0a\x09"
    assert data[13:15] == b"\x0e\x0d"
    assert data[46:50] == b"\x0c\x0b\x0e\x0d"


def test_unsupported_fields_are_listed() -> None:
    _, error = _encode(_sentinel_member())
    assert error.missing_fields == UNSUPPORTED_FIELDS
    assert "shield" in error.missing_fields
    assert "weaknesses" in str(error)


def test_default_member_still_fails_after_full_record() -> None:
    data, _ = _encode(PartyMember(character=Character(name="Ness")))
    assert len(data) == RECORD_SIZE
    assert data[:5] == b"\x7e\x95\xa3\xa3\x00"


def test_long_name_is_truncated_in_record() -> None:
    member = _sentinel_member()
    member.character.name = "Paulette"
    data, _ = _encode(member)
    assert data[:5] == EarthboundPlainTextEncoding().encode("Paule")


def test_custom_name_encoder_is_called_with_field_width() -> None:
    calls = []

    class RecordingEncoder:
        def encode_padded(self, text: str, width: int) -> bytes:
            calls.append((text, width))
            return b"ABCDE"

    data, _ = _encode(_sentinel_member(), name_encoder=RecordingEncoder())
    assert calls == [("Paula", 5)]
    assert data[:5] == b"ABCDE"


def test_name_encoding_error_aborts_before_anything_is_written() -> None:
    member = _sentinel_member()
    member.character.name = "Pålla"
    stream = io.BytesIO()
    with pytest.raises(EncodingError):
        member.encode(BinaryWriter(stream))
    assert stream.getvalue() == b""


def test_out_of_range_field_aborts_mid_record() -> None:
    member = _sentinel_member()
    member.character.luck = EquipmentChangeableStat(300)
    stream = io.BytesIO()
    with pytest.raises(RangeError):
        member.encode(BinaryWriter(stream))
    # name .. guts were written, luck was not
    assert stream.getvalue() == _expected_record(_sentinel_member())[:25]


def test_experience_wider_than_32_bits_is_rejected() -> None:
    member = _sentinel_member()
    member.character.experience = 2**32
    with pytest.raises(RangeError, match="experience"):
        member.encode(BinaryWriter(io.BytesIO()))


def test_party_member_forwards_character_fields() -> None:
    member = _sentinel_member()
    assert member.name == "Paula"
    assert member.hp is member.character.hp
    assert member.luck == 0x25
    with pytest.raises(AttributeError):
        member.shield


def test_name_fits_tracks_record_width() -> None:
    assert Character(name="Ness").name_fits
    assert Character(name="Paula").name_fits
    assert not Character(name="Paulette").name_fits
