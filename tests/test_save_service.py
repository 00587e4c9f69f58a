from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from ebkit.core.errors import UnsupportedFieldError
from ebkit.domain.entities import Character, PartyMember, RollingStat
from ebkit.services import SaveExportError, SaveService


def _member() -> PartyMember:
    return PartyMember(character=Character(name="Jeff", hp=RollingStat(current=29, max_value=29)))


def test_encode_into_caller_stream_leaves_it_open() -> None:
    stream = io.BytesIO(b"HDR")
    stream.seek(3)
    with pytest.raises(UnsupportedFieldError):
        SaveService().encode_party_member(_member(), stream)
    assert not stream.closed
    data = stream.getvalue()
    assert data[:3] == b"HDR"
    assert len(data) == 3 + 50


def test_encode_logs_warning_on_unsupported_fields(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="ebkit.services.save_service"):
        with pytest.raises(UnsupportedFieldError):
            SaveService().encode_party_member(_member(), io.BytesIO())
    assert "unsupported fields" in caplog.text
    assert "'Jeff'" in caplog.text


def test_export_writes_partial_file_and_closes_it(tmp_path: Path) -> None:
    target = tmp_path / "out" / "jeff.bin"
    with pytest.raises(UnsupportedFieldError) as excinfo:
        SaveService().export_party_member(_member(), target)
    assert excinfo.value.bytes_written == 50
    partial = tmp_path / "out" / "jeff.bin.partial"
    assert not target.exists()
    assert partial.read_bytes()[:5] == b"\x7a\x95\x96\x96\x00"
    assert partial.stat().st_size == 50


def test_failed_export_does_not_replace_existing_save(tmp_path: Path) -> None:
    target = tmp_path / "jeff.bin"
    target.write_bytes(b"previous save")
    with pytest.raises(UnsupportedFieldError):
        SaveService().export_party_member(_member(), target)
    assert target.read_bytes() == b"previous save"


def test_partial_path_sits_next_to_target() -> None:
    assert SaveService.partial_path(Path("saves/ness.bin")) == Path("saves/ness.bin.partial")


def test_export_wraps_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(SaveExportError):
        SaveService().export_party_member(_member(), blocker / "jeff.bin")


def test_service_uses_injected_name_encoder() -> None:
    class FixedEncoder:
        def encode_padded(self, text: str, width: int) -> bytes:
            return b"\x01" * width

    stream = io.BytesIO()
    with pytest.raises(UnsupportedFieldError):
        SaveService(name_encoder=FixedEncoder()).encode_party_member(_member(), stream)
    assert stream.getvalue()[:5] == b"\x01" * 5
