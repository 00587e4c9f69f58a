"""Binary export of party member save records."""
from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from ebkit.core.binary import BinaryWriter
from ebkit.core.errors import UnsupportedFieldError
from ebkit.core.logging import get_logger
from ebkit.domain.entities import PartyMember
from ebkit.domain.text import EarthboundPlainTextEncoding, NameEncoder
from ebkit.services.errors import SaveExportError

logger = get_logger(__name__)


class SaveService:
    """Writes party member records to binary streams and files.

    Records cannot be completed yet, so every export ends in
    UnsupportedFieldError after the known fields are written. The error is
    never swallowed or wrapped.
    """

    def __init__(self, *, name_encoder: NameEncoder | None = None) -> None:
        self._name_encoder = name_encoder or EarthboundPlainTextEncoding()

    def encode_party_member(self, member: PartyMember, stream: BinaryIO) -> None:
        """Encode into a caller-owned stream; the stream is left open."""
        writer = BinaryWriter(stream)
        logger.debug("Encoding party member %r", member.character.name)
        try:
            member.encode(writer, name_encoder=self._name_encoder)
        except UnsupportedFieldError as exc:
            logger.warning(
                "Stopped encoding %r after %d bytes; unsupported fields: %s",
                member.character.name,
                writer.bytes_written,
                ", ".join(exc.missing_fields),
            )
            raise

    @staticmethod
    def partial_path(path: Path | str) -> Path:
        """Where an unfinished export of path is left."""
        target = Path(path)
        return target.with_name(target.name + ".partial")

    def export_party_member(self, member: PartyMember, path: Path | str) -> None:
        """Encode into a file at path.

        Bytes go to ``partial_path(path)`` first and are renamed to path only
        when the record is complete.
        """
        target = Path(path)
        partial = self.partial_path(target)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with partial.open("wb") as handle:
                self.encode_party_member(member, handle)
            partial.replace(target)
        except OSError as exc:
            raise SaveExportError(f"Unable to write save record to {target}: {exc}") from exc
