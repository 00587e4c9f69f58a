"""EarthBound plain-text encoding for names stored in save records."""
from __future__ import annotations

from typing import Protocol

from ebkit.core.errors import EncodingError

CHARACTER_OFFSET = 0x30
PAD_BYTE = 0x00
_FIRST_PRINTABLE = 0x20
_LAST_PRINTABLE = 0x7E


class NameEncoder(Protocol):
    """Produces the fixed-width byte form of a name."""

    def encode_padded(self, text: str, width: int) -> bytes:
        ...


class EarthboundPlainTextEncoding:
    """Maps printable ASCII into the game's font table.

    Characters are shifted up by 0x30, so "A" (0x41) is stored as 0x71 and a
    space as 0x50. Padding uses 0x00, which the game treats as end of text.
    """

    def encode(self, text: str) -> bytes:
        encoded = bytearray()
        for index, char in enumerate(text):
            code = ord(char)
            if not _FIRST_PRINTABLE <= code <= _LAST_PRINTABLE:
                raise EncodingError(f"Character {char!r} at position {index} has no in-game glyph.")
            encoded.append(code + CHARACTER_OFFSET)
        return bytes(encoded)

    def encode_padded(self, text: str, width: int) -> bytes:
        """Encode text truncated or zero-padded to exactly width bytes."""
        if width < 0:
            raise ValueError("Width must be non-negative.")
        encoded = self.encode(text[:width])
        return encoded.ljust(width, bytes([PAD_BYTE]))

    def decode(self, data: bytes) -> str:
        chars = []
        for byte in data:
            if byte == PAD_BYTE:
                break
            code = byte - CHARACTER_OFFSET
            if not _FIRST_PRINTABLE <= code <= _LAST_PRINTABLE:
                raise EncodingError(f"Byte 0x{byte:02X} is not a plain-text glyph.")
            chars.append(chr(code))
        return "".join(chars)
