"""Little-endian binary writer used by every save-data encoder."""
from __future__ import annotations

import struct
from typing import BinaryIO, Protocol

from .errors import RangeError

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF

_UINT8 = struct.Struct("<B")
_UINT16 = struct.Struct("<H")
_UINT32 = struct.Struct("<I")


class BinaryWriter:
    """Writes fixed-width values to a caller-owned binary stream.

    The writer never closes or flushes the stream; whoever opened it owns it.
    Integer writes are range-checked so out-of-range values raise RangeError
    instead of wrapping around.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._bytes_written = 0

    @property
    def bytes_written(self) -> int:
        """Number of bytes written through this writer."""
        return self._bytes_written

    def write_uint8(self, value: int, field: str = "value") -> None:
        self._write_packed(_UINT8, value, UINT8_MAX, field)

    def write_uint16(self, value: int, field: str = "value") -> None:
        self._write_packed(_UINT16, value, UINT16_MAX, field)

    def write_uint32(self, value: int, field: str = "value") -> None:
        self._write_packed(_UINT32, value, UINT32_MAX, field)

    def write_bool(self, value: bool, field: str = "value") -> None:
        if not isinstance(value, bool):
            raise TypeError(f"{field} must be a bool, got {type(value).__name__}.")
        self.write_bytes(b"\x01" if value else b"\x00")

    def write_bytes(self, data: bytes) -> None:
        self._stream.write(data)
        self._bytes_written += len(data)

    def _write_packed(self, packer: struct.Struct, value: int, maximum: int, field: str) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{field} must be an integer, got {type(value).__name__}.")
        if not 0 <= value <= maximum:
            raise RangeError(f"{field}={value} does not fit in {packer.size} byte(s) (0..{maximum}).")
        self.write_bytes(packer.pack(value))


class Encodable(Protocol):
    """Anything that can write itself to a BinaryWriter."""

    def encode(self, writer: BinaryWriter) -> None:
        ...
