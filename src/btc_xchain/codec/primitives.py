"""Primitive wire encoding: fixed-width integers, varints, var bytes, strings.

Provides the two halves every record codec is built on:
- Sink: appends values to a growable byte buffer
- Source: reads values from a byte buffer through a forward-only cursor
- VarInt length prefix (Bitcoin CompactSize) shared by var bytes and strings

All integers are little-endian.
"""

from __future__ import annotations

import struct

from btc_xchain.errors.codec_errors import EndOfDataError

# ---------------------------------------------------------------------------
# VarInt encoding
# ---------------------------------------------------------------------------

# Text travels as UTF-8; surrogateescape keeps arbitrary wire bytes lossless.
STRING_ENCODING = "utf-8"
STRING_ERRORS = "surrogateescape"


def encode_varint(n: int) -> bytes:
    """Encode an integer as a Bitcoin-style variable-length integer."""
    if n < 0xFD:
        return struct.pack("<B", n)
    if n <= 0xFFFF:
        return b"\xfd" + struct.pack("<H", n)
    if n <= 0xFFFFFFFF:
        return b"\xfe" + struct.pack("<I", n)
    return b"\xff" + struct.pack("<Q", n)


def encode_string(s: str) -> bytes:
    """Return the wire bytes of a text value (without length prefix)."""
    return s.encode(STRING_ENCODING, STRING_ERRORS)


def decode_string(b: bytes) -> str:
    """Inverse of :func:`encode_string`; total over all byte strings."""
    return b.decode(STRING_ENCODING, STRING_ERRORS)


# ---------------------------------------------------------------------------
# Sink (writer)
# ---------------------------------------------------------------------------


class Sink:
    """Append-only writer over a growable byte buffer."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def getvalue(self) -> bytes:
        """Return a copy of everything written so far."""
        return bytes(self._buf)

    def write_uint8(self, n: int) -> None:
        self._buf += struct.pack("<B", n)

    def write_uint16(self, n: int) -> None:
        self._buf += struct.pack("<H", n)

    def write_uint32(self, n: int) -> None:
        self._buf += struct.pack("<I", n)

    def write_uint64(self, n: int) -> None:
        self._buf += struct.pack("<Q", n)

    def write_int64(self, n: int) -> None:
        self._buf += struct.pack("<q", n)

    def write_var_uint(self, n: int) -> None:
        self._buf += encode_varint(n)

    def write_var_bytes(self, data: bytes) -> None:
        """Write ``data`` preceded by its varint length."""
        self._buf += encode_varint(len(data))
        self._buf += data

    def write_string(self, s: str) -> None:
        """Write text using the same length-prefixed layout as var bytes."""
        self.write_var_bytes(encode_string(s))


# ---------------------------------------------------------------------------
# Source (reader)
# ---------------------------------------------------------------------------


class Source:
    """Forward-only reader over an immutable byte buffer.

    Every ``next_*`` call either returns a complete value and advances the
    cursor, or raises :class:`EndOfDataError` and leaves the cursor where it
    was. Reads never go past the end of the buffer.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def pos(self) -> int:
        """Current cursor offset."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._pos

    def next_bytes(self, n: int) -> bytes:
        """Read exactly ``n`` raw bytes."""
        if n > self.remaining:
            raise EndOfDataError(needed=n, remaining=self.remaining)
        start = self._pos
        self._pos += n
        return self._data[start : self._pos]

    def _unpack(self, fmt: str, size: int) -> int:
        return struct.unpack(fmt, self.next_bytes(size))[0]

    def next_uint8(self) -> int:
        return self._unpack("<B", 1)

    def next_uint16(self) -> int:
        return self._unpack("<H", 2)

    def next_uint32(self) -> int:
        return self._unpack("<I", 4)

    def next_uint64(self) -> int:
        return self._unpack("<Q", 8)

    def next_int64(self) -> int:
        return self._unpack("<q", 8)

    def next_var_uint(self) -> int:
        """Read a Bitcoin-style variable-length integer."""
        start = self._pos
        first = self.next_uint8()
        try:
            if first < 0xFD:
                return first
            if first == 0xFD:
                return self.next_uint16()
            if first == 0xFE:
                return self.next_uint32()
            return self.next_uint64()
        except EndOfDataError:
            self._pos = start
            raise

    def next_var_bytes(self) -> bytes:
        """Read a varint length followed by that many bytes."""
        start = self._pos
        n = self.next_var_uint()
        try:
            return self.next_bytes(n)
        except EndOfDataError:
            self._pos = start
            raise

    def next_string(self) -> str:
        return decode_string(self.next_var_bytes())
