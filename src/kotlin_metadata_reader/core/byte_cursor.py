#!/usr/bin/env python3

"""Forward-only cursor over an immutable byte buffer.

The cursor covers the window ``[start, end)`` of the underlying buffer. Reads
only ever move the position forward; nested messages are read through
``slice()``, which hands out a bounded view and skips the outer cursor past it.
"""

from .errors import UnexpectedEof, VarintTooLong


def _to_signed(value: int, bits: int) -> int:
    """Interpret the low ``bits`` bits of value as a two's complement integer."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


class ByteCursor:
    """Cursor over a byte buffer window."""

    def __init__(self, data: bytes, start: int = 0, end: int | None = None):
        """Initialize the cursor.

        Args:
            data: Underlying buffer, never copied or modified
            start: First readable offset
            end: Offset one past the last readable byte (defaults to len(data))
        """
        if end is None:
            end = len(data)
        if not 0 <= start <= end <= len(data):
            raise ValueError(f"Invalid cursor window [{start}, {end}) over {len(data)} bytes")
        self._data = bytes(data)
        self._position = start
        self._end = end

    @property
    def position(self) -> int:
        """Current absolute offset in the underlying buffer."""
        return self._position

    @property
    def available_bytes(self) -> int:
        """Number of bytes left before the end of the window."""
        return self._end - self._position

    def _ensure_enough_bytes(self, count: int) -> None:
        if count > self.available_bytes:
            raise UnexpectedEof(
                f"Unexpected EOF, available {self.available_bytes} bytes, requested: {count}"
            )

    def read_u8(self) -> int:
        """Read a single unsigned byte."""
        if self._position >= self._end:
            raise UnexpectedEof("Unexpected EOF")
        value = self._data[self._position]
        self._position += 1
        return value

    def read_exact(self, length: int) -> bytes:
        """Read exactly ``length`` bytes.

        Raises:
            UnexpectedEof: If fewer bytes remain
        """
        self._ensure_enough_bytes(length)
        result = self._data[self._position:self._position + length]
        self._position += length
        return result

    def slice(self, length: int) -> "ByteCursor":
        """Return a cursor over the next ``length`` bytes and advance past them.

        Raises:
            UnexpectedEof: If fewer bytes remain
        """
        self._ensure_enough_bytes(length)
        result = ByteCursor.__new__(ByteCursor)
        result._data = self._data
        result._position = self._position
        result._end = self._position + length
        self._position += length
        return result

    def read_varint32(self, eof_allowed: bool = False) -> int:
        """Read a base-128 varint truncated to a signed 32-bit integer.

        Args:
            eof_allowed: Return -1 instead of raising when the cursor is exhausted

        Raises:
            UnexpectedEof: If the buffer ends before the varint does
            VarintTooLong: If the varint runs past 32 bits
        """
        value = self._read_varint_fast_path(eof_allowed)
        if value is not None:
            return value
        return self._read_varint_slow_path(32)

    def read_varint64(self, eof_allowed: bool = False) -> int:
        """Read a base-128 varint as a signed 64-bit integer.

        Args:
            eof_allowed: Return -1 instead of raising when the cursor is exhausted

        Raises:
            UnexpectedEof: If the buffer ends before the varint does
            VarintTooLong: If the varint runs past 64 bits
        """
        value = self._read_varint_fast_path(eof_allowed)
        if value is not None:
            return value
        return self._read_varint_slow_path(64)

    def _read_varint_fast_path(self, eof_allowed: bool) -> int | None:
        """Decode single and two byte varints; None hands over to the slow path."""
        position = self._position
        if position == self._end:
            if eof_allowed:
                return -1
            raise UnexpectedEof("Unexpected EOF")

        first = self._data[position]
        if first < 0x80:
            self._position = position + 1
            return first

        if self._end - position > 1:
            second = self._data[position + 1]
            if second < 0x80:
                self._position = position + 2
                return (first & 0x7F) | (second << 7)

        return None

    def _read_varint_slow_path(self, bits: int) -> int:
        result = 0
        shift = 0
        while shift < bits:
            byte = self.read_u8()
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return _to_signed(result, bits)
            shift += 7
        raise VarintTooLong(f"Input stream is malformed: Varint too long (exceeded {bits} bits)")

    def read_fixed32(self) -> int:
        """Read a little-endian signed 32-bit integer."""
        return int.from_bytes(self.read_exact(4), "little", signed=True)

    def read_fixed64(self) -> int:
        """Read a little-endian signed 64-bit integer."""
        return int.from_bytes(self.read_exact(8), "little", signed=True)

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._position}, end={self._end})"
