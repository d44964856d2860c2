#!/usr/bin/env python3

"""Protobuf-style wire reader on top of ByteCursor.

Only the subset of the wire format needed by the metadata payload is
implemented: tags, varints, fixed-width integers and length-delimited runs.
Message bodies are read with a tag loop::

    while (tag := reader.read_tag()) is not None:
        field_number, wire_type = tag
        if field_number == 1:
            ...
        else:
            reader.skip_field(wire_type)

Every nested message is read through ``read_length_delimited()``, so a handler
can never read past the end of its own submessage.
"""

from .byte_cursor import ByteCursor, _to_signed
from .errors import (
    InvalidTag,
    NegativeLength,
    UnsupportedWireType,
    WireTypeMismatch,
)
from .models import IntegerKind, WireType

_WIRE_TYPES = {wire_type.value: wire_type for wire_type in WireType}


class WireReader:
    """Reads tagged fields from a bounded ByteCursor."""

    def __init__(self, cursor: ByteCursor):
        self._cursor = cursor
        self.current_field: int = -1
        self.current_wire_type: WireType | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "WireReader":
        """Create a reader over a whole byte buffer."""
        return cls(ByteCursor(data))

    @property
    def available_bytes(self) -> int:
        """Bytes left in the current message."""
        return self._cursor.available_bytes

    def read_tag(self) -> tuple[int, WireType] | None:
        """Read the next field tag.

        Returns:
            ``(field_number, wire_type)``, or None at the end of the message

        Raises:
            InvalidTag: If the field number is 0
            UnsupportedWireType: If the wire type is not one of WireType
        """
        header = self._cursor.read_varint64(eof_allowed=True)
        if header == -1:
            self.current_field = -1
            self.current_wire_type = None
            return None

        header &= 0xFFFFFFFF
        field_number = header >> 3
        raw_wire_type = header & 0b111

        if field_number == 0:
            raise InvalidTag(f"Invalid tag with field number 0 (header {header:#x})")

        wire_type = _WIRE_TYPES.get(raw_wire_type)
        if wire_type is None:
            raise UnsupportedWireType(
                f"Unsupported wire type {raw_wire_type} for field {field_number}"
            )

        self.current_field = field_number
        self.current_wire_type = wire_type
        return field_number, wire_type

    def skip_field(self, wire_type: WireType | int | None = None) -> None:
        """Discard the value of the current field.

        Args:
            wire_type: Wire type of the value, defaults to the last tag read

        Raises:
            UnsupportedWireType: For any wire type outside WireType
        """
        if wire_type is None:
            wire_type = self.current_wire_type

        if wire_type == WireType.VARINT:
            self._cursor.read_varint64()
        elif wire_type == WireType.I64:
            self._cursor.read_exact(8)
        elif wire_type == WireType.SIZE_DELIMITED:
            self._cursor.read_exact(self._read_length())
        elif wire_type == WireType.I32:
            self._cursor.read_exact(4)
        else:
            raise UnsupportedWireType(
                f"Unsupported start group or end group wire type: {wire_type}"
            )

    def _assert_wire_type(self, expected: WireType) -> None:
        if self.current_wire_type != expected:
            actual = self.current_wire_type.name if self.current_wire_type is not None else None
            raise WireTypeMismatch(
                f"Expected wire type {expected.name} for field {self.current_field}, "
                f"but found {actual}"
            )

    def read_int(self, kind: IntegerKind = IntegerKind.DEFAULT) -> int:
        """Read the current field as a signed 32-bit integer."""
        self._assert_wire_type(WireType.I32 if kind is IntegerKind.FIXED else WireType.VARINT)
        return self._decode32(kind)

    def read_long(self, kind: IntegerKind = IntegerKind.DEFAULT) -> int:
        """Read the current field as a signed 64-bit integer."""
        self._assert_wire_type(WireType.I64 if kind is IntegerKind.FIXED else WireType.VARINT)
        return self._decode64(kind)

    def _decode32(self, kind: IntegerKind) -> int:
        if kind is IntegerKind.FIXED:
            return self._cursor.read_fixed32()
        if kind is IntegerKind.SIGNED:
            raw = self._cursor.read_varint32() & 0xFFFFFFFF
            return (raw >> 1) ^ -(raw & 1)
        # Negative int32 values are sign-extended to ten byte varints on the wire
        return _to_signed(self._cursor.read_varint64(), 32)

    def _decode64(self, kind: IntegerKind) -> int:
        if kind is IntegerKind.FIXED:
            return self._cursor.read_fixed64()
        if kind is IntegerKind.SIGNED:
            raw = self._cursor.read_varint64() & 0xFFFFFFFFFFFFFFFF
            return (raw >> 1) ^ -(raw & 1)
        return self._cursor.read_varint64()

    def _read_length(self) -> int:
        length = self._decode32(IntegerKind.DEFAULT)
        if length < 0:
            raise NegativeLength(f"Unexpected negative length: {length}")
        return length

    def read_length_delimited(self) -> "WireReader":
        """Enter the current length-delimited field as a nested message.

        Returns:
            Reader scoped to exactly the submessage bytes

        Raises:
            WireTypeMismatch: If the current field is not SIZE_DELIMITED
            NegativeLength: If the declared length is negative
            UnexpectedEof: If the declared length overruns the message
        """
        self._assert_wire_type(WireType.SIZE_DELIMITED)
        return self.read_length_delimited_tagless()

    def read_length_delimited_tagless(self) -> "WireReader":
        """Read a length prefix with no preceding tag and enter that many bytes."""
        return WireReader(self._cursor.slice(self._read_length()))

    def read_bytes(self) -> bytes:
        """Read the current length-delimited field as raw bytes."""
        self._assert_wire_type(WireType.SIZE_DELIMITED)
        return self._cursor.read_exact(self._read_length())

    def read_string(self) -> str:
        """Read the current length-delimited field as UTF-8 text.

        Malformed sequences decode to U+FFFD rather than failing the decode.
        """
        return self.read_bytes().decode("utf-8", errors="replace")

    def read_int_list(self) -> list[int]:
        """Read a repeated int32 field given either unpacked or packed.

        An unpacked occurrence contributes one value; a packed occurrence is a
        length-delimited run of varints.
        """
        if self.current_wire_type == WireType.VARINT:
            return [self.read_int()]

        self._assert_wire_type(WireType.SIZE_DELIMITED)
        packed = self._cursor.slice(self._read_length())
        values = []
        while packed.available_bytes > 0:
            values.append(_to_signed(packed.read_varint64(), 32))
        return values
