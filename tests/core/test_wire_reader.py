#!/usr/bin/env python3

"""Tests for the protobuf-style wire reader."""

import pytest

from kotlin_metadata_reader.core import (
    IntegerKind,
    InvalidTag,
    NegativeLength,
    UnexpectedEof,
    UnsupportedWireType,
    WireReader,
    WireType,
    WireTypeMismatch,
)

from tests.metadata_builders import (
    I32,
    I64,
    delimited_field,
    packed_field,
    string_field,
    tag,
    varint,
    varint_field,
)


def _reader(data: bytes) -> WireReader:
    return WireReader.from_bytes(data)


class TestReadTag:
    """Tag decoding."""

    @pytest.mark.unit
    def test_read_tag_sequence(self) -> None:
        reader = _reader(varint_field(1, 7) + string_field(100, "x"))

        assert reader.read_tag() == (1, WireType.VARINT)
        assert reader.read_int() == 7
        assert reader.read_tag() == (100, WireType.SIZE_DELIMITED)
        assert reader.read_string() == "x"
        assert reader.read_tag() is None
        assert reader.current_field == -1

    @pytest.mark.unit
    def test_field_number_zero_is_invalid(self) -> None:
        with pytest.raises(InvalidTag):
            _reader(bytes([0x00, 0x01])).read_tag()

    @pytest.mark.unit
    @pytest.mark.parametrize("wire_type", [3, 4, 6, 7])
    def test_unsupported_wire_types(self, wire_type: int) -> None:
        with pytest.raises(UnsupportedWireType):
            _reader(tag(1, wire_type)).read_tag()


class TestSkipField:
    """Skipping of unknown fields by wire type."""

    @pytest.mark.unit
    def test_skip_every_supported_wire_type(self) -> None:
        data = (
            varint_field(1, 2**35)
            + tag(2, I64) + bytes(8)
            + delimited_field(3, b"hello")
            + tag(4, I32) + bytes(4)
            + varint_field(5, 42)
        )
        reader = _reader(data)
        for _ in range(4):
            _, wire_type = reader.read_tag()
            reader.skip_field(wire_type)

        assert reader.read_tag() == (5, WireType.VARINT)
        assert reader.read_int() == 42

    @pytest.mark.unit
    def test_skip_uses_last_tag_by_default(self) -> None:
        reader = _reader(delimited_field(3, b"abc") + varint_field(4, 1))
        reader.read_tag()
        reader.skip_field()
        assert reader.read_tag() == (4, WireType.VARINT)

    @pytest.mark.unit
    def test_skip_unknown_wire_type(self) -> None:
        with pytest.raises(UnsupportedWireType):
            _reader(b"").skip_field(3)

    @pytest.mark.unit
    def test_skip_truncated_fixed64(self) -> None:
        reader = _reader(tag(2, I64) + bytes(7))
        reader.read_tag()
        with pytest.raises(UnexpectedEof):
            reader.skip_field()


class TestTypedReads:
    """Integer reads guarded by wire type."""

    @pytest.mark.unit
    def test_negative_int32_from_ten_byte_varint(self) -> None:
        reader = _reader(varint_field(2, -1))
        reader.read_tag()
        assert reader.read_int() == -1

    @pytest.mark.unit
    def test_fixed_reads(self) -> None:
        data = tag(1, I32) + (-5).to_bytes(4, "little", signed=True)
        data += tag(2, I64) + (2**40).to_bytes(8, "little")
        reader = _reader(data)

        reader.read_tag()
        assert reader.read_int(IntegerKind.FIXED) == -5
        reader.read_tag()
        assert reader.read_long(IntegerKind.FIXED) == 2**40

    @pytest.mark.unit
    def test_signed_zigzag_reads(self) -> None:
        reader = _reader(varint_field(1, 3) + varint_field(2, 4))
        reader.read_tag()
        assert reader.read_int(IntegerKind.SIGNED) == -2
        reader.read_tag()
        assert reader.read_long(IntegerKind.SIGNED) == 2

    @pytest.mark.unit
    def test_wire_type_mismatch(self) -> None:
        reader = _reader(string_field(1, "text"))
        reader.read_tag()
        with pytest.raises(WireTypeMismatch, match="Expected wire type VARINT"):
            reader.read_int()

    @pytest.mark.unit
    def test_length_delimited_requires_size_delimited(self) -> None:
        reader = _reader(varint_field(1, 1))
        reader.read_tag()
        with pytest.raises(WireTypeMismatch):
            reader.read_length_delimited()


class TestLengthDelimited:
    """Nested message scoping."""

    @pytest.mark.unit
    def test_sub_reader_is_bounded(self) -> None:
        inner = varint_field(1, 10) + varint_field(2, 20)
        reader = _reader(delimited_field(9, inner) + varint_field(3, 30))

        reader.read_tag()
        sub = reader.read_length_delimited()
        assert sub.available_bytes == len(inner)

        fields = []
        while (tag_ := sub.read_tag()) is not None:
            fields.append((tag_[0], sub.read_int()))
        assert fields == [(1, 10), (2, 20)]

        assert reader.read_tag() == (3, WireType.VARINT)
        assert reader.read_int() == 30

    @pytest.mark.unit
    def test_negative_length(self) -> None:
        reader = _reader(tag(9, 2) + varint(-3))
        reader.read_tag()
        with pytest.raises(NegativeLength, match="-3"):
            reader.read_length_delimited()

    @pytest.mark.unit
    def test_length_past_end(self) -> None:
        reader = _reader(tag(9, 2) + varint(10) + b"abc")
        reader.read_tag()
        with pytest.raises(UnexpectedEof):
            reader.read_length_delimited()

    @pytest.mark.unit
    def test_tagless_message(self) -> None:
        reader = _reader(varint(2) + varint_field(1, 5) + varint_field(7, 1))
        sub = reader.read_length_delimited_tagless()
        assert sub.read_tag() == (1, WireType.VARINT)
        assert sub.read_int() == 5
        assert sub.read_tag() is None
        assert reader.read_tag() == (7, WireType.VARINT)

    @pytest.mark.unit
    def test_read_string_utf8(self) -> None:
        reader = _reader(string_field(6, "Grüße$Inner"))
        reader.read_tag()
        assert reader.read_string() == "Grüße$Inner"


class TestIntLists:
    """Repeated int32 fields, packed and unpacked."""

    @pytest.mark.unit
    def test_packed_list(self) -> None:
        reader = _reader(packed_field(4, [1, 300, 7]))
        reader.read_tag()
        assert reader.read_int_list() == [1, 300, 7]

    @pytest.mark.unit
    def test_unpacked_list(self) -> None:
        reader = _reader(varint_field(4, 1) + varint_field(4, 5))
        values = []
        while reader.read_tag() is not None:
            values.extend(reader.read_int_list())
        assert values == [1, 5]

    @pytest.mark.unit
    def test_empty_packed_list(self) -> None:
        reader = _reader(delimited_field(4, b""))
        reader.read_tag()
        assert reader.read_int_list() == []
