#!/usr/bin/env python3

"""Tests for walking class messages into function records."""

import pytest

from kotlin_metadata_reader.core import (
    ProtobufDecodingError,
    StringIndexOutOfBounds,
    UnexpectedEof,
)
from kotlin_metadata_reader.domain.services.parsing import read_class_data

from tests.metadata_builders import (
    delimited_field,
    function,
    jvm_signature,
    klass,
    payload,
    record,
    return_type,
    string_table,
    varint_field,
)


class TestServiceClass:
    """Decoding the sample service class."""

    @pytest.mark.unit
    def test_function_keys(self, service_bytes: bytes, service_strings: list[str]) -> None:
        parsed = read_class_data(service_bytes, service_strings)

        assert [f.jvm_signature for f in parsed.functions] == [
            "user(JLkotlin/coroutines/Continuation;)Ljava/lang/Object;",
            "users(Lkotlin/coroutines/Continuation;)Ljava/lang/Object;",
            "ping(Lkotlin/coroutines/Continuation;)Ljava/lang/Object;",
            "fetchAll([I)Ljava/lang/String;",
            "find(Ljava/lang/String;)Lcom/example/User;",
            "find(I)Lcom/example/User;",
        ]

    @pytest.mark.unit
    def test_jvm_name_overrides_kotlin_name(
        self, service_bytes: bytes, service_strings: list[str]
    ) -> None:
        fetch_all = read_class_data(service_bytes, service_strings).functions[3]
        assert fetch_all.name == "fetchAll"
        assert fetch_all.name_index == 9
        assert fetch_all.signature.name_index == 10

    @pytest.mark.unit
    def test_return_types(self, service_bytes: bytes, service_strings: list[str]) -> None:
        functions = read_class_data(service_bytes, service_strings).functions

        assert [f.return_type.is_nullable for f in functions] == [True, False, False, False, True, False]
        assert [f.return_type.is_unit for f in functions] == [False, False, True, False, False, False]
        assert [f.is_nullable_or_unit for f in functions] == [True, False, True, False, True, False]


class TestFunctionShapes:
    """Functions with missing or extra fields."""

    @staticmethod
    def _decode(*function_bodies: bytes, strings=("f", "()V", "g", "T")):
        table = string_table(record(range_=len(strings)))
        return read_class_data(payload(table, klass(*function_bodies)), list(strings)).functions

    @pytest.mark.unit
    def test_missing_signature_cannot_match(self) -> None:
        (parsed,) = self._decode(function(0, return_type(True, 1)))
        assert parsed.name == "f"
        assert parsed.signature is None
        assert parsed.jvm_signature is None

    @pytest.mark.unit
    def test_missing_return_type_is_not_nullable(self) -> None:
        (parsed,) = self._decode(function(0, signature_body=jvm_signature(1)))
        assert not parsed.is_nullable_or_unit
        assert parsed.return_type.class_name_index == -1

    @pytest.mark.unit
    def test_type_parameter_return_is_not_unit(self) -> None:
        (parsed,) = self._decode(function(0, return_type(nullable=True), jvm_signature(1)))
        assert parsed.return_type.is_nullable
        assert not parsed.return_type.is_unit

    @pytest.mark.unit
    def test_unknown_fields_are_skipped_at_every_level(self) -> None:
        type_body = return_type(False, 3) + varint_field(2, 5) + delimited_field(4, b"\x08\x01")
        signature_body = jvm_signature(1) + varint_field(7, 3)
        body = function(2, type_body, signature_body) + delimited_field(6, b"\x00\x00")

        (parsed,) = self._decode(body)
        assert parsed.jvm_signature == "g()V"

    @pytest.mark.unit
    def test_class_without_functions(self) -> None:
        assert self._decode() == ()


class TestMalformedPayloads:
    """Errors while decoding."""

    @pytest.mark.unit
    def test_truncated_payload(self, service_bytes: bytes, service_strings: list[str]) -> None:
        with pytest.raises(UnexpectedEof):
            read_class_data(service_bytes[:-1], service_strings)

    @pytest.mark.unit
    def test_truncated_string_table(self, service_bytes: bytes, service_strings: list[str]) -> None:
        with pytest.raises(ProtobufDecodingError):
            read_class_data(service_bytes[:5], service_strings)

    @pytest.mark.unit
    def test_bad_string_index(self) -> None:
        data = payload(string_table(record()), klass(function(5, signature_body=jvm_signature(0))))
        with pytest.raises(StringIndexOutOfBounds):
            read_class_data(data, ["f"])
