"""Core wire-format decoding primitives."""

from .bit_encoding import decode_bytes
from .byte_cursor import ByteCursor
from .errors import (
    AmbiguousFunctionMatch,
    EmptyMetadataPayload,
    IncompatibleMetadataVersion,
    InvalidTag,
    MetadataError,
    NegativeLength,
    NoMatchingFunction,
    ProtobufDecodingError,
    StringIndexOutOfBounds,
    UnexpectedEof,
    UnsupportedWireType,
    VarintTooLong,
    WireTypeMismatch,
    WrongMetadataKind,
)
from .models import IntegerKind, WireType
from .wire_reader import WireReader

__all__ = [
    "AmbiguousFunctionMatch",
    "ByteCursor",
    "EmptyMetadataPayload",
    "IncompatibleMetadataVersion",
    "IntegerKind",
    "InvalidTag",
    "MetadataError",
    "NegativeLength",
    "NoMatchingFunction",
    "ProtobufDecodingError",
    "StringIndexOutOfBounds",
    "UnexpectedEof",
    "UnsupportedWireType",
    "VarintTooLong",
    "WireReader",
    "WireType",
    "WireTypeMismatch",
    "WrongMetadataKind",
    "decode_bytes",
]
