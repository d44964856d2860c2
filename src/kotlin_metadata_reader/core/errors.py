#!/usr/bin/env python3

"""Exception hierarchy for metadata decoding and matching.

All errors derive from MetadataError, which is a ValueError.
"""


class MetadataError(ValueError):
    """Base class for all metadata reader errors."""


class IncompatibleMetadataVersion(MetadataError):
    """The header's metadata version fails the compatibility gate."""


class WrongMetadataKind(MetadataError):
    """The header describes something other than a class."""


class EmptyMetadataPayload(MetadataError):
    """The metadata byte payload is empty."""


class ProtobufDecodingError(MetadataError):
    """Structural error in the wire-format payload."""


class UnexpectedEof(ProtobufDecodingError):
    """A read ran past the end of the current buffer."""


class VarintTooLong(ProtobufDecodingError):
    """A varint exceeded its 32 or 64 bit budget."""


class NegativeLength(ProtobufDecodingError):
    """A length-delimited field declared a negative length."""


class UnsupportedWireType(ProtobufDecodingError):
    """A tag carried a wire type outside VARINT, I64, SIZE_DELIMITED and I32."""


class InvalidTag(ProtobufDecodingError):
    """A tag carried field number 0."""


class WireTypeMismatch(ProtobufDecodingError):
    """A typed read was attempted on a field of a different wire type."""


class StringIndexOutOfBounds(MetadataError):
    """A string index fell outside the string table or the interned pool."""


class NoMatchingFunction(MetadataError):
    """No parsed function matches the queried method descriptor."""


class AmbiguousFunctionMatch(MetadataError):
    """More than one parsed function matches the queried method descriptor."""
