"""Wire-format constants and enums."""

from enum import Enum, IntEnum


class WireType(IntEnum):
    """Wire types understood by the reader.

    Group start/end (3 and 4) and the reserved values 6 and 7 are rejected.
    """

    VARINT = 0
    I64 = 1
    SIZE_DELIMITED = 2
    I32 = 5


class IntegerKind(Enum):
    """Encoding of an integer field."""

    DEFAULT = "default"  # plain varint, two's complement for negatives
    SIGNED = "signed"  # zig-zag varint
    FIXED = "fixed"  # little-endian fixed width
