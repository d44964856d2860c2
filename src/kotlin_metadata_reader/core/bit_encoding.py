#!/usr/bin/env python3

"""Decoding of the string-packed metadata payload.

The Kotlin compiler cannot store raw bytes in a class file annotation, so the
``data1`` payload is written as an array of strings in one of two modes:

- UTF-8 mode: the first string starts with ``"\\x00"``; every char after the
  marker is one byte.
- 8-to-7 mode: the payload bytes are split into 7-bit groups, each group is
  incremented by one modulo 128 and stored as a char. Old compilers prefix the
  first string with ``"\\uffff"``; newer ones write no marker at all.
"""

from ..infrastructure.logging import get_logger

logger = get_logger(__name__)

UTF8_MODE_MARKER = "\u0000"
EIGHT_TO_SEVEN_MODE_MARKER = "\uffff"


def decode_bytes(data: list[str] | tuple[str, ...]) -> bytes:
    """Convert the string-packed payload back to bytes.

    Args:
        data: The ``data1`` strings of the class header

    Returns:
        Decoded payload bytes
    """
    strings = list(data)
    if strings and strings[0]:
        marker = strings[0][0]
        if marker == UTF8_MODE_MARKER:
            strings[0] = strings[0][1:]
            logger.debug("Decoding metadata payload in UTF-8 mode")
            return _strings_to_bytes(strings)
        if marker == EIGHT_TO_SEVEN_MODE_MARKER:
            strings[0] = strings[0][1:]

    logger.debug("Decoding metadata payload in 8-to-7 mode")
    combined = _strings_to_bytes(strings)
    # Adding 0x7f modulo 0x80 undoes the +1 applied by the encoder
    shifted = bytes((byte + 0x7F) & 0x7F for byte in combined)
    return _decode_7_to_8(shifted)


def _strings_to_bytes(strings: list[str]) -> bytes:
    return bytes(ord(char) & 0xFF for string in strings for char in string)


def _decode_7_to_8(data: bytes) -> bytes:
    """Reassemble 7-bit groups into 8-bit bytes.

    The low 7 bits of every input byte form one little-endian bit string which
    is cut into whole bytes; trailing bits are padding and dropped.
    """
    result_length = 7 * len(data) // 8
    result = bytearray(result_length)

    byte_index = 0
    bit = 0
    for i in range(result_length):
        first_part = data[byte_index] >> bit
        byte_index += 1
        second_part = (data[byte_index] & ((1 << (bit + 1)) - 1)) << (7 - bit)
        result[i] = (first_part + second_part) & 0xFF

        if bit == 6:
            byte_index += 1
            bit = 0
        else:
            bit += 1

    return bytes(result)
