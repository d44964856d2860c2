#!/usr/bin/env python3

"""Class message walker extracting function records.

Only what is needed to answer nullability questions is read: the functions of
the class, their return types and their JVM signatures. Every other field, at
any nesting level, is skipped by wire type, so fields added by newer compilers
are tolerated.

Payload layout::

    <varint length><StringTableTypes message><Class message until end of buffer>
"""

from ....core import WireReader
from ....infrastructure.logging import get_logger, log_timing
from ...models.metadata import (
    KOTLIN_UNIT,
    FunctionSignature,
    ParsedClass,
    ParsedFunction,
    ReturnType,
)
from .string_table import StringTable

logger = get_logger(__name__)

# Class
ID_CLASS_FUNCTION = 9

# Function
ID_FUNCTION_NAME = 2
ID_FUNCTION_RETURN_TYPE = 3
ID_FUNCTION_SIGNATURE = 100  # JvmProtoBuf.methodSignature extension

# Type
ID_TYPE_NULLABLE = 3
ID_TYPE_CLASS_NAME = 6

# JvmMethodSignature
ID_SIGNATURE_NAME = 1
ID_SIGNATURE_DESC = 2


def parse_return_type(reader: WireReader, string_table: StringTable) -> ReturnType:
    """Parse a Type message used as a function's return type."""
    nullable = False
    class_name_index = -1

    while (tag := reader.read_tag()) is not None:
        field_number, wire_type = tag
        if field_number == ID_TYPE_NULLABLE:
            nullable = reader.read_int() != 0
        elif field_number == ID_TYPE_CLASS_NAME:
            class_name_index = reader.read_int()
        else:
            reader.skip_field(wire_type)

    is_unit = class_name_index != -1 and string_table.get_string(class_name_index) == KOTLIN_UNIT
    return ReturnType(is_nullable=nullable, class_name_index=class_name_index, is_unit=is_unit)


def parse_signature(reader: WireReader) -> FunctionSignature:
    """Parse a JvmMethodSignature message."""
    name_index = -1
    descriptor_index = -1

    while (tag := reader.read_tag()) is not None:
        field_number, wire_type = tag
        if field_number == ID_SIGNATURE_NAME:
            name_index = reader.read_int()
        elif field_number == ID_SIGNATURE_DESC:
            descriptor_index = reader.read_int()
        else:
            reader.skip_field(wire_type)

    return FunctionSignature(name_index=name_index, descriptor_index=descriptor_index)


def parse_function(reader: WireReader, string_table: StringTable) -> ParsedFunction:
    """Parse a Function message and resolve its JVM key.

    The JVM signature's own name overrides the Kotlin name when present
    (``@JvmName``, mangled names of inline-class functions).
    """
    name_index = -1
    return_type = ReturnType()
    signature = None

    while (tag := reader.read_tag()) is not None:
        field_number, wire_type = tag
        if field_number == ID_FUNCTION_NAME:
            name_index = reader.read_int()
        elif field_number == ID_FUNCTION_RETURN_TYPE:
            return_type = parse_return_type(reader.read_length_delimited(), string_table)
        elif field_number == ID_FUNCTION_SIGNATURE:
            signature = parse_signature(reader.read_length_delimited())
        else:
            reader.skip_field(wire_type)

    if signature is not None and signature.name_index != -1:
        name = string_table.get_string(signature.name_index)
    else:
        name = string_table.get_string(name_index)

    jvm_signature = None
    if signature is not None:
        jvm_signature = name + string_table.get_string(signature.descriptor_index)
    else:
        logger.debug(f"Function '{name}' has no JVM signature and cannot be matched")

    return ParsedFunction(
        name_index=name_index,
        return_type=return_type,
        signature=signature,
        name=name,
        jvm_signature=jvm_signature,
    )


def parse_class(reader: WireReader, string_table: StringTable) -> ParsedClass:
    """Walk a Class message and collect its functions.

    Args:
        reader: Reader scoped to the class message
        string_table: Resolver for the string indices used by the class

    Returns:
        The class's functions in declaration order
    """
    functions = []
    while (tag := reader.read_tag()) is not None:
        field_number, wire_type = tag
        if field_number == ID_CLASS_FUNCTION:
            functions.append(parse_function(reader.read_length_delimited(), string_table))
        else:
            reader.skip_field(wire_type)
    return ParsedClass(functions=tuple(functions))


@log_timing
def read_class_data(payload: bytes, strings: list[str] | tuple[str, ...]) -> ParsedClass:
    """Decode a class's metadata payload.

    Args:
        payload: Wire-format bytes (already unpacked from ``data1``)
        strings: Interned string pool (``data2``)

    Returns:
        The decoded class

    Raises:
        ProtobufDecodingError: On any structural error in the payload
        StringIndexOutOfBounds: If a string index cannot be resolved
    """
    reader = WireReader.from_bytes(payload)
    string_table = StringTable.parse(reader.read_length_delimited_tagless(), strings)
    parsed = parse_class(reader, string_table)
    logger.debug(f"Decoded {len(parsed.functions)} functions from {len(payload)} bytes")
    return parsed
