#!/usr/bin/env python3

"""JVM string table decoding and name resolution.

The metadata payload starts with a "string table types" message describing
how every string index maps onto the interned pool (``data2``). Records are
range-compressed: one record with ``range`` N covers N consecutive indices,
and the table is expanded back to one slot per index while parsing.
"""

from ....core import StringIndexOutOfBounds, WireReader
from ....infrastructure.logging import get_logger
from ...models.metadata import (
    PREDEFINED_STRINGS,
    StringTableOperation,
    StringTableRecord,
)

logger = get_logger(__name__)

# Field numbers of StringTableTypes
ID_RECORD = 1

# Field numbers of StringTableTypes.Record
ID_RANGE = 1
ID_PREDEFINED_INDEX = 2
ID_OPERATION = 3
ID_SUBSTRING_INDEX = 4
ID_REPLACE_CHAR = 5
ID_STRING = 6


def parse_record(reader: WireReader) -> StringTableRecord:
    """Parse one string table record message.

    Args:
        reader: Reader scoped to the record submessage

    Returns:
        The parsed record (not yet expanded)
    """
    range_ = 1
    predefined_index = -1
    operation = StringTableOperation.NONE
    string = None
    substring_index_list: list[int] = []
    replace_char_list: list[int] = []

    while (tag := reader.read_tag()) is not None:
        field_number, wire_type = tag
        if field_number == ID_RANGE:
            range_ = reader.read_int()
        elif field_number == ID_PREDEFINED_INDEX:
            predefined_index = reader.read_int()
        elif field_number == ID_OPERATION:
            operation = reader.read_int()
        elif field_number == ID_SUBSTRING_INDEX:
            substring_index_list.extend(reader.read_int_list())
        elif field_number == ID_REPLACE_CHAR:
            replace_char_list.extend(reader.read_int_list())
        elif field_number == ID_STRING:
            string = reader.read_string()
        else:
            reader.skip_field(wire_type)

    return StringTableRecord(
        range=range_,
        predefined_index=predefined_index,
        operation=operation,
        string=string,
        substring_index_list=tuple(substring_index_list),
        replace_char_list=tuple(replace_char_list),
    )


def parse_string_table_records(reader: WireReader) -> list[StringTableRecord]:
    """Parse the string table types message and expand record ranges.

    Args:
        reader: Reader scoped to the string table types message

    Returns:
        One record per string index
    """
    records: list[StringTableRecord] = []
    while (tag := reader.read_tag()) is not None:
        field_number, wire_type = tag
        if field_number == ID_RECORD:
            record = parse_record(reader.read_length_delimited())
            records.extend([record] * record.range)
        else:
            reader.skip_field(wire_type)
    return records


def apply_record(record: StringTableRecord, string: str) -> str:
    """Apply a record's post-processing to its base string.

    Substring, then char replacement, then the operation. The order matters
    for records that use more than one of them.
    """
    if len(record.substring_index_list) >= 2:
        begin, end = record.substring_index_list[0], record.substring_index_list[1]
        if 0 <= begin <= end <= len(string):
            string = string[begin:end]

    if len(record.replace_char_list) >= 2:
        replaced, replacement = record.replace_char_list[0], record.replace_char_list[1]
        # Chars are UTF-16 code units in the compiler, so only the low 16 bits count
        string = string.replace(chr(replaced & 0xFFFF), chr(replacement & 0xFFFF))

    if record.operation == StringTableOperation.INTERNAL_TO_CLASS_ID:
        string = string.replace("$", ".")
    elif record.operation == StringTableOperation.DESC_TO_CLASS_ID:
        if len(string) >= 2:
            string = string[1:-1]
        string = string.replace("$", ".")

    return string


class StringTable:
    """Resolves string indices of a class's metadata to names."""

    def __init__(self, records: list[StringTableRecord], strings: list[str] | tuple[str, ...]):
        """Initialize the resolver.

        Args:
            records: Range-expanded records, one per string index
            strings: Interned string pool (the header's ``data2``)
        """
        self.records = records
        self.strings = tuple(strings)

    @classmethod
    def parse(cls, reader: WireReader, strings: list[str] | tuple[str, ...]) -> "StringTable":
        """Build a resolver from the string table types message."""
        records = parse_string_table_records(reader)
        logger.debug(
            f"Parsed string table with {len(records)} slots over {len(strings)} interned strings"
        )
        return cls(records, strings)

    def __len__(self) -> int:
        return len(self.records)

    def get_string(self, index: int) -> str:
        """Resolve a string index.

        Args:
            index: Index into the expanded string table

        Returns:
            The resolved string

        Raises:
            StringIndexOutOfBounds: If the index is outside the table, or the
                record falls back to a missing interned string
        """
        if not 0 <= index < len(self.records):
            raise StringIndexOutOfBounds(
                f"String index {index} out of bounds for string table of size {len(self.records)}"
            )
        record = self.records[index]

        if record.has_string():
            string = record.string
        elif record.has_predefined_index() and 0 <= record.predefined_index < len(PREDEFINED_STRINGS):
            string = PREDEFINED_STRINGS[record.predefined_index]
        elif index < len(self.strings):
            string = self.strings[index]
        else:
            raise StringIndexOutOfBounds(
                f"String index {index} out of bounds for {len(self.strings)} interned strings"
            )

        return apply_record(record, string)
