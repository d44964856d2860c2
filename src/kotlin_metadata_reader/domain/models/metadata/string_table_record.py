#!/usr/bin/env python3

"""String table record model."""

from dataclasses import dataclass, field
from enum import IntEnum


class StringTableOperation(IntEnum):
    """Post-processing applied to a resolved string table entry."""

    NONE = 0
    INTERNAL_TO_CLASS_ID = 1  # replace '$' with '.'
    DESC_TO_CLASS_ID = 2  # drop the leading 'L' and trailing ';', then '$' -> '.'


@dataclass(frozen=True)
class StringTableRecord:
    """One record of the string table types message.

    A record with ``range`` N stands for N consecutive string table slots.
    Unknown ``operation`` values are kept as-is and resolve as NONE.
    """

    range: int = 1
    predefined_index: int = -1
    operation: int = StringTableOperation.NONE
    string: str | None = None
    substring_index_list: tuple[int, ...] = field(default_factory=tuple)
    replace_char_list: tuple[int, ...] = field(default_factory=tuple)

    def has_string(self) -> bool:
        return self.string is not None

    def has_predefined_index(self) -> bool:
        return self.predefined_index != -1
