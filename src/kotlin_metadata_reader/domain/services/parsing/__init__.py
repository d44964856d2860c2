#!/usr/bin/env python3

"""Parsing services for Kotlin class metadata."""

from .schema_walker import parse_class, parse_function, read_class_data
from .string_table import StringTable, parse_string_table_records

__all__ = [
    "StringTable",
    "parse_class",
    "parse_function",
    "parse_string_table_records",
    "read_class_data",
]
