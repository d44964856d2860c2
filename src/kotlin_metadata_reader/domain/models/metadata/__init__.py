#!/usr/bin/env python3

"""Kotlin metadata domain models."""

from .function_info import FunctionSignature, ParsedClass, ParsedFunction, ReturnType
from .jvm_method import PRIMITIVE_DESCRIPTORS, DeclaringType, JvmClass, ReflectedMethod
from .metadata_header import (
    METADATA_STRICT_VERSION_SEMANTICS_FLAG,
    KotlinClassHeader,
    MetadataKind,
)
from .metadata_version import MetadataVersion
from .predefined_strings import KOTLIN_UNIT, PREDEFINED_STRINGS
from .string_table_record import StringTableOperation, StringTableRecord

__all__ = [
    "DeclaringType",
    "FunctionSignature",
    "JvmClass",
    "KOTLIN_UNIT",
    "KotlinClassHeader",
    "METADATA_STRICT_VERSION_SEMANTICS_FLAG",
    "MetadataKind",
    "MetadataVersion",
    "PREDEFINED_STRINGS",
    "PRIMITIVE_DESCRIPTORS",
    "ParsedClass",
    "ParsedFunction",
    "ReflectedMethod",
    "ReturnType",
    "StringTableOperation",
    "StringTableRecord",
]
