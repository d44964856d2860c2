#!/usr/bin/env python3

"""Predefined string constants of the JVM string table.

String table records may refer to these well-known Kotlin standard library
binary names by position instead of carrying them in the interned pool. The
order is fixed by the compiler and must never change.
"""

KOTLIN_UNIT = "kotlin/Unit"

PREDEFINED_STRINGS: tuple[str, ...] = (
    "kotlin/Any",
    "kotlin/Nothing",
    KOTLIN_UNIT,
    "kotlin/Throwable",
    "kotlin/Number",

    "kotlin/Byte", "kotlin/Double", "kotlin/Float", "kotlin/Int",
    "kotlin/Long", "kotlin/Short", "kotlin/Boolean", "kotlin/Char",

    "kotlin/CharSequence",
    "kotlin/String",
    "kotlin/Comparable",
    "kotlin/Enum",

    "kotlin/Array",
    "kotlin/ByteArray", "kotlin/DoubleArray", "kotlin/FloatArray", "kotlin/IntArray",
    "kotlin/LongArray", "kotlin/ShortArray", "kotlin/BooleanArray", "kotlin/CharArray",

    "kotlin/Cloneable",
    "kotlin/Annotation",

    "kotlin/collections/Iterable", "kotlin/collections/MutableIterable",
    "kotlin/collections/Collection", "kotlin/collections/MutableCollection",
    "kotlin/collections/List", "kotlin/collections/MutableList",
    "kotlin/collections/Set", "kotlin/collections/MutableSet",
    "kotlin/collections/Map", "kotlin/collections/MutableMap",
    "kotlin/collections/Map.Entry", "kotlin/collections/MutableMap.MutableEntry",

    "kotlin/collections/Iterator", "kotlin/collections/MutableIterator",
    "kotlin/collections/ListIterator", "kotlin/collections/MutableListIterator",
)
