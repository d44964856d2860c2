#!/usr/bin/env python3

"""Reflected JVM method model.

Class names follow the JVM binary naming used by reflection:
``int`` for primitives, ``java.lang.String`` for references and
``[I`` / ``[Ljava.lang.String;`` for arrays.
"""

from dataclasses import dataclass, field

from .metadata_header import KotlinClassHeader

PRIMITIVE_DESCRIPTORS: dict[str, str] = {
    "int": "I",
    "long": "J",
    "boolean": "Z",
    "byte": "B",
    "char": "C",
    "float": "F",
    "double": "D",
    "short": "S",
    "void": "V",
}


@dataclass(frozen=True)
class JvmClass:
    """A JVM type identified by its binary name."""

    name: str

    @property
    def is_primitive(self) -> bool:
        return self.name in PRIMITIVE_DESCRIPTORS

    @property
    def is_array(self) -> bool:
        return self.name.startswith("[")


@dataclass(frozen=True)
class DeclaringType:
    """A compiled class and the Kotlin metadata it carries, if any."""

    name: str
    metadata: KotlinClassHeader | None = None


@dataclass(frozen=True)
class ReflectedMethod:
    """A method as seen through reflection on its declaring class."""

    declaring_type: DeclaringType
    name: str
    parameter_types: tuple[JvmClass, ...] = field(default_factory=tuple)
    return_type: JvmClass = JvmClass("void")
