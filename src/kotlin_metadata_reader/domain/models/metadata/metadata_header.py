#!/usr/bin/env python3

"""Kotlin class header model.

Mirrors the fields of the ``kotlin.Metadata`` annotation that the reader
needs. Reading the annotation off a compiled class is left to the caller.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from ....core.bit_encoding import decode_bytes
from .metadata_version import MetadataVersion

# Bit of extra_int telling that the version must be checked strictly
METADATA_STRICT_VERSION_SEMANTICS_FLAG = 1 << 3


class MetadataKind(IntEnum):
    """Kinds of Kotlin metadata a class file may carry."""

    CLASS = 1
    FILE_FACADE = 2
    SYNTHETIC_CLASS = 3
    MULTIFILE_CLASS = 4
    MULTIFILE_CLASS_PART = 5


@dataclass(frozen=True)
class KotlinClassHeader:
    """Header fields of a class's Kotlin metadata."""

    kind: int
    metadata_version: tuple[int, ...]
    data1: tuple[str, ...] = field(default_factory=tuple)
    data2: tuple[str, ...] = field(default_factory=tuple)
    extra_int: int = 0

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "KotlinClassHeader":
        """Build a header from its JSON form.

        Args:
            raw: Mapping with ``kind``, ``metadata_version``, ``data1`` and
                optionally ``data2`` and ``extra_int``

        Raises:
            ValueError: If a required key is missing
        """
        missing = [key for key in ("kind", "metadata_version", "data1") if key not in raw]
        if missing:
            raise ValueError(f"Header is missing required keys: {', '.join(missing)}")
        return cls(
            kind=int(raw["kind"]),
            metadata_version=tuple(int(part) for part in raw["metadata_version"]),
            data1=tuple(raw["data1"]),
            data2=tuple(raw.get("data2", ())),
            extra_int=int(raw.get("extra_int", 0)),
        )

    @property
    def is_strict_semantics(self) -> bool:
        return (self.extra_int & METADATA_STRICT_VERSION_SEMANTICS_FLAG) != 0

    @property
    def version(self) -> MetadataVersion:
        return MetadataVersion.from_sequence(self.metadata_version, self.is_strict_semantics)

    def payload_bytes(self) -> bytes:
        """Decode ``data1`` into the wire-format payload."""
        return decode_bytes(self.data1)
