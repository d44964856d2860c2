#!/usr/bin/env python3

"""Metadata version compatibility gate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MetadataVersion:
    """Version triple of a class's metadata plus its strictness flag.

    Compatibility rules against a baseline version:

    - major 0 and ``1.0.*`` are pre-stable formats and never compatible
    - strict: major must equal the baseline's, and minor and patch must each be
      at most the baseline's
    - non-strict: major must equal the baseline's and minor may be at most one
      ahead of the baseline minor
    """

    major: int
    minor: int
    patch: int = 0
    strict: bool = False

    @classmethod
    def from_sequence(cls, parts: list[int] | tuple[int, ...], strict: bool = False) -> "MetadataVersion":
        """Build a version from the header's ``metadata_version`` array.

        Missing trailing components default to 0, extra ones are ignored.

        Raises:
            ValueError: If the array is empty
        """
        if not parts:
            raise ValueError("Metadata version array must not be empty")
        padded = list(parts[:3]) + [0] * (3 - min(len(parts), 3))
        return cls(padded[0], padded[1], padded[2], strict)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.major, self.minor, self.patch

    def is_compatible(self, baseline: tuple[int, int, int]) -> bool:
        """Check this version against a baseline.

        Args:
            baseline: ``(major, minor, patch)`` the reader was written against

        Returns:
            True if a reader written for the baseline can decode this version
        """
        base_major, base_minor, base_patch = baseline

        if self.major == 0 or (self.major == 1 and self.minor == 0):
            return False
        if self.major != base_major:
            return False

        if self.strict:
            return self.minor <= base_minor and self.patch <= base_patch
        return self.minor <= base_minor + 1

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
