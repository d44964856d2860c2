#!/usr/bin/env python3

"""Domain services layer."""

from . import matching, parsing
from .nullability_service import NullabilityOracle

__all__ = [
    "NullabilityOracle",
    "matching",
    "parsing",
]
