#!/usr/bin/env python3

"""Domain models for the metadata reader."""

from . import metadata

__all__ = [
    "metadata",
]
