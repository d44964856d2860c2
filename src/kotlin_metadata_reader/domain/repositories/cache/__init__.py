#!/usr/bin/env python3

"""Cache implementations for decoded metadata."""

from .metadata_cache import MetadataCache

__all__ = [
    "MetadataCache",
]
