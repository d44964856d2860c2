#!/usr/bin/env python3

"""Repositories holding decoded metadata."""

from . import cache

__all__ = [
    "cache",
]
