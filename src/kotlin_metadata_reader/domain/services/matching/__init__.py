#!/usr/bin/env python3

"""Signature matching services."""

from .signature_matcher import descriptor_of, find_function, match_method, type_to_descriptor

__all__ = [
    "descriptor_of",
    "find_function",
    "match_method",
    "type_to_descriptor",
]
