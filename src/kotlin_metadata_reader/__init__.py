"""Kotlin Metadata Reader - return type nullability from compiled Kotlin class metadata."""

from .core import MetadataError
from .domain.models.metadata import DeclaringType, JvmClass, KotlinClassHeader, ReflectedMethod
from .domain.repositories.cache import MetadataCache
from .domain.services import NullabilityOracle
from .infrastructure.config import Config
from .main import main

__all__ = [
    "Config",
    "DeclaringType",
    "JvmClass",
    "KotlinClassHeader",
    "MetadataCache",
    "MetadataError",
    "NullabilityOracle",
    "ReflectedMethod",
    "main",
]
