"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from kotlin_metadata_reader.domain.models.metadata import (
    DeclaringType,
    JvmClass,
    KotlinClassHeader,
    ReflectedMethod,
)
from kotlin_metadata_reader.domain.repositories.cache import MetadataCache
from kotlin_metadata_reader.domain.services import NullabilityOracle
from kotlin_metadata_reader.infrastructure.logging import LoggerSetup

from tests.metadata_builders import SERVICE_STRINGS, encode_data1, service_payload

BASELINE = (1, 9, 0)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def service_bytes() -> bytes:
    """Wire-format payload of the sample service class."""
    return service_payload()


@pytest.fixture(scope="session")
def service_strings() -> list[str]:
    """Interned string pool of the sample service class."""
    return list(SERVICE_STRINGS)


@pytest.fixture
def service_header(service_bytes: bytes, service_strings: list[str]) -> KotlinClassHeader:
    """Class header as the compiler would write it for the sample service."""
    return KotlinClassHeader(
        kind=1,
        metadata_version=(1, 9, 0),
        data1=tuple(encode_data1(service_bytes)),
        data2=tuple(service_strings),
    )


@pytest.fixture
def service_type(service_header: KotlinClassHeader) -> DeclaringType:
    return DeclaringType("com.example.Service", service_header)


@pytest.fixture
def cache() -> MetadataCache:
    return MetadataCache()


@pytest.fixture
def oracle(cache: MetadataCache) -> NullabilityOracle:
    """Oracle with a fresh cache and a fixed baseline version."""
    return NullabilityOracle(cache=cache, baseline_version=BASELINE)


@pytest.fixture
def suspend_method():
    """Factory for reflected suspending methods of the sample service."""

    def build(declaring_type: DeclaringType, name: str, *parameters: str) -> ReflectedMethod:
        return ReflectedMethod(
            declaring_type=declaring_type,
            name=name,
            parameter_types=tuple(JvmClass(p) for p in parameters)
            + (JvmClass("kotlin.coroutines.Continuation"),),
            return_type=JvmClass("java.lang.Object"),
        )

    return build


@pytest.fixture
def isolated_logging() -> Generator[None, None, None]:
    """Let a test initialize logging and restore the pristine state afterwards."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
