#!/usr/bin/env python3

"""Return type nullability lookups backed by class metadata."""

from collections.abc import Hashable

from ...core import (
    EmptyMetadataPayload,
    IncompatibleMetadataVersion,
    WrongMetadataKind,
)
from ...infrastructure.config import get_baseline_version
from ...infrastructure.logging import get_logger
from ..models.metadata import (
    KotlinClassHeader,
    MetadataKind,
    MetadataVersion,
    ParsedFunction,
    ReflectedMethod,
)
from ..repositories.cache import MetadataCache
from .matching import match_method
from .parsing import read_class_data

logger = get_logger(__name__)


class NullabilityOracle:
    """Answers whether a method's Kotlin return type is nullable or Unit.

    Suspending functions and other methods with erased return types compile to
    methods returning ``java.lang.Object``, so the source-level nullability can
    only be recovered from the metadata of the declaring class. Each declaring
    type's metadata is decoded once, the first time one of its methods is
    queried; later queries only compare method signatures against the cached
    function list.
    """

    def __init__(
        self,
        cache: MetadataCache | None = None,
        baseline_version: tuple[int, int, int] | None = None,
    ):
        """Initialize the oracle.

        Args:
            cache: Cache to share between oracles, a private one by default
            baseline_version: Version gate baseline, from configuration by default
        """
        self.cache = cache if cache is not None else MetadataCache()
        self.baseline_version = baseline_version or get_baseline_version()
        logger.debug(f"Initialized NullabilityOracle with baseline {self.baseline_version}")

    def _check_header(self, key: Hashable, kind: int, version: MetadataVersion) -> None:
        if not version.is_compatible(self.baseline_version):
            logger.warning(
                f"Metadata version {version} of {key!r} is not compatible with "
                f"{'.'.join(map(str, self.baseline_version))}"
            )
            raise IncompatibleMetadataVersion(
                f"Metadata version not compatible: {version} (strict={version.strict})"
            )
        if kind != MetadataKind.CLASS:
            logger.warning(f"Metadata of {key!r} has kind {kind}, expected a class")
            raise WrongMetadataKind(f"Metadata of wrong kind: {kind}")

    def load_functions(
        self,
        key: Hashable,
        metadata_bytes: bytes,
        strings: list[str] | tuple[str, ...],
        version: MetadataVersion,
        kind: int = MetadataKind.CLASS,
    ) -> tuple[ParsedFunction, ...]:
        """Get the functions of a declaring type, decoding them on first use.

        Args:
            key: Declaring type identity
            metadata_bytes: Wire-format payload
            strings: Interned string pool
            version: Metadata version of the header
            kind: Metadata kind of the header

        Returns:
            The cached functions of the type

        Raises:
            MetadataError: If the header is rejected or the payload is malformed
        """

        def compute() -> tuple[ParsedFunction, ...]:
            self._check_header(key, kind, version)
            if not metadata_bytes:
                raise EmptyMetadataPayload("Metadata payload must not be empty")
            return read_class_data(metadata_bytes, strings).functions

        return self.cache.get_or_compute(key, compute)

    def load_header_functions(
        self, key: Hashable, header: KotlinClassHeader
    ) -> tuple[ParsedFunction, ...]:
        """Get the functions described by a class header, decoding them on first use.

        The version and kind are checked before ``data1`` is unpacked.
        """

        def compute() -> tuple[ParsedFunction, ...]:
            self._check_header(key, header.kind, header.version)
            if not header.data1:
                raise EmptyMetadataPayload("data1 must not be empty")
            payload = header.payload_bytes()
            if not payload:
                raise EmptyMetadataPayload(f"data1 of {key!r} decodes to an empty payload")
            return read_class_data(payload, header.data2).functions

        return self.cache.get_or_compute(key, compute)

    def is_nullable(
        self,
        key: Hashable,
        metadata_bytes: bytes,
        strings: list[str] | tuple[str, ...],
        method: ReflectedMethod,
        version: MetadataVersion,
        kind: int = MetadataKind.CLASS,
    ) -> bool:
        """Check whether a method's return type is nullable or Unit.

        Args:
            key: Declaring type identity used as the cache key
            metadata_bytes: Wire-format payload of the declaring type
            strings: Interned string pool of the declaring type
            method: Method to look up
            version: Metadata version of the header
            kind: Metadata kind of the header

        Returns:
            True if the return type is nullable or ``kotlin/Unit``

        Raises:
            MetadataError: On header rejection, malformed payload, or when the
                method does not match exactly one function
        """
        functions = self.load_functions(key, metadata_bytes, strings, version, kind)
        return match_method(functions, method).is_nullable_or_unit

    def is_return_type_nullable(self, method: ReflectedMethod) -> bool:
        """Check a reflected method using its declaring type's metadata.

        Methods of types without Kotlin metadata are reported as not nullable.
        """
        declaring_type = method.declaring_type
        if declaring_type.metadata is None:
            return False

        functions = self.load_header_functions(declaring_type.name, declaring_type.metadata)
        return match_method(functions, method).is_nullable_or_unit
