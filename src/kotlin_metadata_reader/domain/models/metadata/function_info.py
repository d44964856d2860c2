#!/usr/bin/env python3

"""Function records extracted from class metadata."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReturnType:
    """Return type of a function as far as nullability is concerned."""

    is_nullable: bool = False
    class_name_index: int = -1  # -1 when the type is not a class (e.g. a type parameter)
    is_unit: bool = False


@dataclass(frozen=True)
class FunctionSignature:
    """JVM signature extension of a function."""

    name_index: int = -1  # -1 means the function's own name is the JVM name
    descriptor_index: int = -1


@dataclass(frozen=True)
class ParsedFunction:
    """A function record with its JVM key resolved once at decode time."""

    name_index: int
    return_type: ReturnType
    signature: FunctionSignature | None = None
    name: str | None = None
    jvm_signature: str | None = None  # effective name + JVM descriptor

    @property
    def is_nullable_or_unit(self) -> bool:
        return self.return_type.is_nullable or self.return_type.is_unit


@dataclass(frozen=True)
class ParsedClass:
    """The only parts of a class message the reader keeps."""

    functions: tuple[ParsedFunction, ...] = field(default_factory=tuple)
