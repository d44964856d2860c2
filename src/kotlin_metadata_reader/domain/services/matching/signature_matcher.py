#!/usr/bin/env python3

"""Matching of reflected methods against decoded function records.

A method is identified by its JVM name plus descriptor, e.g. the suspending
function ``suspend fun foo(arg: IntArray): String?`` compiles to
``foo([ILkotlin/coroutines/Continuation;)Ljava/lang/Object;``. The same key is
stored in the metadata, so matching is a plain string comparison.
"""

from collections.abc import Iterable

from ....core import AmbiguousFunctionMatch, NoMatchingFunction
from ....infrastructure.logging import get_logger
from ...models.metadata import PRIMITIVE_DESCRIPTORS, JvmClass, ParsedFunction, ReflectedMethod

logger = get_logger(__name__)


def type_to_descriptor(jvm_class: JvmClass) -> str:
    """Encode a JVM class as a descriptor fragment.

    Examples:
        >>> type_to_descriptor(JvmClass("int"))
        'I'
        >>> type_to_descriptor(JvmClass("[Ljava.lang.String;"))
        '[Ljava/lang/String;'
        >>> type_to_descriptor(JvmClass("java.lang.Object"))
        'Ljava/lang/Object;'
    """
    if jvm_class.is_primitive:
        return PRIMITIVE_DESCRIPTORS[jvm_class.name]
    if jvm_class.is_array:
        return jvm_class.name.replace(".", "/")
    return f"L{jvm_class.name.replace('.', '/')};"


def descriptor_of(method: ReflectedMethod) -> str:
    """Build the JVM name + descriptor key of a reflected method."""
    parameters = "".join(type_to_descriptor(p) for p in method.parameter_types)
    return f"{method.name}({parameters}){type_to_descriptor(method.return_type)}"


def find_function(functions: Iterable[ParsedFunction], signature: str) -> ParsedFunction:
    """Find the single function whose JVM key equals ``signature``.

    Raises:
        NoMatchingFunction: If no function matches
        AmbiguousFunctionMatch: If more than one function matches
    """
    candidates = [function for function in functions if function.jvm_signature == signature]

    if not candidates:
        logger.debug(f"No function in metadata matches '{signature}'")
        raise NoMatchingFunction(f"No match found in metadata for '{signature}'")
    if len(candidates) > 1:
        logger.debug(f"{len(candidates)} functions in metadata match '{signature}'")
        raise AmbiguousFunctionMatch(
            f"Multiple function matches found in metadata for '{signature}'"
        )
    return candidates[0]


def match_method(functions: Iterable[ParsedFunction], method: ReflectedMethod) -> ParsedFunction:
    """Find the function record describing a reflected method."""
    return find_function(functions, descriptor_of(method))
