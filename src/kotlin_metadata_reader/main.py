"""Main entry point for the Kotlin metadata reader."""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from .core import MetadataError
from .domain.models.metadata import KotlinClassHeader
from .domain.services import NullabilityOracle
from .domain.services.matching import find_function
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Inspect the Kotlin metadata of a compiled class and report "
        "which functions return nullable or Unit types",
        epilog="""
Examples:
  # List every function with its JVM signature and return type flags
  python main.py build/Service.metadata.json

  # Ask about a single method (JVM name + descriptor)
  python main.py build/Service.metadata.json --method 'foo([ILkotlin/coroutines/Continuation;)Ljava/lang/Object;'

  # Using .env file for configuration
  echo 'KMETA_HEADER_FILE=build/Service.metadata.json' > .env
  python main.py --method 'getUser(J)Ljava/lang/Object;'

The header file is JSON with the fields of the class's kotlin.Metadata
annotation: kind, metadata_version, data1, data2 and extra_int.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "header_file",
        type=Path,
        nargs="?",
        help="Path to the JSON metadata header (optional if using .env)",
    )
    parser.add_argument(
        "-m",
        "--method",
        type=str,
        metavar="SIGNATURE",
        help="JVM name and descriptor of the method to check, e.g. 'foo(I)Ljava/lang/Object;'",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def load_header(header_file: Path) -> KotlinClassHeader:
    """Load a class header from its JSON form.

    Raises:
        ValueError: If the file is not valid JSON or lacks required fields
    """
    try:
        raw = json.loads(header_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Header file is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError("Header file must contain a JSON object")
    return KotlinClassHeader.from_dict(raw)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for metadata inspection."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            header_file=args.header_file,
            method_signature=args.method,
            verbose=args.verbose,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"Header file: {config.header_file}")

    try:
        header = load_header(config.header_file)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read header {config.header_file}: {e}")
        sys.exit(1)

    oracle = NullabilityOracle()
    try:
        functions = oracle.load_header_functions(config.header_file.stem, header)
    except MetadataError as e:
        logger.error(f"[FAILED] {config.header_file}: {e}")
        sys.exit(1)

    if config.method_signature is not None:
        try:
            function = find_function(functions, config.method_signature)
        except MetadataError as e:
            logger.error(f"[FAILED] {e}")
            sys.exit(1)
        print("true" if function.is_nullable_or_unit else "false")
        sys.exit(0)

    logger.info(f"Found {len(functions)} function(s) in {config.header_file}")
    for function in functions:
        flags = []
        if function.return_type.is_nullable:
            flags.append("nullable")
        if function.return_type.is_unit:
            flags.append("unit")
        print(f"{function.jvm_signature or function.name}\t{','.join(flags) or '-'}")

    sys.exit(0)


if __name__ == "__main__":
    main()
