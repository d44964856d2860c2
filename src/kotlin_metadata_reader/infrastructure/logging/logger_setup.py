#!/usr/bin/env python3

"""Logger setup for the metadata reader CLI.

Handlers are attached to the ``kotlin_metadata_reader`` logger rather than the
root logger, so an application that embeds the reader keeps control of its own
logging. Records still propagate to the root logger.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

PACKAGE_LOGGER = "kotlin_metadata_reader"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggerSetup:
    """Installs the console and file handlers of the metadata reader."""

    _initialized = False
    _log_file_path: Path | None = None
    _handlers: list[logging.Handler] = []

    @classmethod
    def initialize(cls, log_dir: Path, verbose: bool = False) -> None:
        """
        Log to stderr and to a timestamped file in ``log_dir``.

        stdout is left to the CLI's results. Calls after the first are ignored
        until reset().

        Args:
            log_dir: Directory to store log files, created if missing
            verbose: If True, the console shows DEBUG records; otherwise INFO
        """
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        cls._log_file_path = log_dir / f"kotlin_metadata_reader_{timestamp}.log"

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

        file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(logging.DEBUG)
        cls._handlers = [console_handler, file_handler]
        for handler in cls._handlers:
            package_logger.addHandler(handler)

        cls._initialized = True

        logger = logging.getLogger(__name__)
        logger.info(f"Logging to {cls._log_file_path}")
        logger.debug(f"Verbose mode: {verbose}")

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        """Get the current log file path."""
        return cls._log_file_path

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if logging has been initialized."""
        return cls._initialized

    @classmethod
    def get_handlers(cls) -> list[logging.Handler]:
        """Handlers installed by initialize(), console first."""
        return list(cls._handlers)

    @classmethod
    def reset(cls) -> None:
        """Close and detach the installed handlers so initialize() can run again."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in cls._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)
        cls._handlers = []
        cls._initialized = False
        cls._log_file_path = None
