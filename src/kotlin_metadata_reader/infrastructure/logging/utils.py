#!/usr/bin/env python3

"""Logging utility functions and decorators."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

# Type variable for generic function decoration
F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator to log execution time of a function.

    Decoding a class usually takes microseconds, so timings are reported in
    milliseconds.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function that logs timing
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__

        logger.debug(f"Starting {func_name}")
        start_time = perf_counter()

        try:
            result = func(*args, **kwargs)
            elapsed_ms = (perf_counter() - start_time) * 1000
            logger.debug(f"Completed {func_name} in {elapsed_ms:.3f}ms")
            return result
        except Exception as e:
            elapsed_ms = (perf_counter() - start_time) * 1000
            logger.error(f"Failed {func_name} after {elapsed_ms:.3f}ms: {e}")
            raise

    return cast("F", wrapper)
