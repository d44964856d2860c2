#!/usr/bin/env python3

"""Configuration for the metadata decoder components."""

import os

# Default configuration values
DEFAULT_CONFIG = {
    # Newest metadata version this reader was written against ("major.minor.patch")
    "BASELINE_VERSION": "1.9.0",

    # Directory for CLI log files
    "LOG_DIR": "logs",
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Every key can be overridden with a ``KMETA_`` prefixed environment
    variable, e.g. ``KMETA_BASELINE_VERSION=2.0.0``.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"KMETA_{key}")
        if env_value is not None:
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            elif isinstance(config[key], int):
                try:
                    config[key] = int(env_value)
                except ValueError:
                    pass
            else:
                config[key] = env_value

    return config


def get_baseline_version() -> tuple[int, int, int]:
    """Get the baseline metadata version as a ``(major, minor, patch)`` triple.

    Returns:
        Parsed baseline version

    Raises:
        ValueError: If the configured version is not three dot-separated integers
    """
    raw = get_config()["BASELINE_VERSION"]
    parts = raw.split(".")
    if len(parts) != 3:
        raise ValueError(f"Baseline version must look like 'major.minor.patch': {raw!r}")
    try:
        major, minor, patch = (int(part) for part in parts)
    except ValueError as e:
        raise ValueError(f"Baseline version has a non-numeric component: {raw!r}") from e
    return major, minor, patch
