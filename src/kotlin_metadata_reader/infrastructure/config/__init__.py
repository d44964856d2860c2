"""Infrastructure configuration module."""

from .application_config import Config
from .metadata_config import get_baseline_version, get_config

__all__ = ["Config", "get_baseline_version", "get_config"]
