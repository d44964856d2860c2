"""Configuration management for the metadata reader CLI."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .metadata_config import get_config


@dataclass
class Config:
    """Configuration for the metadata reader CLI."""

    header_file: Path
    method_signature: Optional[str] = None
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        header_file_str = os.getenv("KMETA_HEADER_FILE", "metadata.json")
        method_signature = os.getenv("KMETA_METHOD") or None
        verbose_str = os.getenv("VERBOSE", "false").lower()

        return cls(
            header_file=Path(header_file_str),
            method_signature=method_signature,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(get_config()["LOG_DIR"]),
        )

    @classmethod
    def from_args(
        cls,
        header_file: Optional[Path] = None,
        method_signature: Optional[str] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            header_file: Path to the JSON header file (overrides env)
            method_signature: JVM method key to query (overrides env)
            verbose: Enable verbose output (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if header_file is not None:
            config.header_file = header_file
        if method_signature is not None:
            config.method_signature = method_signature
        if verbose is not None:
            config.verbose = verbose

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.header_file.exists():
            raise ValueError(f"Header file not found: {self.header_file}")

        if not self.header_file.is_file():
            raise ValueError(f"Not a file: {self.header_file}")

        if self.method_signature is not None and "(" not in self.method_signature:
            raise ValueError(
                f"Method signature must include a descriptor, e.g. 'foo(I)V': "
                f"{self.method_signature}"
            )
