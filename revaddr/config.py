"""Configuration module for the revaddr conversion tool.

Loads and validates environment variables.
"""

import os
from dataclasses import dataclass


OUTPUT_FORMATS = ("json", "yaml")

_TRUE_VALUES = ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Output Configuration
    output_format: str

    # PTR Lookup Configuration
    resolve_ptr: bool
    dns_timeout: int
    dns_concurrency: int

    # Operational Configuration
    verbose: bool

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If variables are invalid.

        Returns:
            Config: Validated configuration instance.
        """
        output_format = os.getenv("OUTPUT_FORMAT", "json").strip().lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}"
            )

        resolve_ptr = cls._get_bool_env("RESOLVE_PTR", "false")

        dns_timeout = cls._get_int_env("DNS_TIMEOUT", "5")
        if not 1 <= dns_timeout <= 60:
            raise ValueError("DNS_TIMEOUT must be between 1 and 60 seconds")

        dns_concurrency = cls._get_int_env("DNS_CONCURRENCY", "10")
        if not 1 <= dns_concurrency <= 100:
            raise ValueError("DNS_CONCURRENCY must be between 1 and 100")

        verbose = cls._get_bool_env("VERBOSE", "false")

        return cls(
            output_format=output_format,
            resolve_ptr=resolve_ptr,
            dns_timeout=dns_timeout,
            dns_concurrency=dns_concurrency,
            verbose=verbose,
        )

    @staticmethod
    def _get_bool_env(key: str, default: str) -> bool:
        return os.getenv(key, default).lower() in _TRUE_VALUES

    @staticmethod
    def _get_int_env(key: str, default: str) -> int:
        """Get integer environment variable or raise ValueError.

        Args:
            key: Environment variable name.
            default: Value used when the variable is not set.

        Returns:
            int: Parsed value.

        Raises:
            ValueError: If the value is not an integer.
        """
        value = os.getenv(key, default)
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"{key} must be an integer, got {value!r}") from e
