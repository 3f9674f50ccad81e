"""Advancement engine configuration.

Controls how the workflow service retries conditional commits that lose
a race against another writer.

Environment Variables:
- ADVANCEMENT_COMMIT_MAX_ATTEMPTS: Attempts before giving up (default: 5)
- ADVANCEMENT_BACKOFF_BASE_SECONDS: First retry delay (default: 0.05)
- ADVANCEMENT_BACKOFF_MAX_SECONDS: Upper bound on a retry delay (default: 1.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class AdvancementConfig:
    """Retry policy for conflicting commits.

    Attributes:
        commit_max_attempts: Total attempts (first try included) before
                             CommitRetriesExhaustedError. Default: 5.
        backoff_base_seconds: Delay before the first retry; doubles on each
                              following retry. Default: 0.05 seconds.
        backoff_max_seconds: Cap on a single retry delay. Default: 1.0 second.
    """

    commit_max_attempts: int = 5
    backoff_base_seconds: float = 0.05
    backoff_max_seconds: float = 1.0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.commit_max_attempts < 1:
            raise ValueError(
                f"commit_max_attempts must be at least 1, got {self.commit_max_attempts}"
            )
        if self.backoff_base_seconds < 0:
            raise ValueError(
                f"backoff_base_seconds must be non-negative, got {self.backoff_base_seconds}"
            )
        if self.backoff_max_seconds < self.backoff_base_seconds:
            raise ValueError(
                f"backoff_max_seconds ({self.backoff_max_seconds}) must not be less "
                f"than backoff_base_seconds ({self.backoff_base_seconds})"
            )

    @classmethod
    def from_environment(cls) -> "AdvancementConfig":
        """Create config from environment variables with defaults.

        Returns:
            AdvancementConfig with values from environment or defaults.
        """
        return cls(
            commit_max_attempts=_get_int_env("ADVANCEMENT_COMMIT_MAX_ATTEMPTS", 5),
            backoff_base_seconds=_get_float_env("ADVANCEMENT_BACKOFF_BASE_SECONDS", 0.05),
            backoff_max_seconds=_get_float_env("ADVANCEMENT_BACKOFF_MAX_SECONDS", 1.0),
        )


# Default production config
DEFAULT_ADVANCEMENT_CONFIG = AdvancementConfig()

# Testing config: retries happen immediately
TEST_ADVANCEMENT_CONFIG = AdvancementConfig(
    commit_max_attempts=5,
    backoff_base_seconds=0.0,
    backoff_max_seconds=0.0,
)
