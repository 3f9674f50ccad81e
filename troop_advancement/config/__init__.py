"""Configuration module for the advancement engine.

Available Configurations:
- AdvancementConfig: Commit retry policy
"""

from troop_advancement.config.advancement_config import (
    DEFAULT_ADVANCEMENT_CONFIG,
    TEST_ADVANCEMENT_CONFIG,
    AdvancementConfig,
)

__all__ = [
    "AdvancementConfig",
    "DEFAULT_ADVANCEMENT_CONFIG",
    "TEST_ADVANCEMENT_CONFIG",
]
