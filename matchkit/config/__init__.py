"""Config module for matchkit."""

from matchkit.config.schema import DiffConfig, MatchkitConfig
from matchkit.config.loader import (
    get_config_hash,
    get_config_summary,
    load_config,
    validate_config,
)

__all__ = [
    "DiffConfig",
    "MatchkitConfig",
    "get_config_hash",
    "get_config_summary",
    "load_config",
    "validate_config",
]
