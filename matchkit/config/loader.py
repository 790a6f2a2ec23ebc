"""Config loading and validation for matchkit."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from matchkit.config.schema import MatchkitConfig
from matchkit.serializer.canonical import compute_hash, serialize_to_json

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> MatchkitConfig:
    """Load config from YAML file or return defaults.

    Args:
        path: Path to YAML config file (optional)

    Returns:
        Loaded MatchkitConfig

    Raises:
        yaml.YAMLError: If the file is not valid YAML
        pydantic.ValidationError: If the content doesn't fit the schema
    """
    if path is None or not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return MatchkitConfig()

    content = path.read_text(encoding="utf-8")
    data = yaml.safe_load(content) or {}

    logger.debug(f"Loaded config from {path}")
    return MatchkitConfig(**data)


def validate_config(path: Path) -> tuple[bool, list[str]]:
    """Validate config file.

    Args:
        path: Path to config file

    Returns:
        Tuple of (is_valid, list of errors)
    """
    if not path.exists():
        return False, [f"Config file not found: {path}"]

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            return False, [f"Config root must be a mapping, got {type(data).__name__}"]

        MatchkitConfig(**data)
        return True, []

    except yaml.YAMLError as e:
        logger.warning(f"Invalid YAML in {path}: {e}")
        return False, [f"Invalid YAML: {e}"]
    except ValidationError as e:
        logger.warning(f"Invalid config in {path}")
        return False, [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]


def get_config_hash(config: MatchkitConfig) -> str:
    """Get hash of config for change detection.

    Args:
        config: Config to hash

    Returns:
        Short hash string
    """
    return compute_hash(serialize_to_json(config))[:12]


def get_config_summary(config: MatchkitConfig) -> dict:
    """Get summary of config.

    Args:
        config: Config to summarize

    Returns:
        Summary dict
    """
    return {
        "config_hash": get_config_hash(config),
        "context_lines": config.diff.context_lines,
        "max_edit_distance": config.diff.max_edit_distance,
    }
