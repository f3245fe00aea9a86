# Project tracker: configuration
# Override validation limits and logging via config.yaml, TRACKER_CONFIG or CLI args.

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class Config:
    """Runtime configuration for the project tracker."""

    # Form validation limits
    title_min_length: int = 2
    title_max_length: int = 30
    description_min_length: int = 5
    people_min: int = 1
    people_max: Optional[int] = None

    # Store
    max_id_attempts: int = 10

    # Logging
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML file, falling back to defaults."""
        path = path or os.environ.get("TRACKER_CONFIG")
        cfg_path = Path(path) if path else CONFIG_PATH
        if not cfg_path.exists():
            return cls()
        try:
            with open(cfg_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {cfg_path}: {e}. Using defaults.")
            return cls()
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {cfg_path}: expected a mapping at top level")
            return cls()

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(map(str, unknown)))}")

        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if not _matches_type(key, value):
                logger.warning(f"Ignoring config key {key!r}: {value!r} is not {_FIELD_TYPES[key]}")
                continue
            values[key] = value
        return cls(**values)


# Expected YAML value type per key; None is only allowed where listed
_FIELD_TYPES = {
    "title_min_length": "an integer",
    "title_max_length": "an integer",
    "description_min_length": "an integer",
    "people_min": "an integer",
    "people_max": "an integer or null",
    "max_id_attempts": "an integer",
    "log_level": "a string",
}


def _matches_type(key: str, value) -> bool:
    expected = _FIELD_TYPES[key]
    if value is None:
        return expected.endswith("or null")
    if expected == "a string":
        return isinstance(value, str)
    return isinstance(value, int) and not isinstance(value, bool)
