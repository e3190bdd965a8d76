# src/agents_lint/config.py

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a validator configuration file cannot be used."""


@dataclass(frozen=True)
class ValidatorConfig:
    """Thresholds and weights for the validation rules.

    Immutable. Explicit. No magic defaults from environment.
    """

    # length
    max_lines: int = 200
    recommended_max_lines: int = 150
    min_lines: int = 5
    good_min_lines: int = 10

    # structure
    min_sections: int = 3
    inline_command_limit: int = 5
    long_section_lines: int = 50
    empty_section_chars: int = 10
    min_key_topics: int = 2

    # scoring
    high_penalty: int = 15
    medium_penalty: int = 8
    low_penalty: int = 3
    structure_bonus: int = 5

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{f.name} must be an integer")
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0")
        if self.recommended_max_lines > self.max_lines:
            raise ValueError("recommended_max_lines must be <= max_lines")
        if self.good_min_lines > self.recommended_max_lines:
            raise ValueError("good_min_lines must be <= recommended_max_lines")


DEFAULT_CONFIG = ValidatorConfig()


def load_config(path: str | Path) -> ValidatorConfig:
    """Load a YAML mapping of overrides on top of :data:`DEFAULT_CONFIG`.

    Raises:
        ConfigError: If the file is unreadable, is not a mapping, names an
            unknown key, or holds an invalid value.
    """
    file_path = Path(path)
    logger.info("Loading validator config from %s", file_path)
    try:
        with open(file_path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        logger.error("Cannot read config file: %s", file_path)
        raise ConfigError(f"Cannot read config file '{file_path}': {e}") from e
    except yaml.YAMLError as e:
        logger.error("Invalid YAML in config file: %s", file_path)
        raise ConfigError(f"Invalid YAML in '{file_path}': {e}") from e

    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{file_path}' must contain a mapping")

    known = {f.name for f in fields(ValidatorConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    try:
        config = replace(DEFAULT_CONFIG, **data)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    logger.info("Loaded validator config with %d overrides", len(data))
    return config
