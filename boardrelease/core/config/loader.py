"""
Configuration loader — reads release.yml into a ReleaseConfig.

The file is optional.  Without one, the defaults of ReleaseConfig
describe the stock LGT8fx release and paths resolve against the
working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from boardrelease.core.models.config import ReleaseConfig

logger = logging.getLogger(__name__)

# Default config filename
RELEASE_CONFIG_FILE = "release.yml"


class ConfigError(Exception):
    """Raised when release configuration is invalid or unreadable."""


def find_release_file(start_dir: Path | None = None) -> Path | None:
    """Search for release.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to release.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / RELEASE_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path | None = None) -> ReleaseConfig:
    """Load and validate release configuration.

    Args:
        path: Explicit path to release.yml.  If None, searches upward and
            falls back to the built-in defaults when nothing is found.

    Returns:
        Validated ReleaseConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_release_file()
        if path is None:
            logger.debug("No %s found — using built-in defaults", RELEASE_CONFIG_FILE)
            return ReleaseConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading release config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Accept either a flat file or one wrapped under a "release" key
    release_data = data.get("release", data)
    if not isinstance(release_data, dict):
        raise ConfigError(f"Expected 'release' to be a mapping in {path}")

    try:
        config = ReleaseConfig.model_validate(release_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid release configuration: {e}") from e

    logger.info(
        "Loaded release config for '%s' (%d boards)",
        config.platform.name,
        len(config.platform.boards),
    )
    return config


def release_root(config_path: Path | None) -> Path:
    """Directory that relative paths in the config are resolved against."""
    if config_path is None:
        return Path.cwd().resolve()
    return config_path.parent.resolve()
