"""
Config check use case — validate release.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from boardrelease.core.config.loader import ConfigError, find_release_file, load_config, release_root
from boardrelease.core.models.config import ReleaseConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: ReleaseConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "platform_name": self.config.platform.name if self.config else None,
            "board_count": len(self.config.platform.boards) if self.config else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate release configuration and report issues.

    A missing release.yml is not an error: the built-in defaults apply
    and a warning says so.

    Args:
        config_path: Optional explicit path to release.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_release_file()
    result.config_path = config_path

    if config_path is None:
        result.warnings.append("No release.yml found — using built-in defaults.")

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    boards = config.platform.boards
    if not boards:
        result.errors.append("No boards listed under platform.boards.")

    dupes = {b for b in boards if boards.count(b) > 1}
    if dupes:
        result.errors.append(f"Duplicate board names: {', '.join(sorted(dupes))}")

    if not config.platform.url_base.endswith("/"):
        result.warnings.append(
            f"platform.url_base does not end with '/': {config.platform.url_base}"
        )

    root = release_root(config_path)
    if not (root / config.index_file).is_file():
        result.warnings.append(f"Package index does not exist: {config.index_file}")
    if not (root / config.folder).is_dir():
        result.warnings.append(f"Board folder does not exist: {config.folder}")

    result.valid = len(result.errors) == 0
    return result
