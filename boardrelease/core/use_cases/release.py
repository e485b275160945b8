"""
Release use case — cut one board-support release.

Stages run once, in order, and the first failure stops the run:

    1. load index   (raw bytes backed up to <index>.bak)
    2. derive next version
    3. archive the board folder
    4. size + checksum the archive
    5. prepend the platform record and rewrite the index
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from boardrelease.core.config.loader import (
    ConfigError,
    find_release_file,
    load_config,
    release_root,
)
from boardrelease.core.models.config import ReleaseConfig
from boardrelease.core.services.archive import archive_name_for, create_archive
from boardrelease.core.services.digest import compute_digest
from boardrelease.core.services.errors import ReleaseError
from boardrelease.core.services.index_file import (
    get_platforms,
    load_index,
    read_index,
    save_index,
)
from boardrelease.core.services.index_update import build_platform_record, prepend_platform
from boardrelease.core.services.versioning import derive_next_version

logger = logging.getLogger(__name__)


@dataclass
class ReleaseResult:
    """Outcome of a release run."""

    config: ReleaseConfig | None = None
    root: Path | None = None
    dry_run: bool = False
    error: str | None = None

    previous_version: str = ""
    version: str = ""
    archive_name: str = ""
    archive_path: Path | None = None
    size: str = ""
    checksum: str = ""
    index_path: Path | None = None
    backup_path: Path | None = None
    platform_count: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}

        return {
            "dry_run": self.dry_run,
            "previous_version": self.previous_version,
            "version": self.version,
            "archive": self.archive_name,
            "archive_path": str(self.archive_path) if self.archive_path else None,
            "size": self.size,
            "checksum": self.checksum,
            "index": str(self.index_path) if self.index_path else None,
            "backup": str(self.backup_path) if self.backup_path else None,
            "platforms": self.platform_count,
        }


def resolve_config(config_path: Path | None) -> tuple[ReleaseConfig, Path]:
    """Load config and the root its relative paths hang off."""
    if config_path is None:
        config_path = find_release_file()
    config = load_config(config_path)
    return config, release_root(config_path)


def run_release(config_path: Path | None = None, dry_run: bool = False) -> ReleaseResult:
    """Run the release pipeline.

    Args:
        config_path: Optional explicit path to release.yml.
        dry_run: Only derive the next version; write nothing.

    Returns:
        ReleaseResult.  ``error`` is set when a stage failed.
    """
    result = ReleaseResult(dry_run=dry_run)

    try:
        config, root = resolve_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.config = config
    result.root = root
    result.index_path = root / config.index_file

    try:
        _run_stages(result, config, root)
    except ReleaseError as e:
        logger.info("Release failed: %s", e)
        result.error = str(e)

    return result


def _run_stages(result: ReleaseResult, config: ReleaseConfig, root: Path) -> None:
    assert result.index_path is not None

    if result.dry_run:
        loaded = read_index(result.index_path)
    else:
        loaded = load_index(result.index_path)
        result.backup_path = loaded.backup_path

    platforms = get_platforms(loaded.data, config.package)
    result.previous_version, result.version = derive_next_version(
        platforms, floor=config.version_floor
    )
    result.archive_name = archive_name_for(config.folder, result.version)
    result.platform_count = len(platforms)

    if result.dry_run:
        logger.info("Dry run — next release would be %s", result.archive_name)
        return

    archive_path = create_archive(root, config.folder, result.version)
    result.archive_path = archive_path

    digest = compute_digest(archive_path)
    result.size = digest.size
    result.checksum = digest.checksum

    record = build_platform_record(config, result.version, result.archive_name, digest)
    result.platform_count = prepend_platform(loaded.data, record, config.package)
    save_index(loaded.data, result.index_path)

    logger.info("Released %s %s", config.platform.name, result.version)
