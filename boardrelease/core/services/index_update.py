"""
Index mutation — build the new platform record and put it first.

Board-manager clients treat the first platform entry as the default
candidate, so new releases are prepended, never appended.
"""

from __future__ import annotations

import logging

from boardrelease.core.models.config import ReleaseConfig
from boardrelease.core.models.platform import Board, HelpLinks, PlatformRecord
from boardrelease.core.services.digest import ArchiveDigest
from boardrelease.core.services.index_file import get_platforms

logger = logging.getLogger(__name__)


def build_platform_record(
    config: ReleaseConfig,
    version: str,
    archive_name: str,
    digest: ArchiveDigest,
) -> PlatformRecord:
    """Assemble a platform record from config metadata and release outputs."""
    meta = config.platform
    return PlatformRecord(
        name=meta.name,
        architecture=meta.architecture,
        version=version,
        category=meta.category,
        url=meta.download_url(archive_name),
        archive_file_name=archive_name,
        checksum=digest.checksum,
        size=digest.size,
        help=HelpLinks(online=meta.help_online),
        boards=[Board(name=b) for b in meta.boards],
    )


def prepend_platform(data: dict, record: PlatformRecord, package: int = 0) -> int:
    """Insert ``record`` at position 0 of ``packages[package].platforms``.

    Returns:
        The new number of platform records.
    """
    platforms = get_platforms(data, package)
    platforms.insert(0, record.to_index_entry())
    logger.info("Prepended %s %s (%d platforms)", record.name, record.version, len(platforms))
    return len(platforms)
