"""Archive size and checksum in the form the board manager expects."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path

from boardrelease.core.services.errors import DigestError

logger = logging.getLogger(__name__)

CHECKSUM_PREFIX = "SHA-256:"
_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class ArchiveDigest:
    size: str
    checksum: str


def sha256_file(path: Path) -> str:
    """Hex SHA-256 of a file, read in chunks."""
    sha = hashlib.sha256()
    with path.open("rb") as fh:
        while chunk := fh.read(_CHUNK_SIZE):
            sha.update(chunk)
    return sha.hexdigest()


def compute_digest(path: Path) -> ArchiveDigest:
    """Measure ``path`` and hash it.

    Returns:
        ArchiveDigest with the byte size as a decimal string and the
        checksum as ``SHA-256:<64 hex chars>``.
    """
    try:
        size = str(path.stat().st_size)
        checksum = CHECKSUM_PREFIX + sha256_file(path)
    except OSError as e:
        raise DigestError(f"Cannot digest {path}: {e}") from e

    logger.debug("Digest of %s: size=%s checksum=%s", path.name, size, checksum)
    return ArchiveDigest(size=size, checksum=checksum)
