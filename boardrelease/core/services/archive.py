"""
Board folder archiving — ``{folder}-{version}.zip``.

Produces the same layout as ``zip -r <archive> <folder>``: every
directory and file under the folder, stored with paths rooted at the
folder name.  Entries are written in sorted order.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from boardrelease.core.services.errors import ArchiveError

logger = logging.getLogger(__name__)


def archive_name_for(folder: str, version: str) -> str:
    return f"{folder}-{version}.zip"


def create_archive(root: Path, folder: str, version: str) -> Path:
    """Compress ``root/folder`` into ``root/{folder}-{version}.zip``.

    An existing archive with the same name is replaced.

    Raises:
        ArchiveError: if the folder is missing or the zip cannot be written.
    """
    source = root / folder
    if not source.is_dir():
        raise ArchiveError(f"Board folder not found: {source}")

    archive_path = root / archive_name_for(folder, version)
    entries = sorted(source.rglob("*"))

    file_count = 0
    try:
        with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.write(source, arcname=folder)
            for entry in entries:
                arcname = entry.relative_to(root).as_posix()
                zf.write(entry, arcname=arcname)
                if entry.is_file():
                    file_count += 1
    except OSError as e:
        archive_path.unlink(missing_ok=True)
        raise ArchiveError(f"Cannot create {archive_path.name}: {e}") from e

    logger.info("Archived %d file(s) from %s into %s", file_count, folder, archive_path.name)
    return archive_path
