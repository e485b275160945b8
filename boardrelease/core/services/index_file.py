"""
Package index file I/O — load with backup, atomic save, restore.

The raw bytes are copied to ``<index>.bak`` before anything is parsed
or mutated.  That copy is the manual recovery path; ``restore_index``
puts it back.  Saves go to a temp file in the same directory and are
renamed over the index, so a crash never leaves a half-written file.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from boardrelease.core.services.errors import IndexFileError

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


@dataclass
class LoadedIndex:
    """A parsed index together with the bytes it was parsed from."""

    path: Path
    raw: bytes
    data: dict
    backup_path: Path | None = None


def backup_path_for(path: Path) -> Path:
    """``package_index.json`` -> ``package_index.json.bak``."""
    return path.with_name(path.name + BACKUP_SUFFIX)


def backup_index(path: Path, raw: bytes) -> Path:
    """Write ``raw`` to the backup file next to ``path``, replacing any old one."""
    bak = backup_path_for(path)
    try:
        bak.write_bytes(raw)
    except OSError as e:
        raise IndexFileError(f"Cannot write backup {bak}: {e}") from e
    logger.info("Backed up %s (%d bytes) to %s", path.name, len(raw), bak.name)
    return bak


def _read_raw(path: Path) -> bytes:
    if not path.is_file():
        raise IndexFileError(f"Package index not found: {path}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise IndexFileError(f"Cannot read {path}: {e}") from e


def read_index(path: Path) -> LoadedIndex:
    """Read and parse the index without touching the backup."""
    raw = _read_raw(path)
    return LoadedIndex(path=path, raw=raw, data=parse_index(raw, path))


def load_index(path: Path) -> LoadedIndex:
    """Read the index, back up its raw bytes, then parse it.

    Raises:
        IndexFileError: missing, unreadable, or not a package index.
    """
    raw = _read_raw(path)
    bak = backup_index(path, raw)
    data = parse_index(raw, path)
    return LoadedIndex(path=path, raw=raw, data=data, backup_path=bak)


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a JSON value")


def parse_index(raw: bytes, path: Path | None = None) -> dict:
    """Decode index bytes and check the ``packages`` shape.

    ``NaN`` and ``Infinity`` are rejected; they are not JSON.
    """
    where = f" in {path}" if path else ""
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        raise IndexFileError(f"Invalid JSON{where}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("packages"), list):
        raise IndexFileError(f"Expected an object with a 'packages' list{where}")
    return data


def get_platforms(data: dict, package: int = 0) -> list[dict]:
    """Return the live ``platforms`` list of ``packages[package]``.

    A package without a ``platforms`` key gets an empty list attached.
    """
    packages = data.get("packages", [])
    if package >= len(packages):
        raise IndexFileError(
            f"Package #{package} not in index ({len(packages)} package(s))"
        )
    entry = packages[package]
    if not isinstance(entry, dict):
        raise IndexFileError(f"Package #{package} is not an object")

    platforms = entry.setdefault("platforms", [])
    if not isinstance(platforms, list):
        raise IndexFileError(f"Package #{package} 'platforms' is not a list")
    return platforms


def dump_index(data: dict) -> str:
    """Serialize the index: 2-space indent, non-ASCII left as is.

    Lone surrogates cannot be written as UTF-8; a document holding one
    is escaped to ASCII instead.  Non-finite floats raise ValueError.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    try:
        content.encode("utf-8")
    except UnicodeEncodeError:
        logger.debug("Index holds unpaired surrogates — writing ASCII-escaped")
        content = json.dumps(data, indent=2, ensure_ascii=True, allow_nan=False)
    return content


def save_index(data: dict, path: Path) -> None:
    """Write the index to ``path`` (atomic write).

    Uses write-to-temp-then-rename.  The backup file is not touched.
    """
    try:
        content = dump_index(data)
    except ValueError as e:
        raise IndexFileError(f"Cannot serialize index for {path}: {e}") from e

    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=".index_",
            suffix=".tmp",
        )
        tmp = Path(tmp_path)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(content)
            if path.exists():
                os.chmod(tmp, path.stat().st_mode & 0o777)
            tmp.replace(path)
            logger.debug("Index saved to %s", path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.error("Failed to save index to %s: %s", path, e)
        raise IndexFileError(f"Cannot write {path}: {e}") from e


def restore_index(path: Path) -> Path:
    """Copy ``<path>.bak`` back over ``path``.

    Returns:
        The backup path that was restored from.
    """
    bak = backup_path_for(path)
    if not bak.is_file():
        raise IndexFileError(f"No backup to restore: {bak}")

    try:
        shutil.copyfile(bak, path)
    except OSError as e:
        raise IndexFileError(f"Cannot restore {path} from {bak}: {e}") from e

    logger.info("Restored %s from %s", path.name, bak.name)
    return bak
