"""
Version derivation for platform records.

Versions are dot-joined digits read as one concatenated integer, not
major.minor.patch: "1.2.3" is 123.  The next version is that integer
plus one, re-split digit by digit.  A carry grows the digit count
("9.9.9" -> "1.0.0.0") and that is kept as is.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_VERSION_FLOOR = "0.9.9"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def version_to_int(version: str) -> int | None:
    """Strip dots and parse the leading base-10 integer.

    Trailing non-digits are ignored ("1.2.3-rc1" -> 123).  Returns None
    when no digits lead the string.
    """
    match = _LEADING_INT.match(version.replace(".", ""))
    if match is None:
        return None
    return int(match.group(1))


def find_latest_version(
    versions: Iterable[str],
    floor: str = DEFAULT_VERSION_FLOOR,
) -> str:
    """Return the version with the largest integer value.

    Scanning starts from ``floor``.  A candidate wins only when strictly
    greater, so on ties the earlier one stays.  Unparseable versions
    never win.
    """
    latest = floor
    latest_num = version_to_int(floor)

    for version in versions:
        num = version_to_int(version)
        if num is None:
            logger.warning("Ignoring unparseable version %r", version)
            continue
        if latest_num is None or num > latest_num:
            latest, latest_num = version, num

    return latest


def next_version(version: str) -> str:
    """Increment a version by one at the integer level.

    >>> next_version("1.2.3")
    '1.2.4'
    >>> next_version("9.9.9")
    '1.0.0.0'
    """
    num = version_to_int(version)
    if num is None:
        raise ValueError(f"Not a numeric version: {version!r}")
    return ".".join(str(num + 1))


def derive_next_version(
    platforms: list[dict],
    floor: str = DEFAULT_VERSION_FLOOR,
) -> tuple[str, str]:
    """Pick the latest version among platform records and bump it.

    Returns:
        (latest, next) version strings.
    """
    versions = [str(p.get("version", "")) for p in platforms]
    latest = find_latest_version(versions, floor=floor)
    new = next_version(latest)
    logger.info("Latest version %s -> next %s (%d records scanned)", latest, new, len(versions))
    return latest, new
