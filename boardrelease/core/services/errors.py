"""Release pipeline errors.

Every stage raises a ``ReleaseError`` subclass; the release use case
turns it into ``ReleaseResult.error``.
"""

from __future__ import annotations


class ReleaseError(Exception):
    """Base class for failures while cutting a release."""


class IndexFileError(ReleaseError):
    """The package index is missing, unreadable, or malformed."""


class ArchiveError(ReleaseError):
    """The board folder could not be archived."""


class DigestError(ReleaseError):
    """The archive could not be measured or hashed."""
