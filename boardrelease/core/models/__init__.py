"""
Domain models — Pydantic types for release configuration and the index.

    from boardrelease.core.models import ReleaseConfig, PlatformRecord
"""

from boardrelease.core.models.config import PlatformMetadata, ReleaseConfig
from boardrelease.core.models.platform import Board, HelpLinks, PlatformRecord

__all__ = [
    # platform.py
    "Board",
    "HelpLinks",
    "PlatformRecord",
    # config.py
    "PlatformMetadata",
    "ReleaseConfig",
]
