"""
Release configuration — what gets released and how it is described.

Loaded from release.yml.  Every field defaults to the LGT8fx core
values, so an absent file reproduces the stock release.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BOARDS = [
    "LGT8F328P-LQFP48 MiniEVB",
    "LGT8F328P-LQFP32 MiniEVB",
    "LGT8F328D",
    "LGT8F328D-SSOP20",
    "LGT8F88D-SSOP20",
]


class PlatformMetadata(BaseModel):
    """Static fields copied into every new platform record."""

    model_config = ConfigDict(extra="forbid")

    name: str = "LGT8fx Boards"
    architecture: str = "avr"
    category: str = "lgt8fx"
    url_base: str = "https://raw.githubusercontent.com/dbuezas/lgt8fx/master/"
    help_online: str = "https://github.com/dbuezas/LGT8fx/isues"
    boards: list[str] = Field(default_factory=lambda: list(DEFAULT_BOARDS))

    def download_url(self, archive_name: str) -> str:
        """Public URL the board manager downloads the archive from."""
        return self.url_base + archive_name


class ReleaseConfig(BaseModel):
    """Root release configuration.

    Paths are relative to the directory holding release.yml.
    """

    model_config = ConfigDict(extra="forbid")

    index_file: str = "package_lgt8fx_index.json"
    folder: str = "lgt8f"
    package: int = Field(default=0, ge=0)
    version_floor: str = "0.9.9"
    platform: PlatformMetadata = Field(default_factory=PlatformMetadata)

    @field_validator("version_floor")
    @classmethod
    def _floor_is_dotted_digits(cls, value: str) -> str:
        if not re.fullmatch(r"\d+(\.\d+)*", value):
            raise ValueError(f"version_floor must be dot-separated digits, got {value!r}")
        return value
