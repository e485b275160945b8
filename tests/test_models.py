"""
Tests for domain models — config defaults and platform records.
"""

import pytest
from pydantic import ValidationError

from boardrelease.core.models import Board, HelpLinks, PlatformRecord, ReleaseConfig


class TestReleaseConfig:
    def test_defaults(self):
        config = ReleaseConfig()
        assert config.index_file == "package_lgt8fx_index.json"
        assert config.folder == "lgt8f"
        assert config.package == 0
        assert len(config.platform.boards) == 5

    def test_boards_not_shared(self):
        a, b = ReleaseConfig(), ReleaseConfig()
        a.platform.boards.append("Extra")
        assert "Extra" not in b.platform.boards

    def test_floor_validated(self):
        with pytest.raises(ValidationError):
            ReleaseConfig(version_floor="1.x")

    def test_download_url(self):
        assert ReleaseConfig().platform.download_url("lgt8f-1.0.0.zip").endswith(
            "/master/lgt8f-1.0.0.zip"
        )


class TestPlatformRecord:
    def _record(self) -> PlatformRecord:
        return PlatformRecord(
            name="LGT8fx Boards",
            architecture="avr",
            version="1.0.0",
            category="lgt8fx",
            url="https://example.com/lgt8f-1.0.0.zip",
            archiveFileName="lgt8f-1.0.0.zip",
            checksum="SHA-256:" + "f" * 64,
            size="10",
            help=HelpLinks(online="https://example.com"),
            boards=[Board(name="LGT8F328D")],
        )

    def test_alias_and_field_name(self):
        record = self._record()
        assert record.archive_file_name == "lgt8f-1.0.0.zip"
        assert record.to_index_entry()["archiveFileName"] == "lgt8f-1.0.0.zip"
        assert "archive_file_name" not in record.to_index_entry()

    def test_parses_index_entry(self):
        record = self._record()
        assert PlatformRecord.model_validate(record.to_index_entry()) == record

    def test_frozen(self):
        record = self._record()
        with pytest.raises(ValidationError):
            record.version = "2.0.0"
