"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest

SAMPLE_INDEX = {
    "packages": [
        {
            "name": "lgt8fx",
            "maintainer": "dbuezas",
            "websiteURL": "https://github.com/dbuezas/lgt8fx",
            "email": "",
            "help": {"online": "https://github.com/dbuezas/lgt8fx/issues"},
            "platforms": [
                {
                    "name": "LGT8fx Boards",
                    "architecture": "avr",
                    "version": "1.0.0",
                    "category": "lgt8fx",
                    "url": "https://raw.githubusercontent.com/dbuezas/lgt8fx/master/lgt8f-1.0.0.zip",
                    "archiveFileName": "lgt8f-1.0.0.zip",
                    "checksum": "SHA-256:" + "0" * 64,
                    "size": "100",
                    "help": {"online": "https://github.com/dbuezas/LGT8fx/isues"},
                    "boards": [{"name": "LGT8F328D"}],
                },
                {
                    "name": "LGT8fx Boards",
                    "architecture": "avr",
                    "version": "2.5.0",
                    "category": "lgt8fx",
                    "url": "https://raw.githubusercontent.com/dbuezas/lgt8fx/master/lgt8f-2.5.0.zip",
                    "archiveFileName": "lgt8f-2.5.0.zip",
                    "checksum": "SHA-256:" + "1" * 64,
                    "size": "200",
                    "help": {"online": "https://github.com/dbuezas/LGT8fx/isues"},
                    "boards": [{"name": "LGT8F328D"}],
                },
            ],
            "tools": [],
        }
    ]
}


@pytest.fixture
def sample_index() -> dict:
    """A fresh deep copy of the sample index document."""
    return json.loads(json.dumps(SAMPLE_INDEX))


@pytest.fixture
def release_dir(tmp_path: Path, sample_index: dict) -> Path:
    """A working directory with an index file and a small board folder."""
    (tmp_path / "package_lgt8fx_index.json").write_text(
        json.dumps(sample_index, indent=2), encoding="utf-8"
    )

    folder = tmp_path / "lgt8f"
    (folder / "cores" / "lgt8f").mkdir(parents=True)
    (folder / "boards.txt").write_text("lgt8fx8p.name=LGT8F328P\n")
    (folder / "platform.txt").write_text("name=LGT8fx Boards\nversion=2.5.0\n")
    (folder / "cores" / "lgt8f" / "main.cpp").write_text("int main(void) { return 0; }\n")
    return tmp_path
