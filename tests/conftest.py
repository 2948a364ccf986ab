from __future__ import annotations

from pathlib import Path
import pytest

from jsonconf.config_store import ConfigStore


@pytest.fixture()
def files_dir(tmp_path: Path) -> Path:
    """
    stands in for an application's private storage directory.
    """
    d = tmp_path / "files"
    d.mkdir()
    return d


@pytest.fixture()
def store(files_dir: Path) -> ConfigStore:
    return ConfigStore(files_dir)
