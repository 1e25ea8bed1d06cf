"""Shared fixtures: every test renders with its own temporary directories."""
from pathlib import Path

import pytest

from raspipass.config import PACKAGE_DIR, Config, PathsConfig


@pytest.fixture
def paths(tmp_path) -> PathsConfig:
    return PathsConfig(
        base_dir=str(tmp_path),
        template_dir=str(PACKAGE_DIR / "templates"),
        version_file=str(tmp_path / "version"),
    )


@pytest.fixture
def config(paths) -> Config:
    return Config(paths=paths)


@pytest.fixture
def version_file(paths) -> Path:
    return Path(paths.version_file)
