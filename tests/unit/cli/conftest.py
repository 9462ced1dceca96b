"""Fixtures for CLI command tests."""

from pathlib import Path

import pytest
from sbtctl.core.config import UserConfig, save_config


@pytest.fixture
def config_file(tmp_path: Path, config: UserConfig) -> Path:
    """A config file pointing at the isolated home and launcher."""
    return save_config(config, tmp_path / "config" / "config.toml")
