"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from sbtctl.core.config import UserConfig


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An sbt workspace with an empty project/ directory."""
    root = tmp_path / "workspace"
    (root / "project").mkdir(parents=True)
    return root


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """A fake home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def config(tmp_path: Path, home_dir: Path) -> UserConfig:
    """User configuration isolated from the real home and cache."""
    return UserConfig(
        home_dir=home_dir,
        launcher_path=tmp_path / "sbt-launch.jar",
        java_home=Path("/opt/jdk"),
    )


def _write_build_properties(workspace: Path, content: str) -> Path:
    path = workspace / "project" / "build.properties"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def write_build_properties() -> Callable[[Path, str], Path]:
    """Writer for project/build.properties in a workspace."""
    return _write_build_properties


@pytest.fixture
def sbt_workspace(workspace: Path) -> Path:
    """A workspace pinning sbt 1.9.7 with a build.sbt."""
    (workspace / "build.sbt").write_text('scalaVersion := "3.3.1"\n')
    _write_build_properties(workspace, "sbt.version=1.9.7\n")
    return workspace
