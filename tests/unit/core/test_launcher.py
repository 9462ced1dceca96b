"""Unit tests for launcher inputs."""

import os
from pathlib import Path
from unittest.mock import patch

from sbtctl.core.launcher import java_binary, read_option_file, workspace_options


class TestJavaBinary:
    """Tests for java_binary function."""

    def test_configured_java_home(self) -> None:
        """A configured JDK home takes precedence over JAVA_HOME."""
        with patch.dict(os.environ, {"JAVA_HOME": "/env/jdk"}):
            result = java_binary(Path("/opt/jdk"))

        assert result == str(Path("/opt/jdk/bin/java"))

    def test_java_home_env(self) -> None:
        """JAVA_HOME is used when no JDK home is configured."""
        with patch.dict(os.environ, {"JAVA_HOME": "/env/jdk"}):
            result = java_binary(None)

        assert result == str(Path("/env/jdk/bin/java"))

    def test_falls_back_to_path(self) -> None:
        """Plain 'java' is returned when no JDK home is known."""
        with patch.dict(os.environ, {}, clear=True):
            result = java_binary(None)

        assert result == "java"


class TestReadOptionFile:
    """Tests for read_option_file function."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing option file yields no arguments."""
        assert read_option_file(tmp_path / ".sbtopts") == []

    def test_one_argument_per_line(self, tmp_path: Path) -> None:
        """Non-empty lines are stripped and kept in order."""
        path = tmp_path / ".jvmopts"
        path.write_text("  -Xmx2G\n\n-Xss4M  \n   \n-XX:+UseG1GC\n")

        assert read_option_file(path) == ["-Xmx2G", "-Xss4M", "-XX:+UseG1GC"]


class TestWorkspaceOptions:
    """Tests for workspace_options function."""

    def test_sbtopts_before_jvmopts(self, workspace: Path) -> None:
        """.sbtopts lines come before .jvmopts lines."""
        (workspace / ".jvmopts").write_text("-Xmx2G\n")
        (workspace / ".sbtopts").write_text("-Dsbt.server.forcestart=true\n")

        assert workspace_options(workspace) == ["-Dsbt.server.forcestart=true", "-Xmx2G"]

    def test_no_option_files(self, workspace: Path) -> None:
        """A workspace without option files yields no arguments."""
        assert workspace_options(workspace) == []
