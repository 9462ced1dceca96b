"""Inputs for launching sbt through its launcher jar.

Resolves the java binary and reads the option files a workspace can use
to pass extra arguments to sbt and the JVM.
"""

import logging
import os
from pathlib import Path

from sbtctl.core.paths import get_option_file_paths

logger = logging.getLogger(__name__)


def java_binary(java_home: Path | None = None) -> str:
    """Resolve the java executable used to run the launcher.

    Args:
        java_home: Configured JDK home. Takes precedence over JAVA_HOME.

    Returns:
        Path to bin/java under the JDK home, or plain "java" to resolve
        from PATH when no JDK home is known.
    """
    if java_home is not None:
        return str(java_home / "bin" / "java")

    env_home = os.environ.get("JAVA_HOME")
    if env_home:
        return str(Path(env_home) / "bin" / "java")

    return "java"


def read_option_file(path: Path) -> list[str]:
    """Read a launcher option file.

    Each non-empty line, stripped of surrounding whitespace, is one
    argument.

    Args:
        path: Option file to read.

    Returns:
        Arguments in file order, or an empty list if the file is missing.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    if not path.is_file():
        return []

    with open(path, encoding="utf-8") as f:
        args = [line.strip() for line in f if line.strip()]

    logger.debug("Read %d option(s) from %s", len(args), path)
    return args


def workspace_options(workspace: Path) -> list[str]:
    """Collect arguments from the workspace's .sbtopts and .jvmopts.

    Args:
        workspace: Root directory of the sbt build.

    Returns:
        Arguments from .sbtopts followed by those from .jvmopts.
    """
    options: list[str] = []
    for path in get_option_file_paths(workspace):
        options.extend(read_option_file(path))
    return options
