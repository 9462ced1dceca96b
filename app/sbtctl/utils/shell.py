"""Shell execution utilities.

Provides subprocess execution for launching the build tool.
"""

import os
import shutil
import subprocess


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH or as a path.

    Args:
        name: Command name or path to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def run_interactive(
    args: list[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    This does NOT capture stdout/stderr, so sbt's output streams straight
    to the user's terminal. There is no timeout; a build import can take
    as long as it needs.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(
        args,
        check=False,
        cwd=cwd,
        env=full_env,
    )
    return result.returncode
