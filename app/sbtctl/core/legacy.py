"""Cleanup of global plugin state left by older sbtctl releases.

Older releases installed the plugin descriptor into sbt's global plugins
directory, which added sbt-bloop to every build on the machine. The
descriptor now lives in each workspace, so the global copy is removed.
"""

import logging
from pathlib import Path

from sbtctl.core.paths import PLUGIN_FILENAME

logger = logging.getLogger(__name__)


def legacy_plugins_dir(version: str, home: Path) -> Path:
    """Get sbt's global plugins directory for a version line.

    sbt keeps global state per binary line: 0.13 releases use
    ~/.sbt/0.13, all 1.x releases use ~/.sbt/1.0.

    Args:
        version: sbt version in use.
        home: Home directory.

    Returns:
        Path to ~/.sbt/<line>/plugins.
    """
    bucket = "0.13" if version.startswith("0.13") else "1.0"
    return home / ".sbt" / bucket / "plugins"


def remove_legacy_global_plugin(version: str, home: Path) -> bool:
    """Delete the globally installed plugin descriptor if present.

    Removal is best-effort: a missing file counts as success and other
    failures are logged rather than raised.

    Args:
        version: sbt version in use.
        home: Home directory.

    Returns:
        True if a file was removed, False if there was none.
    """
    legacy_file = legacy_plugins_dir(version, home) / PLUGIN_FILENAME
    try:
        legacy_file.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning("Could not remove legacy global plugin %s: %s", legacy_file, e)
        return False
    logger.info("Removed legacy global plugin %s", legacy_file)
    return True
