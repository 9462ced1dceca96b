"""Provisioning of generated sbt plugin files.

sbt-bloop has to be on the classpath of every meta-build in a workspace
for ``bloopInstall`` to export it. This module writes a small plugin
descriptor into each of those directories, and the BSP bridge source
into ``project/`` for workspaces whose sbt version supports BSP.

Writes are idempotent: a descriptor is only rewritten when its bytes
differ from the desired content, so repeated calls do not trigger file
watchers in the editor.
"""

import logging
from importlib import resources
from pathlib import Path

from sbtctl.core.config import UserConfig
from sbtctl.core.paths import (
    BSP_PLUGIN_FILENAME,
    PLUGIN_FILENAME,
    get_bsp_plugin_path,
    get_project_dir,
)

logger = logging.getLogger(__name__)

# Extra resolver needed to fetch sbt-bloop snapshot builds
SNAPSHOT_RESOLVER = 'resolvers += Resolver.bintrayRepo("scalacenter", "releases")'

# Files that define an sbt build
_SBT_SOURCE_SUFFIXES: frozenset[str] = frozenset({".sbt", ".scala"})

# Files sbtctl writes itself, which do not make a directory a build
_GENERATED_FILENAMES: frozenset[str] = frozenset({PLUGIN_FILENAME, BSP_PLUGIN_FILENAME})

# Suffixes that mark a file as part of the build definition
_SBT_RELATED_SUFFIXES: tuple[str, ...] = ("build.properties", ".sbt", ".scala")


def sbt_plugin_content(bloop_version: str) -> str:
    """Render the plugin descriptor for a given sbt-bloop version.

    Snapshot versions (containing ``+``) are not published to the default
    repositories, so an extra resolver line is emitted for them.

    Args:
        bloop_version: sbt-bloop version to add.

    Returns:
        Content of the generated .sbt file.
    """
    resolvers = SNAPSHOT_RESOLVER if "+" in bloop_version else ""
    return (
        "// DO NOT EDIT! This file is auto-generated.\n"
        "// This file enables sbt-bloop to create bloop config files.\n"
        f"{resolvers}\n"
        f'addSbtPlugin("ch.epfl.scala" % "sbt-bloop" % "{bloop_version}")\n'
    )


def _has_sbt_sources(directory: Path) -> bool:
    """Check whether a directory holds build sources other than generated files."""
    return any(
        child.is_file()
        and child.suffix in _SBT_SOURCE_SUFFIXES
        and child.name not in _GENERATED_FILENAMES
        for child in directory.iterdir()
    )


def discover_meta_dirs(workspace: Path) -> list[Path]:
    """Find every meta-build directory that needs the plugin descriptor.

    ``project/`` and ``project/project/`` are always included. Beyond
    that, each level that contains its own build sources is compiled by
    the ``project/`` directory nested inside it, so the walk keeps
    descending while levels have sources.

    Args:
        workspace: Root directory of the sbt build.

    Returns:
        Meta-build directories, shallowest first. They need not exist yet.
    """
    main_meta = get_project_dir(workspace)
    found: list[Path] = [main_meta, main_meta / "project"]
    seen: set[Path] = set(found)
    visited: set[Path] = set()
    pending: list[Path] = [main_meta]

    while pending:
        current = pending.pop()
        if not current.is_dir():
            continue
        # Symlinked meta-builds can point back up the tree
        resolved = current.resolve()
        if resolved in visited:
            continue
        visited.add(resolved)

        if not _has_sbt_sources(current):
            continue

        nested = current / "project"
        if nested not in seen:
            seen.add(nested)
            found.append(nested)
        pending.append(nested)

    return found


def write_plugin_file(directory: Path, content: str) -> bool:
    """Write the plugin descriptor into a directory if it changed.

    Args:
        directory: Meta-build directory, created if missing.
        content: Desired descriptor content.

    Returns:
        True if the file was written, False if it was already up to date.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    data = content.encode("utf-8")
    directory.mkdir(parents=True, exist_ok=True)
    plugin_file = directory / PLUGIN_FILENAME

    if plugin_file.is_file() and plugin_file.read_bytes() == data:
        logger.debug("Plugin file %s is up to date", plugin_file)
        return False

    plugin_file.write_bytes(data)
    logger.info("Wrote plugin file %s", plugin_file)
    return True


def ensure_plugins_written(workspace: Path, config: UserConfig) -> list[Path]:
    """Provision the sbt-bloop descriptor into every meta-build directory.

    Does nothing when the user manages sbt-bloop themselves.

    Args:
        workspace: Root directory of the sbt build. Must exist.
        config: User configuration supplying the plugin version.

    Returns:
        Plugin files that were actually written.

    Raises:
        NotADirectoryError: If the workspace is not an existing directory.
        OSError: If a plugin file cannot be written.
    """
    if config.bloop_sbt_already_installed:
        logger.debug("sbt-bloop is managed by the user, skipping plugin files")
        return []

    if not workspace.is_dir():
        msg = f"Workspace is not a directory: {workspace}"
        raise NotADirectoryError(msg)

    content = sbt_plugin_content(config.bloop_version)
    written: list[Path] = []
    for meta_dir in discover_meta_dirs(workspace):
        if write_plugin_file(meta_dir, content):
            written.append(meta_dir / PLUGIN_FILENAME)
    return written


def write_bsp_plugin(workspace: Path) -> bool:
    """Copy the bundled BSP bridge source into the workspace.

    Only the presence of the file is checked; an existing copy is never
    replaced.

    Args:
        workspace: Root directory of the sbt build. Must exist.

    Returns:
        True if the file was written, False if it already existed.

    Raises:
        NotADirectoryError: If the workspace is not an existing directory.
        OSError: If the file cannot be written.
    """
    target = get_bsp_plugin_path(workspace)
    # TODO: compare against the bundled bytes so bridge updates reach existing workspaces
    if target.is_file():
        logger.info("Skipping BSP plugin, %s already exists", target)
        return False

    if not workspace.is_dir():
        msg = f"Workspace is not a directory: {workspace}"
        raise NotADirectoryError(msg)

    data = resources.files("sbtctl.data").joinpath(BSP_PLUGIN_FILENAME).read_bytes()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    logger.info("Installed BSP plugin to %s", target)
    return True


def is_sbt_related_path(workspace: Path, path: Path) -> bool:
    """Check whether a path is part of the top-level sbt build definition.

    Editors use this to decide which file changes should trigger a new
    build import.

    Args:
        workspace: Root directory of the sbt build.
        path: Changed file.

    Returns:
        True for build.properties, .sbt and .scala files directly inside the
        workspace root, project/ or project/project/.
    """
    project = get_project_dir(workspace)
    toplevel = {workspace, project, project / "project"}
    return path.parent in toplevel and path.name.endswith(_SBT_RELATED_SUFFIXES)
