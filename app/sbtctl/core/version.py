"""sbt version detection and comparison.

This module reads the sbt version a workspace pins in
``project/build.properties`` and compares versions against the
thresholds sbtctl cares about.

Version Format:
    Dot-separated numeric components (e.g., "1.4.1", "0.13.17", "1.10"),
    optionally followed by a tag introduced by ``-`` or ``+``
    (e.g., "1.4.0-RC1", "1.5.0+12-abcdef").

Ordering Rules:
    - Numeric components are compared left to right; missing trailing
      components count as zero ("1.4" == "1.4.0").
    - On a numeric tie the bare version sorts first, tagged versions sort
      after it, and tags are compared lexically among themselves.

Example:
    >>> is_compatible_version("1.4.1", "1.10.0")
    True
    >>> is_compatible_version("1.4.1", "1.4.0")
    False
"""

from __future__ import annotations

import functools
import logging
import re
import string
from dataclasses import dataclass
from pathlib import Path

from sbtctl.core.paths import get_build_properties_path

logger = logging.getLogger(__name__)

# Property holding the sbt version in build.properties
SBT_VERSION_KEY = "sbt.version"

# Oldest sbt release the build import works with
MINIMUM_SBT_VERSION = "0.13.17"

# sbt 1.4.0 shipped BSP, but its server discovery is unreliable;
# 1.4.1 is the first release treated as BSP-capable.
FIRST_SBT_VERSION_WITH_BSP = "1.4.1"

# Version pinned on the command line for workspaces that pin none
RECOMMENDED_SBT_VERSION = "1.9.9"

_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}

# Only CR, LF and CRLF end a line; \f and other separators are ordinary characters
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class BuildPropertiesError(OSError):
    """Raised when build.properties cannot be read or parsed."""


# =============================================================================
# Properties parsing
# =============================================================================


def _ends_with_continuation(line: str) -> bool:
    """Check whether a line ends with an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> list[str]:
    """Join continued lines and drop comments and blank lines."""
    result: list[str] = []
    pending: str | None = None

    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
            pending = ""
        pending += line
        if _ends_with_continuation(pending):
            pending = pending[:-1]
            continue
        result.append(pending)
        pending = None

    if pending:
        result.append(pending)
    return result


def _unescape(text: str) -> str:
    """Resolve backslash escapes in a key or value.

    Raises:
        BuildPropertiesError: If a \\uXXXX escape is malformed.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue

        i += 1
        if i >= len(text):
            break
        char = text[i]
        if char == "u":
            digits = text[i + 1 : i + 5]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                msg = f"Malformed \\uxxxx encoding in {text!r}"
                raise BuildPropertiesError(msg)
            out.append(chr(int(digits, 16)))
            i += 5
            continue
        out.append(_ESCAPES.get(char, char))
        i += 1

    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into its key and value."""
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in "=:" or char in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in "=:":
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java properties content.

    Supports ``key=value``, ``key:value`` and ``key value`` entries,
    ``#`` and ``!`` comments, backslash line continuations and the
    standard escapes. Later entries override earlier ones.

    Args:
        text: Properties file content.

    Returns:
        Mapping of keys to values.

    Raises:
        BuildPropertiesError: If the content contains a malformed escape.
    """
    props: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        props[key] = value
    return props


def load_version(workspace: Path) -> str | None:
    """Load the sbt version pinned by a workspace.

    The file is read on every call; callers that need caching do it
    themselves.

    Args:
        workspace: Root directory of the sbt build.

    Returns:
        The sbt.version value, or None if build.properties or the key
        is missing.

    Raises:
        BuildPropertiesError: If the file exists but cannot be read or parsed.
    """
    path = get_build_properties_path(workspace)
    if not path.is_file():
        logger.debug("No build.properties at %s", path)
        return None

    try:
        with open(path, "rb") as f:
            # Properties files are ISO-8859-1 with \u escapes for the rest
            text = f.read().decode("latin-1")
    except OSError as e:
        raise BuildPropertiesError(f"Failed to read {path}: {e}") from e

    version = parse_properties(text).get(SBT_VERSION_KEY, "").strip()
    if not version:
        logger.debug("%s does not set %s", path, SBT_VERSION_KEY)
        return None
    return version


# =============================================================================
# Version ordering
# =============================================================================


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class SemVer:
    """A parsed version.

    Attributes:
        components: Numeric components, e.g. (1, 4, 1).
        tag: Text after the first ``-`` or ``+``, or None for a bare version.
    """

    components: tuple[int, ...]
    tag: str | None = None

    def _compare(self, other: SemVer) -> int:
        width = max(len(self.components), len(other.components))
        mine = self.components + (0,) * (width - len(self.components))
        theirs = other.components + (0,) * (width - len(other.components))
        if mine != theirs:
            return -1 if mine < theirs else 1
        if self.tag == other.tag:
            return 0
        if self.tag is None:
            return -1
        if other.tag is None:
            return 1
        return -1 if self.tag < other.tag else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: SemVer) -> bool:
        return self._compare(other) < 0

    def __hash__(self) -> int:
        components = self.components
        while components and components[-1] == 0:
            components = components[:-1]
        return hash((components, self.tag))


def parse_version(text: str) -> SemVer:
    """Parse a version string.

    Args:
        text: Version such as "1.4.1" or "1.4.0-RC1".

    Returns:
        The parsed SemVer.

    Raises:
        ValueError: If the numeric part is empty or not all digits.
    """
    value = text.strip()
    cut = min((i for i in (value.find("-"), value.find("+")) if i >= 0), default=-1)
    if cut >= 0:
        numeric, tag = value[:cut], value[cut + 1 :]
        if not tag:
            msg = f"Empty version tag in {text!r}"
            raise ValueError(msg)
    else:
        numeric, tag = value, None

    parts = numeric.split(".")
    if not numeric or not all(p.isdigit() for p in parts):
        msg = f"Invalid version {text!r}: expected dot-separated numbers"
        raise ValueError(msg)

    return SemVer(components=tuple(int(p) for p in parts), tag=tag)


def is_compatible_version(minimum: str, version: str) -> bool:
    """Check whether a version is at or above a minimum.

    Args:
        minimum: Threshold version.
        version: Version to check.

    Returns:
        True if ``version >= minimum``.

    Raises:
        ValueError: If either version cannot be parsed.
    """
    return parse_version(version) >= parse_version(minimum)
