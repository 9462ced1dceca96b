"""Unit tests for sbt version detection and comparison."""

from collections.abc import Callable
from pathlib import Path

import pytest
from sbtctl.core.version import (
    FIRST_SBT_VERSION_WITH_BSP,
    BuildPropertiesError,
    SemVer,
    is_compatible_version,
    load_version,
    parse_properties,
    parse_version,
)


class TestParseProperties:
    """Tests for parse_properties function."""

    def test_key_value_pairs(self) -> None:
        """parse_properties reads key=value lines."""
        props = parse_properties("sbt.version=1.9.7\nfoo=bar\n")

        assert props == {"sbt.version": "1.9.7", "foo": "bar"}

    def test_colon_and_whitespace_separators(self) -> None:
        """parse_properties accepts ':' and whitespace as separators."""
        props = parse_properties("a:1\nb 2\nc = 3\n")

        assert props == {"a": "1", "b": "2", "c": "3"}

    def test_ignores_comments_and_blank_lines(self) -> None:
        """parse_properties skips # and ! comments and blank lines."""
        text = "# comment\n! also comment\n\n   \nkey=value\n"

        assert parse_properties(text) == {"key": "value"}

    def test_line_continuation(self) -> None:
        """A trailing backslash continues the value on the next line."""
        text = "key=first \\\n    second\n"

        assert parse_properties(text) == {"key": "first second"}

    def test_escaped_backslash_is_not_continuation(self) -> None:
        """An even number of trailing backslashes ends the line."""
        text = "path=C:\\\\\nnext=1\n"

        assert parse_properties(text) == {"path": "C:\\", "next": "1"}

    def test_unicode_escape(self) -> None:
        """\\uXXXX escapes are decoded."""
        assert parse_properties("name=caf\\u00e9\n") == {"name": "café"}

    def test_escaped_separator_in_key(self) -> None:
        """An escaped '=' is part of the key."""
        assert parse_properties("a\\=b=c\n") == {"a=b": "c"}

    def test_later_entries_override(self) -> None:
        """The last occurrence of a key wins."""
        assert parse_properties("k=1\nk=2\n") == {"k": "2"}

    def test_malformed_unicode_escape_raises(self) -> None:
        """A malformed \\u escape raises BuildPropertiesError."""
        with pytest.raises(BuildPropertiesError, match="Malformed"):
            parse_properties("key=\\u12\n")

    def test_form_feed_separates_key_and_value(self) -> None:
        """A form feed is whitespace, not a line break."""
        assert parse_properties("sbt.version\f1.4.1\n") == {"sbt.version": "1.4.1"}

    def test_only_cr_and_lf_end_lines(self) -> None:
        """Other Unicode line separators stay inside the value."""
        props = parse_properties("x=a\x85sbt.version=0.13.0\nsbt.version=1.9.7\n")

        assert props["x"] == "a\x85sbt.version=0.13.0"
        assert props["sbt.version"] == "1.9.7"

    def test_crlf_and_cr_line_endings(self) -> None:
        """Windows and old Mac line endings both end a line."""
        assert parse_properties("a=1\r\nb=2\rc=3") == {"a": "1", "b": "2", "c": "3"}


class TestLoadVersion:
    """Tests for load_version function."""

    def test_reads_sbt_version(
        self, workspace: Path, write_build_properties: Callable[[Path, str], Path]
    ) -> None:
        """load_version returns the sbt.version value."""
        write_build_properties(workspace, "# pinned\nsbt.version = 1.9.7\n")

        assert load_version(workspace) == "1.9.7"

    def test_missing_file_returns_none(self, workspace: Path) -> None:
        """load_version returns None when build.properties is absent."""
        assert load_version(workspace) is None

    def test_missing_workspace_returns_none(self, tmp_path: Path) -> None:
        """load_version tolerates a workspace that does not exist."""
        assert load_version(tmp_path / "nope") is None

    def test_missing_key_returns_none(
        self, workspace: Path, write_build_properties: Callable[[Path, str], Path]
    ) -> None:
        """load_version returns None when sbt.version is not set."""
        write_build_properties(workspace, "other=1\n")

        assert load_version(workspace) is None

    def test_strips_trailing_whitespace(
        self, workspace: Path, write_build_properties: Callable[[Path, str], Path]
    ) -> None:
        """load_version ignores trailing whitespace after the version."""
        write_build_properties(workspace, "sbt.version=1.4.1   \n")

        assert load_version(workspace) == "1.4.1"

    def test_reads_fresh_each_call(
        self, workspace: Path, write_build_properties: Callable[[Path, str], Path]
    ) -> None:
        """load_version picks up changes between calls."""
        write_build_properties(workspace, "sbt.version=1.4.0\n")
        first = load_version(workspace)
        write_build_properties(workspace, "sbt.version=1.5.0\n")

        assert first == "1.4.0"
        assert load_version(workspace) == "1.5.0"

    def test_form_feed_separator_in_file(self, workspace: Path) -> None:
        """load_version reads a version separated from its key by a form feed."""
        (workspace / "project" / "build.properties").write_bytes(b"sbt.version\x0c1.4.1\n")

        assert load_version(workspace) == "1.4.1"

    def test_corrupt_file_raises(
        self, workspace: Path, write_build_properties: Callable[[Path, str], Path]
    ) -> None:
        """load_version surfaces malformed content as BuildPropertiesError."""
        write_build_properties(workspace, "sbt.version=\\uZZZZ\n")

        with pytest.raises(BuildPropertiesError):
            load_version(workspace)

    def test_parse_error_is_os_error(self) -> None:
        """BuildPropertiesError propagates like an I/O error."""
        assert issubclass(BuildPropertiesError, OSError)


class TestParseVersion:
    """Tests for parse_version function."""

    def test_numeric_version(self) -> None:
        """parse_version splits numeric components."""
        assert parse_version("1.4.1") == SemVer(components=(1, 4, 1))

    def test_tagged_version(self) -> None:
        """parse_version keeps the text after '-' as the tag."""
        version = parse_version("1.4.0-RC1")

        assert version.components == (1, 4, 0)
        assert version.tag == "RC1"

    def test_plus_introduces_tag(self) -> None:
        """parse_version treats '+' as a tag separator."""
        assert parse_version("1.5.0+12-abc").tag == "12-abc"

    @pytest.mark.parametrize("text", ["", "1.x", "1..2", "-RC1", "1.4.0-"])
    def test_invalid_versions(self, text: str) -> None:
        """parse_version rejects malformed versions."""
        with pytest.raises(ValueError):
            parse_version(text)


class TestOrdering:
    """Tests for SemVer ordering."""

    def test_numeric_not_lexical(self) -> None:
        """Components compare as numbers, so 1.10 > 1.4."""
        assert parse_version("1.10.0") > parse_version("1.4.1")

    def test_missing_components_are_zero(self) -> None:
        """1.4 and 1.4.0 are equal."""
        assert parse_version("1.4") == parse_version("1.4.0")
        assert hash(parse_version("1.4")) == hash(parse_version("1.4.0"))

    def test_tagged_sorts_after_bare(self) -> None:
        """A tagged version sorts after the bare version it extends."""
        assert parse_version("1.4.0-RC1") > parse_version("1.4.0")
        assert parse_version("1.4.0-RC1") < parse_version("1.4.1")

    def test_tags_compare_lexically(self) -> None:
        """Tags on the same numeric version compare lexically."""
        assert parse_version("1.4.0-M1") < parse_version("1.4.0-RC1")


class TestIsCompatibleVersion:
    """Tests for is_compatible_version function."""

    @pytest.mark.parametrize(
        ("version", "expected"),
        [
            ("1.4.1", True),
            ("1.4.0", False),
            ("1.10.0", True),
            ("2.0.0", True),
            ("0.13.18", False),
        ],
    )
    def test_against_bsp_threshold(self, version: str, expected: bool) -> None:
        """Versions at or above the BSP threshold are compatible."""
        assert is_compatible_version(FIRST_SBT_VERSION_WITH_BSP, version) is expected

    def test_unparsable_version_raises(self) -> None:
        """is_compatible_version raises ValueError for garbage input."""
        with pytest.raises(ValueError):
            is_compatible_version("1.4.1", "latest")
