"""
Unit tests for status token translation and the directory status scanner.

Tests verify:
- Every fossil status token maps to its FileState
- Update/extras output parsing (separator, whitespace, blank lines)
- Scan ordering, re-rooting and idempotence
- Scan invocation arguments and working directory
"""

import pytest

from fossilvc.core.exceptions import FossilCheckoutNotFoundError
from fossilvc.core.models.vcs import FileState, FileStatus
from fossilvc.services.vcs.status import (
    STATUS_CODES,
    DirectoryStatusScanner,
    parse_extras_output,
    parse_update_output,
    translate_status,
)


class TestTranslateStatus:
    """Tests for translate_status()."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("UNKNOWN", FileState.UNREGISTERED),
            ("UNCHANGED", FileState.UP_TO_DATE),
            ("CONFLICT", FileState.EDITED),
            ("ADDED", FileState.ADDED),
            ("ADD", FileState.NEEDS_UPDATE),
            ("EDITED", FileState.EDITED),
            ("REMOVE", FileState.REMOVED),
            ("UPDATE", FileState.NEEDS_UPDATE),
            ("MERGE", FileState.NEEDS_MERGE),
        ],
    )
    def test_known_tokens(self, token, expected):
        """Each known token maps to its state."""
        assert translate_status(token) is expected

    def test_table_covers_all_known_tokens(self):
        """The mapping table holds exactly the nine fossil tokens."""
        assert set(STATUS_CODES) == {
            "UNKNOWN",
            "UNCHANGED",
            "CONFLICT",
            "ADDED",
            "ADD",
            "EDITED",
            "REMOVE",
            "UPDATE",
            "MERGE",
        }

    def test_none_is_unregistered(self):
        """A file fossil did not report on is unregistered."""
        assert translate_status(None) is FileState.UNREGISTERED

    @pytest.mark.parametrize("token", ["RENAMED", "edited", "", "DELETED"])
    def test_unrecognized_tokens_are_unknown(self, token):
        """Anything outside the table, including other casings, is unknown."""
        assert translate_status(token) is FileState.UNKNOWN

    def test_add_and_added_differ(self):
        """ADD (pending from update) and ADDED (local) are distinct states."""
        assert translate_status("ADD") != translate_status("ADDED")


class TestParseUpdateOutput:
    """Tests for parse_update_output()."""

    def test_stops_at_separator(self):
        """Lines after the dash separator are the summary, not entries."""
        text = "EDITED a.txt\nADDED  b.txt\n----\nupdated-to: abc\n"
        assert parse_update_output(text) == [("EDITED", "a.txt"), ("ADDED", "b.txt")]

    def test_long_separator(self):
        """Any run of two or more dashes ends parsing."""
        text = "EDITED a.txt\n" + "-" * 78 + "\nUPDATE x.txt\n"
        assert parse_update_output(text) == [("EDITED", "a.txt")]

    def test_skips_blank_and_short_lines(self):
        """Blank lines and lone tokens are ignored."""
        text = "\nEDITED a.txt\nUNCHANGED\n\n"
        assert parse_update_output(text) == [("EDITED", "a.txt")]

    def test_keeps_spaces_inside_path(self):
        """Only the first whitespace run separates token and path."""
        assert parse_update_output("EDITED my file.txt\n") == [("EDITED", "my file.txt")]

    def test_empty(self):
        """No output means no entries."""
        assert parse_update_output("") == []


class TestParseExtrasOutput:
    """Tests for parse_extras_output()."""

    def test_one_path_per_line(self):
        """Each non-blank line is a path."""
        assert parse_extras_output("c.txt\n\nsub/d.txt\n") == ["c.txt", "sub/d.txt"]


class TestDirectoryStatusScanner:
    """Tests for DirectoryStatusScanner.scan()."""

    def test_end_to_end_scan(self, fake_invoker, checkout):
        """Tracked entries come first, then untracked, each in emission order."""
        fake_invoker.respond("update", output="EDITED a.txt\nADDED  b.txt\n----\n")
        fake_invoker.respond("extras", output="c.txt\n")

        result = DirectoryStatusScanner(fake_invoker).scan(checkout)

        assert result == [
            FileStatus(path="a.txt", state=FileState.EDITED),
            FileStatus(path="b.txt", state=FileState.ADDED),
            FileStatus(path="c.txt", state=FileState.UNREGISTERED),
        ]

    def test_reroots_to_subdirectory(self, fake_invoker, checkout):
        """Root-relative paths are re-expressed relative to the scanned directory."""
        fake_invoker.respond("update", output="EDITED sub/a.txt\nUPDATE top.txt\n")
        fake_invoker.respond("extras", output="sub/new.txt\n")

        result = DirectoryStatusScanner(fake_invoker).scan(checkout / "sub")

        assert [(s.path, s.state) for s in result] == [
            ("a.txt", FileState.EDITED),
            ("../top.txt", FileState.NEEDS_UPDATE),
            ("new.txt", FileState.UNREGISTERED),
        ]

    def test_explicit_root(self, fake_invoker, tmp_path):
        """A given root skips checkout discovery."""
        fake_invoker.respond("update", output="EDITED sub/a.txt\n")

        result = DirectoryStatusScanner(fake_invoker).scan(
            tmp_path / "sub", root=tmp_path
        )

        assert result == [FileStatus(path="a.txt", state=FileState.EDITED)]

    def test_scan_is_idempotent(self, fake_invoker, checkout):
        """Identical tool output gives identical results."""
        fake_invoker.respond("update", output="EDITED a.txt\nMERGE m.txt\n")
        fake_invoker.respond("extras", output="c.txt\n")
        scanner = DirectoryStatusScanner(fake_invoker)

        assert scanner.scan(checkout) == scanner.scan(checkout)

    def test_whole_directory_arguments(self, fake_invoker, checkout):
        """Without files the directory itself is passed; the root is the cwd."""
        DirectoryStatusScanner(fake_invoker).scan(checkout)

        assert fake_invoker.calls == [
            (["update", "-n", "-v", "current", str(checkout)], str(checkout)),
            (["extras", "--dotfiles", str(checkout)], str(checkout)),
        ]

    def test_empty_files_means_whole_directory(self, fake_invoker, checkout):
        """An empty file list behaves like no file list."""
        DirectoryStatusScanner(fake_invoker).scan(checkout, files=[])

        assert fake_invoker.commands[0][-1] == str(checkout)

    def test_restricted_to_files(self, fake_invoker, checkout):
        """Given files replace the directory in both commands."""
        DirectoryStatusScanner(fake_invoker).scan(checkout, files=["a.txt", "b.txt"])

        assert fake_invoker.commands == [
            ["update", "-n", "-v", "current", str(checkout / "a.txt"), str(checkout / "b.txt")],
            ["extras", "--dotfiles", str(checkout / "a.txt"), str(checkout / "b.txt")],
        ]

    def test_failed_commands_give_empty_scan(self, fake_invoker, checkout):
        """Scanning is best effort: tool failures yield no entries."""
        fake_invoker.respond("update", output="EDITED a.txt\n", returncode=1)
        fake_invoker.respond("extras", output="fossil: not a checkout\n", returncode=1)

        assert DirectoryStatusScanner(fake_invoker).scan(checkout) == []

    def test_outside_checkout_raises(self, fake_invoker, tmp_path):
        """Scanning a directory with no enclosing checkout fails."""
        with pytest.raises(FossilCheckoutNotFoundError):
            DirectoryStatusScanner(fake_invoker).scan(tmp_path)

        assert fake_invoker.calls == []

    def test_subdirectory_scan_runs_from_root(self, fake_invoker, checkout):
        """A subdirectory scan runs both commands in the root and passes absolute paths."""
        sub = checkout / "sub"

        DirectoryStatusScanner(fake_invoker).scan(sub, files=["new.txt"])

        assert fake_invoker.calls == [
            (["update", "-n", "-v", "current", str(sub / "new.txt")], str(checkout)),
            (["extras", "--dotfiles", str(sub / "new.txt")], str(checkout)),
        ]
