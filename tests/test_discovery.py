"""Tests for man page discovery and batch parsing."""

import gzip

import pytest

from mansyn.errors import ManPageReadError, NoSyntaxesFound
from mansyn.manpage.discovery import (
    get_file_list,
    load_file_to_lines,
    man_file_to_command,
    parse_man_files,
    select_range,
)


class TestGetFileList:
    """Test get_file_list function."""

    def test_lists_regular_files_sorted(self, man_dir):
        names = [p.name for p in get_file_list(man_dir)]

        assert names == ["bar.1", "baz.1", "foo.1", "qux.1.gz"]

    def test_missing_directory(self, tmp_path):
        assert get_file_list(tmp_path / "missing") == []


class TestSelectRange:
    """Test select_range function."""

    def test_zero_range_selects_all(self):
        assert select_range(["a", "b", "c"]) == ["a", "b", "c"]

    def test_slice(self):
        assert select_range(["a", "b", "c", "d"], 1, 3) == ["b", "c"]

    def test_open_lower_bound(self):
        assert select_range(["a", "b", "c"], 0, 2) == ["a", "b"]


class TestLoadFileToLines:
    """Test load_file_to_lines function."""

    def test_plain_file(self, man_dir):
        lines = load_file_to_lines(man_dir / "foo.1")

        assert lines[0] == ".Dd May 1, 2020"
        assert ".Sh SYNOPSIS" in lines

    def test_gzip_file(self, man_dir):
        assert ".Nm qux" in load_file_to_lines(man_dir / "qux.1.gz")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManPageReadError):
            load_file_to_lines(tmp_path / "nope.1")


    def test_truncated_gzip_file(self, man_dir):
        data = gzip.compress((man_dir / "foo.1").read_bytes())
        (man_dir / "trunc.1.gz").write_bytes(data[:len(data) // 2])

        with pytest.raises(ManPageReadError):
            load_file_to_lines(man_dir / "trunc.1.gz")

    def test_corrupt_gzip_file(self, man_dir):
        header = gzip.compress(b"")[:10]
        (man_dir / "bad.1.gz").write_bytes(header + b"\xff" * 64)

        with pytest.raises(ManPageReadError):
            load_file_to_lines(man_dir / "bad.1.gz")

class TestManFileToCommand:
    """Test man_file_to_command function."""

    def test_parses_file(self, man_dir):
        command = man_file_to_command(man_dir / "foo.1")

        assert command.name == "foo"
        assert len(command.syntaxes) == 2

    def test_prose_synopsis(self, man_dir):
        with pytest.raises(NoSyntaxesFound):
            man_file_to_command(man_dir / "baz.1")


class TestParseManFiles:
    """Test parse_man_files function."""

    def test_skips_pages_without_syntaxes(self, man_dir):
        results = parse_man_files(man_dir, max_workers=2)

        assert [(p.name, c.name) for p, c in results] == [("foo.1", "foo"), ("qux.1.gz", "qux")]

    def test_range(self, man_dir):
        results = parse_man_files(man_dir, lower=2, upper=3)

        assert [p.name for p, _ in results] == ["foo.1"]

    def test_progress_callback(self, man_dir):
        calls = []

        parse_man_files(man_dir, progress_callback=lambda *args: calls.append(args))

        assert calls[0] == ("discovery", 4, 4, "Found 4 man pages")
        assert [c for c in calls if c[0] == "parsing"][-1][1] == 4
        assert calls[-1] == ("complete", 4, 4, "Parsed 2 commands")

    def test_deterministic(self, man_dir):
        assert parse_man_files(man_dir, max_workers=4) == parse_man_files(man_dir, max_workers=1)

    def test_skips_damaged_gzip_files(self, man_dir):
        data = gzip.compress((man_dir / "foo.1").read_bytes())
        (man_dir / "trunc.1.gz").write_bytes(data[:len(data) // 2])
        (man_dir / "bad.1.gz").write_bytes(data[:10] + b"\xff" * 64)

        results = parse_man_files(man_dir)

        assert [p.name for p, _ in results] == ["foo.1", "qux.1.gz"]

    def test_empty_directory(self, tmp_path):
        assert parse_man_files(tmp_path) == []
