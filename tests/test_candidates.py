"""Tests for candidate generation."""

from pathlib import Path

import pytest

from tldprobe.modules.candidates import TLDFileError, generate_candidates, read_tld_file


class TestReadTLDFile:
    def test_reads_lines_in_order(self, tld_file: Path) -> None:
        assert read_tld_file(tld_file) == ["com", "net", "org"]

    def test_trims_whitespace_and_skips_blank_lines(self, temp_dir: Path) -> None:
        path = temp_dir / "tlds.txt"
        path.write_text("  com \n\n\tio\n   \nco.uk\n")
        assert read_tld_file(path) == ["com", "io", "co.uk"]

    def test_keeps_duplicates(self, temp_dir: Path) -> None:
        path = temp_dir / "tlds.txt"
        path.write_text("com\ncom\n")
        assert read_tld_file(path) == ["com", "com"]

    def test_missing_file_raises(self, temp_dir: Path) -> None:
        with pytest.raises(TLDFileError) as exc_info:
            read_tld_file(temp_dir / "nope.txt")
        assert "nope.txt" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestGenerateCandidates:
    def test_combines_base_and_tlds(self) -> None:
        assert list(generate_candidates("example", ["com", "net", "org"])) == [
            "example.com",
            "example.net",
            "example.org",
        ]

    def test_no_validation(self) -> None:
        assert list(generate_candidates("bad name", ["", "x y"])) == ["bad name.", "bad name.x y"]

    def test_is_lazy(self) -> None:
        candidates = generate_candidates("a", iter(["b"]))
        assert next(candidates) == "a.b"
