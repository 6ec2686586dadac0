"""ファイル列挙のテスト"""
import os

import pytest

from s3_upload_action.exceptions import PatternError, SourceError
from s3_upload_action.utils.file_utils import (
    ContentTypeResolver,
    FileInfo,
    FileScanner,
    validate_pattern,
)


def _touch(path, content="x"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def tree(tmp_path):
    _touch(tmp_path / "site" / "index.html", "<html></html>")
    _touch(tmp_path / "site" / "css" / "main.css")
    _touch(tmp_path / "site" / "a" / "b" / "c.txt")
    (tmp_path / "site" / "empty").mkdir()
    _touch(tmp_path / "a.txt")
    _touch(tmp_path / "b.md")
    _touch(tmp_path / "notes.txt")
    return tmp_path


class TestScanDirectory:

    def test_lists_every_regular_file_once(self, tree):
        scanner = FileScanner(str(tree))
        files = scanner.scan_directory("site")

        paths = [f.path for f in files]
        assert sorted(paths) == sorted({
            str(tree / "site" / "index.html"),
            str(tree / "site" / "css" / "main.css"),
            str(tree / "site" / "a" / "b" / "c.txt"),
        })
        assert all(os.path.isabs(p) for p in paths)

    def test_sizes(self, tree):
        files = FileScanner(str(tree)).scan_directory("site")
        sizes = {f.name: f.size for f in files}
        assert sizes["index.html"] == len("<html></html>")

    def test_absolute_directory(self, tree):
        files = FileScanner("/").scan_directory(str(tree / "site" / "css"))
        assert [f.name for f in files] == ["main.css"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(SourceError, match="Source directory not found: nope"):
            FileScanner(str(tmp_path)).scan_directory("nope")


class TestScanPatterns:

    def test_union_of_patterns(self, tree):
        files = FileScanner(str(tree)).scan_patterns(["*.txt", "*.md"])
        assert [f.path for f in files] == sorted([
            str(tree / "a.txt"),
            str(tree / "b.md"),
            str(tree / "notes.txt"),
        ])

    def test_overlapping_patterns_collapse(self, tree):
        files = FileScanner(str(tree)).scan_patterns(["*.txt", "a.*", str(tree / "a.txt")])
        paths = [f.path for f in files]
        assert paths.count(str(tree / "a.txt")) == 1
        assert len(paths) == 2

    def test_recursive_pattern(self, tree):
        files = FileScanner(str(tree)).scan_patterns(["site/**/*.txt"])
        assert [f.path for f in files] == [str(tree / "site" / "a" / "b" / "c.txt")]

    def test_directories_are_not_matched(self, tree):
        files = FileScanner(str(tree)).scan_patterns(["site/*"])
        assert [f.name for f in files] == ["index.html"]

    def test_unmatched_pattern_warns(self, tree, captured_logs):
        files = FileScanner(str(tree)).scan_patterns(["*.zip", "*.md"])

        assert [f.name for f in files] == ["b.md"]
        assert "No files were found with the provided path: *.zip" in captured_logs.text

    def test_nothing_matched_is_empty(self, tree):
        assert FileScanner(str(tree)).scan_patterns(["*.zip"]) == []

    def test_invalid_pattern_is_fatal(self, tree):
        with pytest.raises(PatternError):
            FileScanner(str(tree)).scan_patterns(["*.txt", "[abc"])

    def test_metacharacters_in_base_dir(self, tmp_path):
        base = tmp_path / "build[1]"
        _touch(base / "out.txt")
        files = FileScanner(str(base)).scan_patterns(["*.txt"])
        assert [f.name for f in files] == ["out.txt"]


class TestValidatePattern:

    @pytest.mark.parametrize("pattern", [
        "*.txt", "dist/**/*.js", "file[0-9].log", "[!a]*", "[]]x", "**", "a/b/c.txt",
    ])
    def test_valid(self, pattern):
        validate_pattern(pattern)

    @pytest.mark.parametrize("pattern", ["[abc", "*.[ch", "dist/**.js", "a**/b", "bad\x00name"])
    def test_invalid(self, pattern):
        with pytest.raises(PatternError, match="Invalid pattern"):
            validate_pattern(pattern)


class TestContentTypeResolver:

    @pytest.mark.parametrize("name,expected", [
        ("a.txt", "text/plain"),
        ("b.md", "text/markdown"),
        ("logo.png", "image/png"),
        ("index.html", "text/html"),
        ("data.json", "application/json"),
        ("image.webp", "image/webp"),
        ("/tmp/dir.with.dots/archive.unknownext", "text/plain"),
        ("Makefile", "text/plain"),
    ])
    def test_resolve(self, name, expected):
        assert ContentTypeResolver().resolve(name) == expected

    def test_custom_default(self):
        resolver = ContentTypeResolver(default="application/octet-stream")
        assert resolver.resolve("blob.unknownext") == "application/octet-stream"


def test_file_info_name(tmp_path):
    path = _touch(tmp_path / "x" / "file.png")
    info = FileInfo.from_path(str(path))
    assert info.name == "file.png"
    assert info.size == 1
