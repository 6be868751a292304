from __future__ import annotations

import os
from pathlib import Path

import pytest

from format_ascii.filesystem import (
    collect_file_stat,
    collect_files,
    contains_symlink,
    enforce_file_size,
    ensure_file_unchanged,
    get_max_file_size,
    normalize_filepath,
    safe_read,
    write_formatted,
)


def _touch(path: Path, content: str = "text\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_get_max_file_size_uses_default(monkeypatch):
    monkeypatch.delenv("FORMAT_ASCII_MAX_FILE_SIZE", raising=False)

    assert get_max_file_size(default=123) == 123


def test_get_max_file_size_reads_environment(monkeypatch):
    monkeypatch.setenv("FORMAT_ASCII_MAX_FILE_SIZE", "2048")

    assert get_max_file_size(default=123) == 2048


@pytest.mark.parametrize("value", ["invalid", "0", "-1"])
def test_get_max_file_size_rejects_bad_values(monkeypatch, value: str):
    monkeypatch.setenv("FORMAT_ASCII_MAX_FILE_SIZE", value)

    with pytest.raises(ValueError):
        get_max_file_size()


def test_normalize_filepath_accepts_markdown_under_base(tmp_path: Path):
    target = _touch(tmp_path / "docs" / "a.md")

    assert normalize_filepath(str(target), tmp_path.resolve()) == target.resolve()


def test_normalize_filepath_missing_file(tmp_path: Path):
    with pytest.raises(ValueError, match="does not exist"):
        normalize_filepath(str(tmp_path / "missing.md"), tmp_path.resolve())


def test_normalize_filepath_rejects_directory(tmp_path: Path):
    folder = tmp_path / "folder.md"
    folder.mkdir()

    with pytest.raises(ValueError, match="not a regular file"):
        normalize_filepath(str(folder), tmp_path.resolve())


def test_normalize_filepath_rejects_non_markdown(tmp_path: Path):
    target = _touch(tmp_path / "notes.txt")

    with pytest.raises(ValueError, match="not a Markdown file"):
        normalize_filepath(str(target), tmp_path.resolve())


def test_normalize_filepath_rejects_paths_outside_base(tmp_path: Path):
    base = tmp_path / "base"
    base.mkdir()
    outside = _touch(tmp_path / "outside.md")

    with pytest.raises(ValueError, match="outside of the working directory"):
        normalize_filepath(str(outside), base.resolve())


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="Symlink support is required")
def test_normalize_filepath_rejects_symlink(tmp_path: Path):
    target = _touch(tmp_path / "actual.md")
    link = tmp_path / "alias.md"
    os.symlink(target, link)

    assert contains_symlink(link) is True
    with pytest.raises(ValueError, match="Symlinks"):
        normalize_filepath(str(link), tmp_path.resolve())


def test_collect_files_expands_globs(tmp_path: Path):
    first = _touch(tmp_path / "docs" / "a.md")
    second = _touch(tmp_path / "docs" / "nested" / "b.md")
    _touch(tmp_path / "docs" / "c.txt")
    _touch(tmp_path / "other" / "d.md")

    found = collect_files(tmp_path, ["docs/**/*.md"])

    assert found == sorted([first.resolve(), second.resolve()])


def test_collect_files_applies_exclude_and_deduplicates(tmp_path: Path):
    kept = _touch(tmp_path / "docs" / "a.md")
    _touch(tmp_path / "docs" / "archive" / "old.md")

    found = collect_files(tmp_path, ["docs/**/*.md", "docs/*.md"], ["docs/archive/**/*.md"])

    assert found == [kept.resolve()]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="Symlink support is required")
def test_collect_files_skips_symlinks(tmp_path: Path):
    target = _touch(tmp_path / "docs" / "a.md")
    os.symlink(target, tmp_path / "docs" / "alias.md")

    assert collect_files(tmp_path, ["docs/*.md"]) == [target.resolve()]


def test_collect_file_stat_handles_missing_file(tmp_path: Path):
    with pytest.raises(IOError):
        collect_file_stat(tmp_path / "missing.md")


def test_collect_file_stat_rejects_directory(tmp_path: Path):
    with pytest.raises(IOError, match="not a regular file"):
        collect_file_stat(tmp_path)


def test_enforce_file_size(tmp_path: Path):
    target = _touch(tmp_path / "big.md", "X" * 20)
    stat_result = collect_file_stat(target)

    enforce_file_size(stat_result, 20, target)
    with pytest.raises(IOError, match="maximum allowed size"):
        enforce_file_size(stat_result, 10, target)


def test_ensure_file_unchanged_detects_modification(tmp_path: Path):
    target = _touch(tmp_path / "doc.md", "one\n")
    before = collect_file_stat(target)
    target.write_text("one\ntwo\n", encoding="utf-8")
    after = collect_file_stat(target)

    with pytest.raises(IOError, match="changed during processing"):
        ensure_file_unchanged(before, after, target)


def test_safe_read_keeps_crlf(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_bytes(b"a\r\nb\r\n")

    with safe_read(target) as handle:
        assert handle.read() == "a\r\nb\r\n"


def test_safe_read_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        safe_read(tmp_path / "missing.md")


def test_write_formatted_replaces_content_and_keeps_mode(tmp_path: Path):
    target = _touch(tmp_path / "doc.md", "old\r\n")
    os.chmod(target, 0o640)
    initial = collect_file_stat(target)

    write_formatted(target, "new\r\n", initial)

    assert target.read_bytes() == b"new\r\n"
    assert collect_file_stat(target).st_mode & 0o777 == 0o640
    assert [path.name for path in tmp_path.iterdir()] == ["doc.md"]


def test_write_formatted_refuses_changed_file(tmp_path: Path):
    target = _touch(tmp_path / "doc.md", "old\n")
    initial = collect_file_stat(target)
    target.write_text("someone else wrote this\n", encoding="utf-8")

    with pytest.raises(IOError, match="changed during processing"):
        write_formatted(target, "new\n", initial)

    assert target.read_text(encoding="utf-8") == "someone else wrote this\n"


def test_write_formatted_keeps_write_when_atime_cannot_be_restored(tmp_path: Path, monkeypatch):
    target = _touch(tmp_path / "doc.md", "old\n")
    initial = collect_file_stat(target)
    messages: list[str] = []

    def refuse_utime(*args, **kwargs):
        raise PermissionError("utime not permitted")

    monkeypatch.setattr(os, "utime", refuse_utime)

    write_formatted(target, "new\n", initial, warn=messages.append)

    assert target.read_text(encoding="utf-8") == "new\n"
    assert len(messages) == 1
    assert "Could not restore access time for doc.md" in messages[0]


def test_normalize_filepath_does_not_expand_home(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    _touch(tmp_path / "doc.md")

    with pytest.raises(ValueError, match="does not exist"):
        normalize_filepath("~/doc.md", tmp_path.resolve())
