"""Filesystem helpers for format-ascii."""

from __future__ import annotations

import os
import stat
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE, MARKDOWN_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "FORMAT_ASCII_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the size limit in bytes, honouring ``FORMAT_ASCII_MAX_FILE_SIZE``.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    raw_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_value is None:
        return default

    try:
        limit = int(raw_value)
    except ValueError:
        limit = 0

    if limit <= 0:
        error_message = (
            f"{MAX_FILE_SIZE_ENV_VAR} must be a positive number of bytes, got {raw_value!r}."
        )
        raise ValueError(error_message)

    return limit


def contains_symlink(path: Path) -> bool:
    """Tell whether `path` or one of its parents is a symlink."""

    def _is_link(candidate: Path) -> bool:
        try:
            return candidate.is_symlink()
        except OSError:
            return False

    return any(_is_link(candidate) for candidate in (path, *path.parents))


def normalize_filepath(raw_path: str, base_dir: Path) -> Path:
    """Resolve a document named on the command line.

    The document must be an existing regular Markdown file under `base_dir`,
    reached without traversing a symlink.

    Args:
        raw_path: Path as given by the user, absolute or relative.
        base_dir: Directory the document must live in.

    Returns:
        Path: Absolute path to the document.

    Raises:
        ValueError: If any of the conditions above is not met.

    Examples:
        normalize_filepath("docs/architecture.md", Path.cwd())
    """
    path = Path(raw_path)
    if contains_symlink(path):
        raise ValueError(f"Symlinks are not followed: {path}")

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Cannot resolve {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")
    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")
    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        supported = ", ".join(MARKDOWN_EXTENSIONS)
        raise ValueError(f"{resolved} is not a Markdown file (expected one of: {supported}).")

    return resolved


def collect_files(base_dir: Path, include: Iterable[str], exclude: Iterable[str] = ()) -> list[Path]:
    """Expand glob patterns relative to `base_dir`.

    Symlinks and non-regular files are skipped; matches of any `exclude`
    pattern are dropped.

    Args:
        base_dir: Directory the patterns are relative to.
        include: Glob patterns selecting files.
        exclude: Glob patterns removing files from the selection.

    Returns:
        list[Path]: Sorted, deduplicated absolute paths.

    Examples:
        collect_files(Path.cwd(), ["docs/**/*.md"], ["docs/generated/**"])
    """
    excluded: set[Path] = set()
    for pattern in exclude:
        excluded.update(match.resolve() for match in base_dir.glob(pattern))

    found: set[Path] = set()
    for pattern in include:
        for match in base_dir.glob(pattern):
            if match.is_symlink() or not match.is_file():
                continue
            resolved = match.resolve()
            if resolved not in excluded:
                found.add(resolved)

    return sorted(found)


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Stat a document without following symlinks.

    Raises:
        IOError: If the document cannot be stat'ed or is not a regular file.
    """
    try:
        stat_result = os.lstat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(stat_result.st_mode):
        kind = "a symlink" if stat.S_ISLNK(stat_result.st_mode) else "not a regular file"
        raise IOError(f"{filepath} is {kind}.")

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Refuse documents larger than `max_size` bytes."""
    if stat_result.st_size > max_size:
        raise IOError(
            f"{filepath} is {stat_result.st_size} bytes, over the maximum allowed size "
            f"of {max_size} bytes."
        )


def _fingerprint(stat_result: os.stat_result) -> tuple:
    return (
        stat_result.st_ino,
        stat_result.st_dev,
        stat_result.st_size,
        stat_result.st_mtime_ns,
    )


def ensure_file_unchanged(
    expected_stat: os.stat_result, current_stat: os.stat_result, filepath: Path
):
    """Raise IOError when a document was modified after it was read."""
    if _fingerprint(expected_stat) != _fingerprint(current_stat):
        raise IOError(f"{filepath} changed during processing; refusing to overwrite.")


def safe_read(filepath: Path) -> TextIO:
    """Open a document for reading as UTF-8.

    Newlines are not translated, so ``\\r\\n`` endings reach the formatter.

    Raises:
        IOError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("README.md")) as handle:
            content = handle.read()
    """
    try:
        return open(filepath, "r", encoding="UTF-8", newline="")
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error


def write_formatted(
    filepath: Path,
    content: str,
    expected_stat: os.stat_result,
    warn: Callable[[str], None] | None = None,
):
    """Atomically replace a document with its formatted content.

    Mode and ownership are copied onto the temporary file before it replaces
    the document. The access time is restored afterwards; failing to restore
    it or to copy ownership is reported through `warn` and is not an error.

    Args:
        filepath: Document to update.
        content: Full formatted document.
        expected_stat: Stat captured before reading.
        warn: Optional callback for non-fatal warnings.

    Raises:
        IOError: If the document changed since it was read or cannot be replaced.

    Examples:
        write_formatted(Path("docs/design.md"), result.formatted, initial_stat)
    """
    ensure_file_unchanged(expected_stat, collect_file_stat(filepath), filepath)

    def _warn(message: str):
        if warn is not None:
            warn(f"Warning: {message}")

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", newline="", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())

        os.chmod(temp_path, stat.S_IMODE(expected_stat.st_mode))
        if hasattr(os, "chown"):
            try:
                os.chown(temp_path, expected_stat.st_uid, expected_stat.st_gid)
            except PermissionError:
                _warn(f"Could not preserve file ownership for {filepath.name}")

        os.replace(temp_path, filepath)
        temp_path = None
    except OSError as error:
        raise IOError(f"Error writing {filepath}: {error}") from error
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)

    # mtime reflects the rewrite; only atime is restored
    try:
        os.utime(filepath, ns=(expected_stat.st_atime_ns, filepath.stat().st_mtime_ns))
    except OSError as error:
        _warn(f"Could not restore access time for {filepath.name}: {error}")
