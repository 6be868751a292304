"""
Aligns ASCII and Unicode box tables inside ```text and ```ascii fenced blocks.
With --check it reports files that would change; with --write it rewrites them.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import ConfigError, build_config
from .filesystem import (
    collect_file_stat,
    collect_files,
    enforce_file_size,
    get_max_file_size,
    normalize_filepath,
    write_formatted,
)
from .formatter import FormatFileError, format_file

__all__ = ["cli"]


def _display_path(filepath: Path, base_dir: Path) -> str:
    try:
        return str(filepath.relative_to(base_dir))
    except ValueError:
        return str(filepath)


@click.command()
@click.version_option()
@click.option("--check", is_flag=True, help="Report files that would be reformatted")
@click.option("--write", is_flag=True, help="Rewrite files in place")
@click.option("--include", multiple=True, help="Glob pattern to scan when no files are given")
@click.option("--exclude", multiple=True, help="Glob pattern to skip when scanning")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
def cli(
    files: tuple[str, ...],
    check: bool = False,
    write: bool = False,
    include: tuple[str, ...] = (),
    exclude: tuple[str, ...] = (),
):
    """
    Entry point for checking or fixing ASCII box alignment in Markdown files.

    Args:
        files: Markdown files to process. When empty, the configured include
            globs are scanned from the working directory.
        check: Report drift and exit with status 1 if any file would change.
        write: Rewrite drifting files in place.
        include: Override for the configured include globs.
        exclude: Override for the configured exclude globs.

    Returns:
        None.

    Raises:
        click.BadParameter: If a path is invalid or the configuration is invalid.
        click.ClickException: If neither or both modes are given, or a file
            cannot be read, exceeds the size limit, or cannot be rewritten.

    Examples:
        format-ascii --check
        format-ascii --write docs/architecture.md
    """
    if check == write:
        raise click.ClickException("Specify exactly one of --check or --write.")

    base_dir = Path.cwd().resolve()
    try:
        config = build_config(
            base_dir,
            include=list(include) or None,
            exclude=list(exclude) or None,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    if files:
        try:
            filepaths = [normalize_filepath(raw_path, base_dir) for raw_path in files]
        except ValueError as error:
            raise click.BadParameter(str(error)) from error
    else:
        filepaths = collect_files(base_dir, config.include, config.exclude)

    has_changes = False
    total_warnings = 0

    for filepath in filepaths:
        display = _display_path(filepath, base_dir)

        try:
            initial_stat = collect_file_stat(filepath)
            enforce_file_size(initial_stat, max_file_size, filepath)
        except IOError as error:
            raise click.ClickException(str(error)) from error

        try:
            _, result = format_file(filepath)
        except FormatFileError as error:
            raise click.ClickException(str(error)) from error

        for warning in result.warnings:
            click.echo(f"⚠ {display}: {warning}", err=True)
            total_warnings += 1

        if not result.changed:
            continue

        has_changes = True
        if check:
            click.echo(f"Would format: {display}")
            continue

        try:
            write_formatted(
                filepath,
                result.formatted,
                initial_stat,
                warn=lambda message: click.echo(message, err=True),
            )
        except IOError as error:
            raise click.ClickException(str(error)) from error
        click.echo(f"Formatted: {display}")

    if total_warnings:
        click.echo(f"\n{total_warnings} warning(s)", err=True)

    if check and has_changes:
        click.echo("\nFormatting drift detected. Run `format-ascii --write` to fix.", err=True)
        raise SystemExit(1)

    if not has_changes:
        click.echo("All files are formatted.")


if __name__ == "__main__":
    cli()
