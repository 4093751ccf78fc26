import logging
from pathlib import Path

import typer

from hunkview.config import load_settings
from hunkview.diff.models import DiffWarning, FileChange
from hunkview.diff.summary import format_compact, summarize
from hunkview.diff.validation import check_changeset
from hunkview.errors import ChangesetLoadError, ConfigError
from hunkview.inputs import load_changeset
from hunkview.logging import get_logger, setup_logging
from hunkview.patch import parse_patch
from hunkview.render.highlight import plain_highlighter, terminal_highlighter
from hunkview.render.text import render_changeset, render_summary_line

logger = get_logger(__name__)

app = typer.Typer(no_args_is_help=True)


def _load_files(source: Path, patch: bool) -> tuple[list[FileChange], list[DiffWarning]]:
    if patch:
        if not source.exists():
            raise typer.BadParameter(f"patch not found: {source}")
        # Patches of non-UTF-8 sources are still shown; bad bytes become U+FFFD.
        files = parse_patch(source.read_text(encoding="utf-8", errors="replace"))
        logger.debug("Parsed %d file(s) from patch %s", len(files), source)
        return files, []

    try:
        inputs = load_changeset(source)
    except (FileNotFoundError, ChangesetLoadError) as exc:
        raise typer.BadParameter(str(exc))
    logger.debug("Loaded %d file(s) from changeset %s", len(inputs.files), source)
    return inputs.files, inputs.warnings


def _settings(languages: Path | None):
    try:
        return load_settings(languages)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc))


def _format_warning(warn: DiffWarning) -> str:
    parts = [warn.code, warn.message]
    if warn.path:
        parts.append(f"path={warn.path}")
    if warn.hunk_index is not None:
        parts.append(f"hunk={warn.hunk_index}")
    return f"- {' | '.join(parts)}"


@app.command("show")
def show_cmd(
    source: Path = typer.Argument(..., help="Changeset JSON or patch file"),
    patch: bool = typer.Option(False, "--patch", help="Read SOURCE as git diff output"),
    collapse: list[str] = typer.Option([], "--collapse", help="Render PATH collapsed"),
    languages: Path | None = typer.Option(None, "--languages", help="YAML language table"),
    out: Path | None = typer.Option(None, "--out", help="Write to file instead of stdout"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Overwrite existing output"),
    highlight: bool = typer.Option(False, "--highlight", help="Colour code with pygments"),
):
    settings = _settings(languages)
    files, _ = _load_files(source, patch)
    text = render_changeset(
        files,
        highlighter=terminal_highlighter if highlight else plain_highlighter,
        collapsed=set(collapse),
        languages=settings.languages,
    )

    if out is None:
        typer.echo(text, nl=False)
        return
    if out.exists() and not overwrite:
        raise typer.BadParameter(f"{out} already exists. Use --overwrite to replace.")
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"Diff written: {out}")


@app.command("summary")
def summary_cmd(
    source: Path = typer.Argument(..., help="Changeset JSON or patch file"),
    patch: bool = typer.Option(False, "--patch", help="Read SOURCE as git diff output"),
    compact: bool = typer.Option(False, "--compact", help="Short badge form"),
):
    files, _ = _load_files(source, patch)
    summary = summarize(files)
    typer.echo(format_compact(summary) if compact else render_summary_line(summary))


@app.command("validate")
def validate_cmd(
    source: Path = typer.Argument(..., help="Changeset JSON or patch file"),
    patch: bool = typer.Option(False, "--patch", help="Read SOURCE as git diff output"),
    strict: bool | None = typer.Option(
        None, "--strict/--no-strict", help="Exit non-zero when warnings are present"
    ),
):
    settings = _settings(None)
    strict = settings.strict if strict is None else strict

    files, warnings = _load_files(source, patch)
    warnings = warnings + check_changeset(files)

    if not warnings:
        typer.echo("No warnings")
        return

    for warn in warnings:
        typer.echo(_format_warning(warn))
    typer.echo(f"Warnings: {len(warnings)}")
    if strict:
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    hunkview: classified, line-numbered views of unified diffs
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
