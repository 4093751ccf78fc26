from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence

from hunkview.diff.aggregator import NO_TEXTUAL_CHANGES, present
from hunkview.diff.models import (
    ChangesetSummary,
    ClassifiedLine,
    FileChange,
    FilePresentation,
    FileStatus,
    LineKind,
)
from hunkview.diff.summary import summarize
from hunkview.render.highlight import Highlighter, highlight_line, plain_highlighter

STATUS_MARKERS = {
    FileStatus.ADDED: "A",
    FileStatus.DELETED: "D",
    FileStatus.MODIFIED: "M",
    FileStatus.RENAMED: "R",
}

MIN_NUMBER_WIDTH = 4


def render_summary_line(summary: ChangesetSummary) -> str:
    noun = "file" if summary.file_count == 1 else "files"
    return (
        f"{summary.file_count} {noun} changed "
        f"+{summary.total_additions} -{summary.total_deletions}"
    )


def render_file_header(file: FileChange, presentation: FilePresentation) -> str:
    header = f"{STATUS_MARKERS.get(file.status, 'M')} {presentation.display_path}"
    stats = []
    if file.additions > 0:
        stats.append(f"+{file.additions}")
    if file.deletions > 0:
        stats.append(f"-{file.deletions}")
    if stats:
        header = f"{header}  {' '.join(stats)}"
    return header


def render_line(
    line: ClassifiedLine,
    width: int,
    language: str | None,
    highlighter: Highlighter = plain_highlighter,
) -> str:
    if line.kind == LineKind.HEADER:
        return line.text

    old_no = _format_number(line.old_line_number, width)
    new_no = _format_number(line.new_line_number, width)
    content = highlight_line(line.text, language, highlighter)
    return f"{old_no} {new_no} {line.marker} {content}".rstrip()


def render_file(
    file: FileChange,
    highlighter: Highlighter = plain_highlighter,
    expanded: bool = True,
    languages: Mapping[str, str] | None = None,
) -> str:
    presentation = present(file, languages)
    lines = [render_file_header(file, presentation)]
    if not expanded:
        return "\n".join(lines)

    if not presentation.has_textual_changes:
        lines.append(f"    {NO_TEXTUAL_CHANGES}")
        return "\n".join(lines)

    width = _number_width(presentation)
    for group in presentation.line_groups:
        for line in group.lines:
            lines.append(render_line(line, width, presentation.language, highlighter))

    return "\n".join(lines)


def render_changeset(
    files: Sequence[FileChange],
    highlighter: Highlighter = plain_highlighter,
    collapsed: Collection[str] = (),
    languages: Mapping[str, str] | None = None,
) -> str:
    blocks = [render_summary_line(summarize(files))]
    for file in files:
        blocks.append(
            render_file(
                file,
                highlighter=highlighter,
                expanded=file.path not in collapsed,
                languages=languages,
            )
        )
    return "\n\n".join(blocks) + "\n"


def _number_width(presentation: FilePresentation) -> int:
    largest = 0
    for group in presentation.line_groups:
        for line in group.lines:
            for number in (line.old_line_number, line.new_line_number):
                if number is not None and number > largest:
                    largest = number
    return max(MIN_NUMBER_WIDTH, len(str(largest)))


def _format_number(value: int | None, width: int) -> str:
    if value is None:
        return " " * width
    return str(value).rjust(width)
