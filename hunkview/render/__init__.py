from hunkview.render.highlight import (
    Highlighter,
    highlight_line,
    plain_highlighter,
    terminal_highlighter,
)
from hunkview.render.text import render_changeset, render_file, render_summary_line

__all__ = [
    "Highlighter",
    "highlight_line",
    "plain_highlighter",
    "render_changeset",
    "render_file",
    "render_summary_line",
    "terminal_highlighter",
]
