from hunkview.diff.aggregator import (
    NO_TEXTUAL_CHANGES,
    display_path,
    is_rename,
    present,
)
from hunkview.diff.classifier import classify, classify_line
from hunkview.diff.hunks import expand, hunk_from_body, parse_hunk_header
from hunkview.diff.languages import LANGUAGE_TABLE, extend_table, resolve_language
from hunkview.diff.models import (
    ChangesetSummary,
    ClassifiedLine,
    DiffWarning,
    FileChange,
    FilePresentation,
    FileStatus,
    Hunk,
    LineGroup,
    LineKind,
)
from hunkview.diff.summary import format_compact, summarize
from hunkview.diff.validation import check_changeset, check_file, check_hunk, count_lines

__all__ = [
    "NO_TEXTUAL_CHANGES",
    "display_path",
    "is_rename",
    "present",
    "classify",
    "classify_line",
    "expand",
    "hunk_from_body",
    "parse_hunk_header",
    "LANGUAGE_TABLE",
    "extend_table",
    "resolve_language",
    "ChangesetSummary",
    "ClassifiedLine",
    "DiffWarning",
    "FileChange",
    "FilePresentation",
    "FileStatus",
    "Hunk",
    "LineGroup",
    "LineKind",
    "format_compact",
    "summarize",
    "check_changeset",
    "check_file",
    "check_hunk",
    "count_lines",
]
