from collections.abc import Mapping

from hunkview.diff.hunks import expand
from hunkview.diff.languages import resolve_language
from hunkview.diff.models import FileChange, FilePresentation, LineGroup

RENAME_ARROW = "→"
NO_TEXTUAL_CHANGES = "Binary file or no content changes"


def is_rename(file: FileChange) -> bool:
    return bool(file.previous_path) and file.previous_path != file.path


def display_path(file: FileChange) -> str:
    if is_rename(file):
        return f"{file.previous_path} {RENAME_ARROW} {file.path}"
    return file.path


def present(
    file: FileChange,
    languages: Mapping[str, str] | None = None,
) -> FilePresentation:
    """
    Build the renderable view of one file's change.

    Hunks are expanded in the order given. A file without hunks (binary,
    mode-only or an empty rename) gets no line groups; renderers show
    `NO_TEXTUAL_CHANGES` for it.
    """
    line_groups = tuple(LineGroup(hunk=hunk, lines=expand(hunk)) for hunk in file.hunks)

    return FilePresentation(
        display_path=display_path(file),
        is_rename=is_rename(file),
        language=resolve_language(file.path, languages),
        line_groups=line_groups,
    )
