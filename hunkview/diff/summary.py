from collections.abc import Iterable

from hunkview.diff.models import ChangesetSummary, FileChange


def summarize(files: Iterable[FileChange]) -> ChangesetSummary:
    files = list(files)
    return ChangesetSummary(
        file_count=len(files),
        total_additions=sum(f.additions for f in files),
        total_deletions=sum(f.deletions for f in files),
    )


def format_compact(summary: ChangesetSummary) -> str:
    noun = "file" if summary.file_count == 1 else "files"
    return f"{summary.file_count} {noun} +{summary.total_additions} -{summary.total_deletions}"
