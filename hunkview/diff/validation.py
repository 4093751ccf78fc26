"""
Optional cross-checks between declared counts and classified lines.

Nothing here is applied by the rendering path: declared per-file totals are
always displayed as given. These checks report mismatches as warnings for
callers that want to audit upstream data.
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel

from hunkview.diff.hunks import expand
from hunkview.diff.models import ClassifiedLine, DiffWarning, FileChange, FileStatus, Hunk, LineKind

logger = logging.getLogger(__name__)


class LineCounts(BaseModel):
    additions: int = 0
    deletions: int = 0
    context: int = 0


def count_lines(lines: Iterable[ClassifiedLine]) -> LineCounts:
    additions = 0
    deletions = 0
    context = 0
    for line in lines:
        if line.kind == LineKind.ADDITION:
            additions += 1
        elif line.kind == LineKind.DELETION:
            deletions += 1
        elif line.kind == LineKind.CONTEXT:
            context += 1
    return LineCounts(additions=additions, deletions=deletions, context=context)


def check_hunk(
    hunk: Hunk,
    path: str | None = None,
    hunk_index: int | None = None,
) -> list[DiffWarning]:
    counts = count_lines(expand(hunk))
    warnings: list[DiffWarning] = []

    new_total = counts.additions + counts.context
    if new_total != hunk.new_count:
        warnings.append(
            DiffWarning(
                code="new_count_mismatch",
                message=f"hunk declares {hunk.new_count} new lines, body has {new_total}",
                path=path,
                hunk_index=hunk_index,
            )
        )

    old_total = counts.deletions + counts.context
    if old_total != hunk.old_count:
        warnings.append(
            DiffWarning(
                code="old_count_mismatch",
                message=f"hunk declares {hunk.old_count} old lines, body has {old_total}",
                path=path,
                hunk_index=hunk_index,
            )
        )

    return warnings


def check_file(file: FileChange) -> list[DiffWarning]:
    warnings: list[DiffWarning] = []

    if not file.hunks:
        if file.status == FileStatus.MODIFIED:
            warnings.append(
                DiffWarning(
                    code="empty_modified",
                    message="modified file has no textual hunks",
                    path=file.path,
                )
            )
        return warnings

    additions = 0
    deletions = 0
    for idx, hunk in enumerate(file.hunks):
        warnings.extend(check_hunk(hunk, path=file.path, hunk_index=idx))
        counts = count_lines(expand(hunk))
        additions += counts.additions
        deletions += counts.deletions

    if additions != file.additions:
        warnings.append(
            DiffWarning(
                code="additions_mismatch",
                message=f"declared {file.additions} additions, hunks have {additions}",
                path=file.path,
            )
        )
    if deletions != file.deletions:
        warnings.append(
            DiffWarning(
                code="deletions_mismatch",
                message=f"declared {file.deletions} deletions, hunks have {deletions}",
                path=file.path,
            )
        )

    return warnings


def check_changeset(files: Iterable[FileChange]) -> list[DiffWarning]:
    warnings: list[DiffWarning] = []
    for file in files:
        warnings.extend(check_file(file))
    if warnings:
        logger.debug("Changeset cross-check produced %d warnings", len(warnings))
    return warnings
