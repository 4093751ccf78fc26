"""
Split `git diff` / `diff -u` output into `FileChange` records.

This is the upstream side of the viewer: it decides each file's status and
per-file totals so the rendering core never has to infer them.
"""

import logging
from dataclasses import dataclass, field

from hunkview.diff.classifier import split_lines
from hunkview.diff.hunks import expand, parse_hunk_header
from hunkview.diff.models import FileChange, FileStatus, Hunk
from hunkview.diff.validation import count_lines

logger = logging.getLogger(__name__)

DEV_NULL = "/dev/null"
NO_NEWLINE_MARKER = "\\"


@dataclass
class _PendingFile:
    old_path: str | None = None
    new_path: str | None = None
    new_file: bool = False
    deleted_file: bool = False
    renamed: bool = False
    hunks: list[Hunk] = field(default_factory=list)


@dataclass
class _PendingHunk:
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: list[str]
    old_remaining: int
    new_remaining: int

    @property
    def exhausted(self) -> bool:
        return self.old_remaining <= 0 and self.new_remaining <= 0

    def consume(self, line: str) -> None:
        self.lines.append(line)
        if line.startswith("+"):
            self.new_remaining -= 1
        elif line.startswith("-"):
            self.old_remaining -= 1
        else:
            self.old_remaining -= 1
            self.new_remaining -= 1

    def to_hunk(self) -> Hunk:
        return Hunk(
            old_start=self.old_start,
            old_count=self.old_count,
            new_start=self.new_start,
            new_count=self.new_count,
            body="\n".join(self.lines) + "\n",
        )


def _is_hunk_line(line: str) -> bool:
    return line == "" or line.startswith(("+", "-", " "))


def _strip_prefix(raw_path: str, prefix: str) -> str:
    path = raw_path.split("\t", 1)[0].strip()
    if path.startswith('"') and path.endswith('"') and len(path) >= 2:
        path = path[1:-1]
    if path == DEV_NULL:
        return path
    return path.removeprefix(prefix)


def _paths_from_git_header(line: str) -> tuple[str | None, str | None]:
    rest = line.removeprefix("diff --git ").strip()
    if " b/" not in rest:
        return None, None
    old_part, new_part = rest.rsplit(" b/", 1)
    return old_part.removeprefix("a/"), new_part


def _status_for(pending: _PendingFile) -> FileStatus:
    if pending.new_file or pending.old_path == DEV_NULL:
        return FileStatus.ADDED
    if pending.deleted_file or pending.new_path == DEV_NULL:
        return FileStatus.DELETED
    if pending.renamed or (
        pending.old_path and pending.new_path and pending.old_path != pending.new_path
    ):
        return FileStatus.RENAMED
    return FileStatus.MODIFIED


def _finish_file(pending: _PendingFile) -> FileChange | None:
    status = _status_for(pending)
    if status == FileStatus.DELETED:
        path = pending.old_path
    else:
        path = pending.new_path or pending.old_path
    if not path or path == DEV_NULL:
        logger.warning("Skipping patch section without a usable path")
        return None

    additions = 0
    deletions = 0
    for hunk in pending.hunks:
        counts = count_lines(expand(hunk))
        additions += counts.additions
        deletions += counts.deletions

    previous_path = pending.old_path if status == FileStatus.RENAMED else None
    return FileChange(
        path=path,
        previous_path=previous_path,
        status=status,
        additions=additions,
        deletions=deletions,
        hunks=tuple(pending.hunks),
    )


def parse_patch(patch_txt: str) -> list[FileChange]:
    files: list[FileChange] = []
    pending: _PendingFile | None = None
    hunk: _PendingHunk | None = None

    def flush_hunk() -> None:
        nonlocal hunk
        if hunk is not None and pending is not None:
            pending.hunks.append(hunk.to_hunk())
        hunk = None

    def flush_file() -> None:
        nonlocal pending
        flush_hunk()
        if pending is not None:
            finished = _finish_file(pending)
            if finished is not None:
                files.append(finished)
        pending = None

    # Only "\n" ends a line; form feeds and other separators are content.
    for line in split_lines(patch_txt):
        if hunk is not None:
            if line.startswith(NO_NEWLINE_MARKER):
                hunk.lines.append(line)
                continue
            if not hunk.exhausted and _is_hunk_line(line):
                hunk.consume(line)
                continue
            flush_hunk()

        if line.startswith("diff --git "):
            flush_file()
            old_path, new_path = _paths_from_git_header(line)
            pending = _PendingFile(old_path=old_path, new_path=new_path)
        elif line.startswith("--- "):
            if pending is None or pending.hunks:
                flush_file()
                pending = _PendingFile()
            pending.old_path = _strip_prefix(line[4:], "a/")
        elif line.startswith("+++ ") and pending is not None:
            pending.new_path = _strip_prefix(line[4:], "b/")
        elif line.startswith("@@"):
            parsed = parse_hunk_header(line)
            if parsed is None or pending is None:
                logger.debug("Ignoring stray hunk header: %r", line)
                continue
            old_start, old_count, new_start, new_count = parsed
            hunk = _PendingHunk(
                old_start=old_start,
                old_count=old_count,
                new_start=new_start,
                new_count=new_count,
                lines=[line],
                old_remaining=old_count,
                new_remaining=new_count,
            )
        elif pending is not None:
            if line.startswith("new file mode"):
                pending.new_file = True
            elif line.startswith("deleted file mode"):
                pending.deleted_file = True
            elif line.startswith("rename from "):
                pending.renamed = True
                pending.old_path = line.removeprefix("rename from ").strip()
            elif line.startswith("rename to "):
                pending.renamed = True
                pending.new_path = line.removeprefix("rename to ").strip()
            elif line.startswith("Binary files "):
                logger.debug("Binary section for %s", pending.new_path or pending.old_path)

    flush_file()
    return files
