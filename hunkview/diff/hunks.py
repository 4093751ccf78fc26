import re
from functools import lru_cache

from hunkview.diff.classifier import classify, split_lines
from hunkview.diff.models import ClassifiedLine, Hunk

HUNK_HEADER_RE = re.compile(r"@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


@lru_cache(maxsize=2048)
def expand(hunk: Hunk) -> tuple[ClassifiedLine, ...]:
    """
    Reconstruct the classified lines of a hunk.

    Numbering is seeded from the hunk's declared starts. The declared counts
    are not checked here; see `hunkview.diff.validation` for that.
    """
    return classify(hunk.body, hunk.old_start, hunk.new_start)


def parse_hunk_header(line: str) -> tuple[int, int, int, int] | None:
    """
    Parse ``@@ -old_start[,old_count] +new_start[,new_count] @@``.

    An omitted count means a single line, as in `diff -u` output.
    """
    match = HUNK_HEADER_RE.match(line)
    if not match:
        return None
    old_start = int(match.group(1))
    old_count = int(match.group(2)) if match.group(2) is not None else 1
    new_start = int(match.group(3))
    new_count = int(match.group(4)) if match.group(4) is not None else 1
    return old_start, old_count, new_start, new_count


def hunk_from_body(body: str) -> Hunk | None:
    lines = split_lines(body)
    if not lines:
        return None
    parsed = parse_hunk_header(lines[0])
    if parsed is None:
        return None
    old_start, old_count, new_start, new_count = parsed
    return Hunk(
        old_start=old_start,
        old_count=old_count,
        new_start=new_start,
        new_count=new_count,
        body=body,
    )
