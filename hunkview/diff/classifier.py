"""
Line classification for unified-diff hunk bodies.

`classify` is total: every string input produces a (possibly empty) tuple of
classified lines and never raises. Lines that match none of the rules, such
as ``\\ No newline at end of file``, are dropped without moving the counters.
"""

import logging
from collections.abc import Callable

from hunkview.diff.models import ClassifiedLine, LineKind

logger = logging.getLogger(__name__)

Counters = tuple[int, int]
Rule = Callable[[str, Counters], tuple[ClassifiedLine, Counters]]

HUNK_HEADER_PREFIX = "@@"
ADDED_FILE_MARKER = "+++"
REMOVED_FILE_MARKER = "---"


def split_lines(body: str) -> list[str]:
    raw_lines = body.split("\n")
    # A final newline yields one empty trailing element, not a blank context line.
    if raw_lines and raw_lines[-1] == "":
        raw_lines.pop()
    return [line.removesuffix("\r") for line in raw_lines]


def _is_header(line: str) -> bool:
    return line.startswith(HUNK_HEADER_PREFIX)


def _is_addition(line: str) -> bool:
    return line.startswith("+") and not line.startswith(ADDED_FILE_MARKER)


def _is_deletion(line: str) -> bool:
    return line.startswith("-") and not line.startswith(REMOVED_FILE_MARKER)


def _is_context(line: str) -> bool:
    return line == "" or line.startswith(" ")


def _header(line: str, counters: Counters) -> tuple[ClassifiedLine, Counters]:
    return ClassifiedLine(kind=LineKind.HEADER, text=line), counters


def _addition(line: str, counters: Counters) -> tuple[ClassifiedLine, Counters]:
    old, new = counters
    classified = ClassifiedLine(
        kind=LineKind.ADDITION,
        text=line[1:],
        new_line_number=new,
    )
    return classified, (old, new + 1)


def _deletion(line: str, counters: Counters) -> tuple[ClassifiedLine, Counters]:
    old, new = counters
    classified = ClassifiedLine(
        kind=LineKind.DELETION,
        text=line[1:],
        old_line_number=old,
    )
    return classified, (old + 1, new)


def _context(line: str, counters: Counters) -> tuple[ClassifiedLine, Counters]:
    old, new = counters
    classified = ClassifiedLine(
        kind=LineKind.CONTEXT,
        text=line[1:],
        old_line_number=old,
        new_line_number=new,
    )
    return classified, (old + 1, new + 1)


# Ordered: first matching rule wins.
RULES: tuple[tuple[Callable[[str], bool], Rule], ...] = (
    (_is_header, _header),
    (_is_addition, _addition),
    (_is_deletion, _deletion),
    (_is_context, _context),
)


def classify_line(line: str, counters: Counters) -> tuple[ClassifiedLine | None, Counters]:
    """Classify one raw line, returning it with the counters for the next line."""
    for matches, build in RULES:
        if matches(line):
            return build(line, counters)
    logger.debug("Dropping unaddressable diff line: %r", line)
    return None, counters


def classify(body: str, old_start: int, new_start: int) -> tuple[ClassifiedLine, ...]:
    lines: list[ClassifiedLine] = []
    counters: Counters = (old_start, new_start)

    for raw_line in split_lines(body):
        classified, counters = classify_line(raw_line, counters)
        if classified is not None:
            lines.append(classified)

    return tuple(lines)
