import logging
from typing import Protocol

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import get_lexer_by_name

logger = logging.getLogger(__name__)


class Highlighter(Protocol):
    def __call__(self, text: str, language: str) -> str: ...


def plain_highlighter(text: str, language: str) -> str:
    return text


def terminal_highlighter(text: str, language: str) -> str:
    """
    ANSI-colour one line with the pygments lexer registered for ``language``.

    Raises ``pygments.util.ClassNotFound`` for unknown tags; callers go
    through `highlight_line`, which turns that into plain text.
    """
    lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
    return highlight(text, lexer, TerminalFormatter()).rstrip("\n")


def highlight_line(text: str, language: str | None, highlighter: Highlighter) -> str:
    """
    Highlight a single line, degrading to the plain text on any failure.

    A failing highlighter only affects the line it failed on.
    """
    if not language or not text:
        return text
    try:
        return highlighter(text, language)
    except Exception as exc:
        logger.debug("Highlighter failed for language %s: %s", language, exc)
        return text
