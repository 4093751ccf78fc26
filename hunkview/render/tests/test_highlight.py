import re

from hunkview.render.highlight import highlight_line, plain_highlighter, terminal_highlighter

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def bracket_highlighter(text: str, language: str) -> str:
    return f"<{language}>{text}</{language}>"


def failing_highlighter(text: str, language: str) -> str:
    raise RuntimeError(f"unknown language: {language}")


def test_highlight_line_calls_highlighter():
    assert highlight_line("x = 1", "python", bracket_highlighter) == "<python>x = 1</python>"


def test_highlight_line_without_language_is_plain():
    assert highlight_line("x = 1", None, bracket_highlighter) == "x = 1"


def test_highlight_line_skips_empty_text():
    assert highlight_line("", "python", bracket_highlighter) == ""


def test_highlight_line_falls_back_on_error():
    assert highlight_line("x = 1", "python", failing_highlighter) == "x = 1"


def test_plain_highlighter_is_identity():
    assert plain_highlighter("fn main() {}", "rust") == "fn main() {}"


def _strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


def test_terminal_highlighter_colours_known_language():
    coloured = terminal_highlighter("def total(items): return 0", "python")
    assert "\x1b[" in coloured
    assert _strip_ansi(coloured) == "def total(items): return 0"


def test_terminal_highlighter_keeps_single_line():
    assert "\n" not in terminal_highlighter("let x = 1;", "rust")


def test_unknown_language_falls_back_to_plain_text():
    assert highlight_line("x = 1", "not-a-language", terminal_highlighter) == "x = 1"
