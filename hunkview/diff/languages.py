from collections.abc import Mapping
from types import MappingProxyType

# Extension (lowercase, no dot) -> highlighter language tag.
LANGUAGE_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "js": "javascript",
        "jsx": "javascript",
        "ts": "typescript",
        "tsx": "typescript",
        "py": "python",
        "rb": "ruby",
        "go": "go",
        "rs": "rust",
        "java": "java",
        "kt": "kotlin",
        "swift": "swift",
        "c": "c",
        "cpp": "cpp",
        "h": "c",
        "hpp": "cpp",
        "cs": "csharp",
        "php": "php",
        "sql": "sql",
        "html": "html",
        "css": "css",
        "scss": "scss",
        "less": "less",
        "json": "json",
        "yaml": "yaml",
        "yml": "yaml",
        "xml": "xml",
        "md": "markdown",
        "sh": "bash",
        "bash": "bash",
        "zsh": "bash",
        "dockerfile": "dockerfile",
        "makefile": "makefile",
    }
)


def file_extension(path: str) -> str | None:
    """Return the lowercased text after the last dot of the file name, if any."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return None
    extension = name.rsplit(".", 1)[1].lower()
    return extension or None


def resolve_language(path: str, table: Mapping[str, str] | None = None) -> str | None:
    extension = file_extension(path)
    if extension is None:
        return None
    table = LANGUAGE_TABLE if table is None else table
    return table.get(extension)


def extend_table(extra: Mapping[str, str], base: Mapping[str, str] = LANGUAGE_TABLE) -> Mapping[str, str]:
    merged = dict(base)
    merged.update({ext.lower().lstrip("."): tag for ext, tag in extra.items()})
    return MappingProxyType(merged)
