from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class FileStatus(StrEnum):
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"


class LineKind(StrEnum):
    HEADER = "header"
    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"


class Hunk(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    old_start: int = Field(ge=0)
    old_count: int = Field(ge=0)
    new_start: int = Field(ge=0)
    new_count: int = Field(ge=0)
    body: str


class FileChange(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    path: str = Field(min_length=1)
    previous_path: str | None = None
    status: FileStatus
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    hunks: tuple[Hunk, ...] = ()


class ClassifiedLine(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kind: LineKind
    text: str
    old_line_number: int | None = None
    new_line_number: int | None = None

    @property
    def marker(self) -> str:
        if self.kind == LineKind.ADDITION:
            return "+"
        if self.kind == LineKind.DELETION:
            return "-"
        if self.kind == LineKind.CONTEXT:
            return " "
        return ""


class LineGroup(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    hunk: Hunk
    lines: tuple[ClassifiedLine, ...]


class FilePresentation(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    display_path: str
    is_rename: bool
    language: str | None = None
    line_groups: tuple[LineGroup, ...] = ()

    @property
    def has_textual_changes(self) -> bool:
        return bool(self.line_groups)


class ChangesetSummary(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    file_count: int = 0
    total_additions: int = 0
    total_deletions: int = 0

    def __add__(self, other: "ChangesetSummary") -> "ChangesetSummary":
        return ChangesetSummary(
            file_count=self.file_count + other.file_count,
            total_additions=self.total_additions + other.total_additions,
            total_deletions=self.total_deletions + other.total_deletions,
        )


class DiffWarning(BaseModel):
    code: str
    message: str
    path: str | None = None
    hunk_index: int | None = None
