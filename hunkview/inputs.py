import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from hunkview.diff.hunks import hunk_from_body
from hunkview.diff.models import DiffWarning, FileChange, FileStatus, Hunk
from hunkview.errors import ChangesetLoadError

logger = logging.getLogger(__name__)


class ChangesetInputs(BaseModel):
    source: Path
    files: list[FileChange]
    warnings: list[DiffWarning] = Field(default_factory=list)


def load_changeset(path: Path) -> ChangesetInputs:
    """
    Read a changeset from a JSON document.

    The document is either a list of file records or an object with a
    ``files`` list. Records that cannot be normalized are skipped and
    reported as warnings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"changeset not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            document = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ChangesetLoadError(path, exc) from exc

    return changeset_from_document(document, source=path)


def changeset_from_document(document: Any, source: Path) -> ChangesetInputs:
    if isinstance(document, dict):
        raw_files = document.get("files")
    else:
        raw_files = document
    if not isinstance(raw_files, list):
        raise ChangesetLoadError(source, ValueError("expected a list of files"))

    files: list[FileChange] = []
    warnings: list[DiffWarning] = []

    for idx, raw in enumerate(raw_files):
        try:
            normalized = normalize_file(raw)
        except ValidationError as exc:
            logger.warning("Skipping file record %d: %s", idx, exc)
            normalized = None
        if normalized is None:
            warnings.append(
                DiffWarning(
                    code="invalid_record",
                    message=f"file record {idx} could not be normalized",
                    path=raw.get("path") if isinstance(raw, dict) else None,
                )
            )
            continue
        files.append(normalized)

    return ChangesetInputs(source=source, files=files, warnings=warnings)


def _pick(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def normalize_hunk(raw: dict[str, Any]) -> Hunk | None:
    body = _pick(raw, "content", "body")
    if not isinstance(body, str):
        return None

    old_start = _pick(raw, "oldStart", "old_start")
    new_start = _pick(raw, "newStart", "new_start")
    if old_start is None or new_start is None:
        # Fall back to the header line when starts were not pre-parsed.
        return hunk_from_body(body)

    return Hunk(
        old_start=old_start,
        old_count=_pick(raw, "oldLines", "old_lines", "old_count") or 0,
        new_start=new_start,
        new_count=_pick(raw, "newLines", "new_lines", "new_count") or 0,
        body=body,
    )


def normalize_file(raw: Any) -> FileChange | None:
    if not isinstance(raw, dict):
        return None

    path = raw.get("path")
    if not path:
        return None

    status_raw = str(raw.get("status") or "modified").lower()
    try:
        status = FileStatus(status_raw)
    except ValueError:
        return None

    hunks: list[Hunk] = []
    for raw_hunk in raw.get("hunks") or []:
        if not isinstance(raw_hunk, dict):
            return None
        hunk = normalize_hunk(raw_hunk)
        if hunk is None:
            return None
        hunks.append(hunk)

    return FileChange(
        path=path,
        previous_path=_pick(raw, "oldPath", "old_path", "previous_path"),
        status=status,
        additions=raw.get("additions") or 0,
        deletions=raw.get("deletions") or 0,
        hunks=tuple(hunks),
    )
