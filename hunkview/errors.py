from pathlib import Path


class HunkviewError(Exception):
    pass


class ChangesetLoadError(HunkviewError):
    """Raised when a changeset source cannot be decoded."""

    def __init__(self, source: Path, original_error: Exception):
        self.source = Path(source)
        self.original_error = original_error
        super().__init__(f"Failed to load changeset {self.source}: {original_error}")


class ConfigError(HunkviewError):
    pass
