import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from hunkview.diff.languages import LANGUAGE_TABLE, extend_table
from hunkview.errors import ConfigError

logger = logging.getLogger(__name__)

STRICT_ENV = "HUNKVIEW_STRICT"
LANGUAGES_ENV = "HUNKVIEW_LANGUAGES"


@dataclass(frozen=True)
class Settings:
    strict: bool = False
    languages: Mapping[str, str] = field(default_factory=lambda: LANGUAGE_TABLE)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in {"1", "true", "yes"}


def load_language_overrides(path: Path) -> dict[str, str]:
    """
    Read an extension -> language mapping from a YAML file.

    The document must be a flat mapping of strings, e.g. ``vue: xml``.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read language table {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in language table {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Language table {path} must be a mapping")

    overrides: dict[str, str] = {}
    for ext, tag in data.items():
        if not isinstance(ext, str) or not isinstance(tag, str):
            raise ConfigError(f"Language table {path} entries must be strings: {ext!r}")
        overrides[ext] = tag
    return overrides


def load_settings(languages_path: Path | None = None) -> Settings:
    strict = _env_flag(STRICT_ENV)

    if languages_path is None:
        env_path = os.getenv(LANGUAGES_ENV)
        languages_path = Path(env_path) if env_path else None

    languages = LANGUAGE_TABLE
    if languages_path is not None:
        overrides = load_language_overrides(languages_path)
        languages = extend_table(overrides)
        logger.debug("Loaded %d language overrides from %s", len(overrides), languages_path)

    return Settings(strict=strict, languages=languages)
