"""
Settings loader — reads readmegen.yml and the environment.

The settings file is the "explicit settings" layer of the resolver.
It is YAML, validated against a pydantic schema, and may sit in the
workspace or any parent directory.  The environment layer is the
process environment on top of the workspace ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel

from readmegen.core.errors import ConfigError

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "readmegen.yml"
ENV_FILE = ".env"


class Settings(BaseModel):
    """Explicit settings, as written in readmegen.yml."""

    api_key: str | None = None
    model: str | None = None
    auto_open: bool | None = None
    endpoint: str | None = None

    def as_source(self) -> dict:
        """Only the keys that were actually set."""
        return self.model_dump(exclude_none=True)


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for readmegen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to readmegen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None) -> Settings:
    """Load and validate the settings file.

    Args:
        path: Path to readmegen.yml. None means "no settings file" and
            yields empty settings.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        return Settings()

    if not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may be wrapped under a "readmegen" key or be flat
    if isinstance(data.get("readmegen"), dict):
        data = data["readmegen"]

    try:
        settings = Settings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings from %s", path)
    return settings


def load_environment(
    workspace_root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Process environment layered over the workspace ``.env`` file.

    Variables already set in the process win over ``.env`` values, the
    same way ``load_dotenv()`` leaves existing variables alone.
    """
    merged: dict[str, str] = {}

    if workspace_root is not None:
        env_path = workspace_root / ENV_FILE
        if env_path.is_file():
            file_values = dotenv_values(env_path, encoding="utf-8")
            merged.update({k: v for k, v in file_values.items() if v is not None})
            logger.debug("Read %d value(s) from %s", len(file_values), env_path)

    merged.update(os.environ if environ is None else environ)
    return merged
