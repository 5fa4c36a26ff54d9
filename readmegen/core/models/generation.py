"""
Generation models — resolved settings, the generated document, and
the outcome of saving it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_ENDPOINT = "https://api.groq.com/openai/v1/chat/completions"


class GenerationConfig(BaseModel):
    """Effective settings for one run. Never written back by the core."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    model: str = DEFAULT_MODEL
    auto_open: bool = True
    endpoint: str = DEFAULT_ENDPOINT

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def masked_key(self) -> str:
        """First 8 characters of the key, or a placeholder when unset."""
        if not self.api_key:
            return "Not configured"
        return mask_secret(self.api_key)


def mask_secret(value: str) -> str:
    return f"{value[:8]}..."


class GeneratedDocument(BaseModel):
    """Markdown returned by the generation endpoint."""

    content: str


class ConflictDecision(str, Enum):
    """What to do when README.md already exists."""

    OVERWRITE = "overwrite"
    BACKUP = "backup"
    CANCEL = "cancel"


class PersistenceOutcome(BaseModel):
    """Where the README ended up (and its backup, if one was made)."""

    written_path: Path
    backup_path: Path | None = None

    def to_dict(self) -> dict:
        return {
            "written_path": str(self.written_path),
            "backup_path": str(self.backup_path) if self.backup_path else None,
        }
