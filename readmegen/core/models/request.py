"""
Project request — what the user told us about the project.

Built once per run by an input provider and never mutated afterwards.
"""

from __future__ import annotations

from pathlib import Path

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from readmegen.core.errors import ValidationError

# Marker a repository link must contain to be accepted
REPO_HOST_MARKER = "github.com"


def parse_ignore_names(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated ignore string into trimmed, non-empty names."""
    if not raw:
        return ()
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def check_repo_link(value: str | None) -> str | None:
    """Return an error message for a bad repository link, or None if valid."""
    if not value or not value.strip():
        return "Repository link is required"
    if REPO_HOST_MARKER not in value:
        return "Please enter a valid GitHub URL"
    return None


class ProjectRequest(BaseModel):
    """Immutable input for one generation run."""

    model_config = ConfigDict(frozen=True)

    overview: str = ""
    repo_link: str
    workspace_root: Path
    extra_ignore_names: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("overview", mode="before")
    @classmethod
    def _trim_overview(cls, v: str | None) -> str:
        return (v or "").strip()

    @field_validator("repo_link", mode="before")
    @classmethod
    def _check_repo_link(cls, v: str | None) -> str:
        problem = check_repo_link(v)
        if problem:
            raise ValueError(problem)
        return v.strip()

    @field_validator("extra_ignore_names", mode="before")
    @classmethod
    def _split_ignores(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            return parse_ignore_names(v)
        return tuple(name.strip() for name in v if name and name.strip())

    @classmethod
    def create(
        cls,
        *,
        repo_link: str | None,
        workspace_root: Path,
        overview: str | None = None,
        extra_ignore_names: str | list[str] | tuple[str, ...] | None = None,
    ) -> ProjectRequest:
        """Build a request, raising the pipeline's ValidationError on bad input."""
        try:
            return cls(
                overview=overview,
                repo_link=repo_link,
                workspace_root=workspace_root,
                extra_ignore_names=extra_ignore_names,
            )
        except pydantic.ValidationError as e:
            messages = [err["msg"].removeprefix("Value error, ") for err in e.errors()]
            raise ValidationError("; ".join(messages)) from e
