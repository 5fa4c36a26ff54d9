"""
Input provider base — the contract between the pipeline and whoever
gathers project details from the user.

The generate use case only talks to providers through this protocol,
never directly to a terminal or any other UI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from readmegen.core.models.generation import ConflictDecision
from readmegen.core.models.request import ProjectRequest


class InputProvider(ABC):
    """Abstract base class for input providers.

    To create a new provider:
        1. Subclass InputProvider
        2. Implement obtain_project_request and decide_conflict
    """

    @abstractmethod
    def obtain_project_request(self) -> ProjectRequest | None:
        """Collect overview, repo link, workspace and extra ignores.

        Returns None when the user cancels.

        Raises:
            ValidationError: The collected input is unusable.
        """

    @abstractmethod
    def decide_conflict(self, existing: Path) -> ConflictDecision | None:
        """Decide what to do with an existing README. None means cancel."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


def resolve_workspace(path: Path | None) -> Path:
    """Workspace for a target path: a file resolves to its directory."""
    if path is None:
        return Path.cwd().resolve()
    path = path.resolve()
    return path if path.is_dir() else path.parent
