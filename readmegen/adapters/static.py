"""
Static input provider — fixed answers, no prompting.

Used by ``readmegen generate --yes`` and as the test double for the
generate use case.  Records every call it receives.
"""

from __future__ import annotations

from pathlib import Path

from readmegen.adapters.base import InputProvider
from readmegen.core.models.generation import ConflictDecision
from readmegen.core.models.request import ProjectRequest


class StaticInputProvider(InputProvider):
    """Returns the same request and conflict decision every time.

    Args:
        request: The request to hand out, or None to simulate a cancel.
        conflict: Decision returned for an existing README.
    """

    def __init__(
        self,
        request: ProjectRequest | None,
        conflict: ConflictDecision | None = ConflictDecision.CANCEL,
    ):
        self._request = request
        self._conflict = conflict
        self._conflict_calls: list[Path] = []
        self._request_calls = 0

    @classmethod
    def from_values(
        cls,
        *,
        workspace_root: Path,
        repo_link: str | None,
        overview: str | None = None,
        extra_ignore_names: str | list[str] | tuple[str, ...] | None = None,
        conflict: ConflictDecision | None = ConflictDecision.CANCEL,
    ) -> StaticInputProvider:
        """Validate the values up front and wrap them in a provider."""
        request = ProjectRequest.create(
            repo_link=repo_link,
            workspace_root=workspace_root,
            overview=overview,
            extra_ignore_names=extra_ignore_names,
        )
        return cls(request, conflict)

    @property
    def conflict_calls(self) -> list[Path]:
        """Paths passed to decide_conflict, in call order."""
        return self._conflict_calls

    @property
    def request_calls(self) -> int:
        return self._request_calls

    def obtain_project_request(self) -> ProjectRequest | None:
        self._request_calls += 1
        return self._request

    def decide_conflict(self, existing: Path) -> ConflictDecision | None:
        self._conflict_calls.append(existing)
        return self._conflict
