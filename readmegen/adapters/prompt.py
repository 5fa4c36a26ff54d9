"""
Prompt input provider — asks for project details in the terminal.

Three steps, like a wizard:

    Step 1/3  project overview (optional)
    Step 2/3  GitHub repository link (required, validated)
    Step 3/3  extra names to ignore (comma-separated, optional)

Values supplied up front (e.g. from CLI options) skip their step.
Ctrl-C or end-of-input at any step cancels the run.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from readmegen.adapters.base import InputProvider
from readmegen.core.models.generation import ConflictDecision
from readmegen.core.models.request import ProjectRequest, check_repo_link

logger = logging.getLogger(__name__)


def _validate_repo_link(value: str) -> str:
    problem = check_repo_link(value)
    if problem:
        raise click.BadParameter(problem)
    return value.strip()


class PromptInputProvider(InputProvider):
    """Interactive provider built on ``click.prompt``."""

    def __init__(
        self,
        workspace_root: Path,
        *,
        overview: str | None = None,
        repo_link: str | None = None,
        extra_ignores: str | None = None,
        conflict: ConflictDecision | None = None,
    ):
        self._workspace_root = workspace_root
        self._overview = overview
        self._repo_link = repo_link
        self._extra_ignores = extra_ignores
        self._conflict = conflict

    def obtain_project_request(self) -> ProjectRequest | None:
        try:
            overview = self._overview
            if overview is None:
                overview = click.prompt(
                    "Step 1/3: Enter project overview (optional)",
                    default="",
                    show_default=False,
                )

            repo_link = self._repo_link
            if repo_link is None:
                repo_link = click.prompt(
                    "Step 2/3: Enter GitHub repository link "
                    "(e.g. https://github.com/username/project-name)",
                    value_proc=_validate_repo_link,
                )

            extra_ignores = self._extra_ignores
            if extra_ignores is None:
                extra_ignores = click.prompt(
                    "Step 3/3: Enter additional folders/files to ignore "
                    "(comma-separated, optional)",
                    default="",
                    show_default=False,
                )
        except click.Abort:
            logger.info("Project input cancelled by user")
            return None

        return ProjectRequest.create(
            repo_link=repo_link,
            workspace_root=self._workspace_root,
            overview=overview,
            extra_ignore_names=extra_ignores,
        )

    def decide_conflict(self, existing: Path) -> ConflictDecision | None:
        if self._conflict is not None:
            return self._conflict

        click.secho(f"⚠️  {existing.name} already exists.", fg="yellow")
        try:
            answer = click.prompt(
                "What would you like to do?",
                type=click.Choice([d.value for d in ConflictDecision]),
                default=ConflictDecision.CANCEL.value,
            )
        except click.Abort:
            return None
        return ConflictDecision(answer)
