"""
Generate use case — the full pipeline from user input to README.md.

    config check → project input → tree → generation → save

Every pipeline error is caught here and reported on the result as a
single message; nothing is retried automatically.  Cancellation at the
input step returns before anything touches disk or network.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from readmegen.adapters.base import InputProvider
from readmegen.core.errors import (
    ConfigurationError,
    PersistenceCancelled,
    ReadmeGenError,
)
from readmegen.core.models.generation import (
    GeneratedDocument,
    GenerationConfig,
    PersistenceOutcome,
)
from readmegen.core.models.request import ProjectRequest
from readmegen.core.models.tree import RenderResult
from readmegen.core.persistence.readme_file import save_readme
from readmegen.core.services.generation import GenerationClient
from readmegen.core.services.tree import render_folder_structure

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of one generate run."""

    request: ProjectRequest | None = None
    tree: RenderResult | None = None
    document: GeneratedDocument | None = None
    outcome: PersistenceOutcome | None = None
    cancelled: bool = False
    error: str | None = None
    error_kind: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome is not None and self.error is None

    @property
    def can_retry_save(self) -> bool:
        """Generation succeeded but saving did not."""
        return self.document is not None and self.outcome is None and self.error is not None

    @property
    def status(self) -> str:
        if self.ok:
            return "ok"
        if self.cancelled:
            return "cancelled"
        return "failed"

    def to_dict(self) -> dict:
        result: dict = {"status": self.status}
        if self.error:
            result["error"] = self.error
            result["error_kind"] = self.error_kind
        if self.request:
            result["workspace"] = str(self.request.workspace_root)
            result["repo_link"] = self.request.repo_link
        if self.tree:
            result["tree_lines"] = len(self.tree.lines)
            result["skipped"] = len(self.tree.skipped)
        if self.outcome:
            result.update(self.outcome.to_dict())
        if self.warnings:
            result["warnings"] = self.warnings
        return result

    def fail(self, error: ReadmeGenError) -> GenerateResult:
        self.error = str(error)
        self.error_kind = error.kind
        return self


def generate_readme(
    provider: InputProvider,
    config: GenerationConfig,
    *,
    client: GenerationClient | None = None,
    opener: Callable[[str], object] | None = None,
    now: datetime | None = None,
) -> GenerateResult:
    """Run the README pipeline once.

    Args:
        provider: Supplies the project request and conflict decisions.
        config: Resolved generation settings.
        client: Generation client (default: a fresh ``GenerationClient``).
        opener: Used to open the saved README when ``config.auto_open``.
        now: Clock override for backup names.

    Returns:
        GenerateResult — check ``ok``, ``cancelled`` and ``error``.
    """
    result = GenerateResult()

    # ── Config ───────────────────────────────────────────────────
    if not config.has_api_key:
        return result.fail(ConfigurationError(
            "Groq API key is not configured. Set api_key in readmegen.yml, "
            "or GROQ_API_KEY in the environment or a .env file "
            "(see 'readmegen config env-template')."
        ))

    # ── Project input ────────────────────────────────────────────
    try:
        request = provider.obtain_project_request()
    except ReadmeGenError as e:
        logger.error("Invalid project input: %s", e)
        return result.fail(e)

    if request is None:
        logger.info("Generation cancelled before start")
        result.cancelled = True
        return result
    result.request = request

    # ── Tree, generation, save ───────────────────────────────────
    try:
        tree = render_folder_structure(request.workspace_root, request.extra_ignore_names)
        result.tree = tree
        result.warnings.extend(f"Cannot access: {s.path} ({s.reason})" for s in tree.skipped)

        client = client or GenerationClient()
        result.document = client.generate(request, tree.to_markdown(), config)
    except ReadmeGenError as e:
        logger.error("README generation failed: %s", e)
        return result.fail(e)

    return _save(result, provider, config, opener, now)


def retry_persistence(
    result: GenerateResult,
    provider: InputProvider,
    config: GenerationConfig,
    *,
    opener: Callable[[str], object] | None = None,
    now: datetime | None = None,
) -> GenerateResult:
    """Retry only the save step of a run whose save failed."""
    if not result.can_retry_save:
        raise ValueError("Nothing to retry: the run has no unsaved document")

    result.error = None
    result.error_kind = None
    return _save(result, provider, config, opener, now)


def _save(
    result: GenerateResult,
    provider: InputProvider,
    config: GenerationConfig,
    opener: Callable[[str], object] | None,
    now: datetime | None,
) -> GenerateResult:
    assert result.request is not None
    assert result.document is not None

    try:
        result.outcome = save_readme(
            result.document.content,
            result.request.workspace_root,
            provider.decide_conflict,
            auto_open=config.auto_open,
            opener=opener,
            now=now,
        )
    except PersistenceCancelled:
        logger.info("Save cancelled by user; README left untouched")
        result.cancelled = True
    except ReadmeGenError as e:
        logger.error("Saving README failed: %s", e)
        result.fail(e)

    return result
