"""
Tests for the generate use case — the full pipeline with test doubles.
"""

import os
import sys
from datetime import UTC, datetime
from pathlib import Path

import httpx
import pytest

from conftest import request_json
from readmegen.adapters import StaticInputProvider
from readmegen.adapters.base import resolve_workspace
from readmegen.core.errors import PersistenceError, ValidationError
from readmegen.core.models.generation import ConflictDecision, GenerationConfig
from readmegen.core.use_cases.generate import generate_readme, retry_persistence

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)


def _provider(workspace: Path, conflict=ConflictDecision.CANCEL, **kwargs) -> StaticInputProvider:
    return StaticInputProvider.from_values(
        workspace_root=workspace,
        repo_link=kwargs.pop("repo_link", "https://github.com/octo/demo"),
        conflict=conflict,
        **kwargs,
    )


class _RaisingProvider(StaticInputProvider):
    def __init__(self, error: Exception):
        super().__init__(None)
        self._error = error

    def obtain_project_request(self):
        raise self._error


class TestGenerateReadme:
    def test_happy_path(self, workspace: Path, ok_client, config):
        client, seen = ok_client
        result = generate_readme(_provider(workspace), config, client=client)

        assert result.ok
        assert result.status == "ok"
        assert result.outcome.written_path == workspace / "README.md"
        assert (workspace / "README.md").read_text() == "# Demo\n\nGenerated."
        # Tree is sent as a fenced block, with .git ignored by default
        user = request_json(seen[0])["messages"][1]["content"]
        assert "```\ndemo/\n├── app.py  # main FastAPI app" in user
        assert ".git" not in user

    @pytest.mark.skipif(sys.platform in ("darwin", "win32"), reason="needs byte file names")
    def test_undecodable_file_name_reaches_api(self, workspace: Path, ok_client, config):
        client, seen = ok_client
        with open(os.path.join(os.fsencode(workspace), b"bad\xffname.txt"), "wb"):
            pass

        result = generate_readme(_provider(workspace), config, client=client)

        assert result.ok, result.error
        user = request_json(seen[0])["messages"][1]["content"]
        assert "bad\\xffname.txt" in user

    def test_missing_key_aborts_before_input(self, workspace: Path, ok_client):
        client, seen = ok_client
        provider = _provider(workspace)

        result = generate_readme(provider, GenerationConfig(api_key=""), client=client)

        assert result.error_kind == "configuration"
        assert "API key" in result.error
        assert provider.request_calls == 0
        assert seen == []

    def test_cancelled_input_has_no_side_effects(self, workspace: Path, ok_client, config):
        client, seen = ok_client
        before = sorted(p.name for p in workspace.iterdir())

        result = generate_readme(StaticInputProvider(None), config, client=client)

        assert result.cancelled
        assert result.error is None
        assert seen == []
        assert sorted(p.name for p in workspace.iterdir()) == before

    def test_validation_error_reported(self, ok_client, config):
        client, seen = ok_client
        provider = _RaisingProvider(ValidationError("Please enter a valid GitHub URL"))

        result = generate_readme(provider, config, client=client)

        assert result.error == "Please enter a valid GitHub URL"
        assert result.error_kind == "validation"
        assert seen == []

    def test_api_error_leaves_no_file(self, workspace: Path, make_client, config):
        client, _ = make_client(
            lambda r: httpx.Response(403, json={"error": {"message": "invalid key"}})
        )
        result = generate_readme(_provider(workspace), config, client=client)

        assert result.status == "failed"
        assert result.error == "API Error (403): invalid key"
        assert result.error_kind == "api"
        assert not (workspace / "README.md").exists()
        assert not result.can_retry_save

    def test_missing_workspace_is_filesystem_error(self, tmp_path: Path, ok_client, config):
        client, seen = ok_client
        result = generate_readme(_provider(tmp_path / "gone"), config, client=client)
        assert result.error_kind == "filesystem"
        assert seen == []

    def test_extra_ignores_reach_tree(self, workspace: Path, ok_client, config):
        client, seen = ok_client
        generate_readme(_provider(workspace, extra_ignore_names="pkg"), config, client=client)
        user = request_json(seen[0])["messages"][1]["content"]
        assert "pkg" not in user

    def test_conflict_cancel_is_not_an_error(self, workspace: Path, ok_client, config):
        client, _ = ok_client
        (workspace / "README.md").write_text("keep me")
        provider = _provider(workspace, conflict=ConflictDecision.CANCEL)

        result = generate_readme(provider, config, client=client)

        assert result.cancelled
        assert result.error is None
        assert result.document is not None
        assert provider.conflict_calls == [workspace / "README.md"]
        assert (workspace / "README.md").read_text() == "keep me"

    def test_conflict_backup(self, workspace: Path, ok_client, config):
        client, _ = ok_client
        (workspace / "README.md").write_text("old")

        result = generate_readme(
            _provider(workspace, conflict=ConflictDecision.BACKUP), config, client=client, now=NOW,
        )

        assert result.ok
        assert result.outcome.backup_path.name == "README.backup.2026-01-02T03-04-05-000Z.md"
        assert result.outcome.backup_path.read_text() == "old"

    def test_auto_open(self, workspace: Path, ok_client):
        client, _ = ok_client
        opened: list[str] = []
        cfg = GenerationConfig(api_key="k", auto_open=True)

        generate_readme(_provider(workspace), cfg, client=client, opener=opened.append)

        assert opened == [str(workspace / "README.md")]

    def test_skipped_entries_become_warnings(self, workspace: Path, ok_client, config, monkeypatch):
        client, _ = ok_client
        original = Path.lstat

        def flaky_lstat(self, *args, **kwargs):
            if self.name == "models.py":
                raise PermissionError(13, "Permission denied")
            return original(self, *args, **kwargs)

        monkeypatch.setattr(Path, "lstat", flaky_lstat)
        result = generate_readme(_provider(workspace), config, client=client)

        assert result.ok
        assert len(result.warnings) == 1
        assert "models.py" in result.warnings[0]

    def test_to_dict(self, workspace: Path, ok_client, config):
        client, _ = ok_client
        data = generate_readme(_provider(workspace), config, client=client).to_dict()
        assert data["status"] == "ok"
        assert data["written_path"] == str(workspace / "README.md")
        assert data["backup_path"] is None
        assert data["tree_lines"] == 4


class TestRetryPersistence:
    def test_retry_after_failed_save(self, workspace: Path, ok_client, config, monkeypatch):
        client, seen = ok_client
        provider = _provider(workspace)

        def broken_save(*args, **kwargs):
            raise PersistenceError("disk full")

        monkeypatch.setattr("readmegen.core.use_cases.generate.save_readme", broken_save)
        result = generate_readme(provider, config, client=client)
        assert result.error_kind == "persistence"
        assert result.can_retry_save
        assert result.document.content == "# Demo\n\nGenerated."

        monkeypatch.undo()
        result = retry_persistence(result, provider, config)

        assert result.ok
        assert len(seen) == 1  # no second generation request
        assert (workspace / "README.md").read_text() == "# Demo\n\nGenerated."


class TestResolveWorkspace:
    def test_directory(self, tmp_path: Path):
        assert resolve_workspace(tmp_path) == tmp_path.resolve()

    def test_file_resolves_to_parent(self, tmp_path: Path):
        f = tmp_path / "main.py"
        f.write_text("")
        assert resolve_workspace(f) == tmp_path.resolve()
