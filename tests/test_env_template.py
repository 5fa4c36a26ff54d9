"""
Tests for the .env template and the config report.
"""

from pathlib import Path

import pytest

from readmegen.core.config.loader import load_environment
from readmegen.core.config.resolver import resolve_config
from readmegen.core.services.env_template import create_env_template
from readmegen.core.use_cases.config_show import show_config


class TestCreateEnvTemplate:
    def test_creates_file(self, tmp_path: Path):
        path = create_env_template(tmp_path)
        assert path == tmp_path / ".env"
        assert "GROQ_API_KEY=your_groq_api_key_here" in path.read_text()

    def test_template_is_loadable(self, tmp_path: Path):
        create_env_template(tmp_path)
        cfg = resolve_config({}, load_environment(tmp_path, environ={}))
        assert cfg.api_key == "your_groq_api_key_here"
        assert cfg.model == "llama-3.3-70b-versatile"

    def test_refuses_existing(self, tmp_path: Path):
        (tmp_path / ".env").write_text("X=1\n")
        with pytest.raises(FileExistsError):
            create_env_template(tmp_path)

    def test_overwrite(self, tmp_path: Path):
        (tmp_path / ".env").write_text("X=1\n")
        create_env_template(tmp_path, overwrite=True)
        assert "X=1" not in (tmp_path / ".env").read_text()


class TestShowConfig:
    def test_both_env_names_reported(self, tmp_path: Path):
        report = show_config(
            workspace_root=tmp_path,
            environ={"GROQ_API_TOKEN": "tok_abcdefghijk"},
        )
        assert report.env_keys == {"GROQ_API_KEY": None, "GROQ_API_TOKEN": "tok_abcd..."}
        assert report.api_key_source == "Environment variable"
        assert report.config.api_key == "tok_abcdefghijk"

    def test_explicit_settings_path(self, tmp_path: Path):
        settings = tmp_path / "s.yml"
        settings.write_text("model: from-file\n")
        report = show_config(settings_path=settings, workspace_root=tmp_path, environ={})
        assert report.settings_path == settings
        assert report.config.model == "from-file"
        assert report.sources["model"] == "settings"

    def test_to_dict_never_leaks_key(self, tmp_path: Path):
        report = show_config(workspace_root=tmp_path, environ={"GROQ_API_KEY": "gsk_secret_value"})
        assert "gsk_secret_value" not in str(report.to_dict())
