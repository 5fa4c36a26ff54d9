"""
Config show use case — report the effective settings and where the
API key comes from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from readmegen.core.config.loader import (
    find_settings_file,
    load_environment,
    load_settings,
)
from readmegen.core.config.resolver import (
    ENV_API_KEY,
    ENV_API_KEY_ALT,
    SOURCE_DEFAULT,
    resolve_with_sources,
)
from readmegen.core.errors import ConfigError
from readmegen.core.models.generation import GenerationConfig, mask_secret

_SOURCE_LABELS = {
    "settings": "Settings file",
    "environment": "Environment variable",
}


@dataclass
class ConfigReport:
    """Effective configuration, with secrets masked."""

    settings_path: Path | None = None
    config: GenerationConfig | None = None
    sources: dict[str, str] = field(default_factory=dict)
    settings_key: str | None = None
    env_keys: dict[str, str | None] = field(default_factory=dict)
    error: str | None = None

    @property
    def api_key_source(self) -> str:
        source = self.sources.get("api_key", SOURCE_DEFAULT)
        return _SOURCE_LABELS.get(source, "Not configured")

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        assert self.config is not None
        return {
            "settings_path": str(self.settings_path) if self.settings_path else None,
            "api_key_source": self.api_key_source,
            "settings_api_key": self.settings_key,
            "environment": self.env_keys,
            "effective": {
                "api_key": self.config.masked_key(),
                "model": self.config.model,
                "auto_open": self.config.auto_open,
                "endpoint": self.config.endpoint,
            },
            "sources": self.sources,
        }


def show_config(
    settings_path: Path | None = None,
    workspace_root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConfigReport:
    """Resolve the configuration the way ``generate`` would and describe it.

    Args:
        settings_path: Explicit readmegen.yml. If None, searches upward
            from ``workspace_root``.
        workspace_root: Workspace whose ``.env`` is consulted (default: cwd).
        environ: Process environment override (default: ``os.environ``).
    """
    report = ConfigReport()
    workspace_root = workspace_root or Path.cwd()

    if settings_path is None:
        settings_path = find_settings_file(workspace_root)
    report.settings_path = settings_path

    try:
        settings = load_settings(settings_path)
    except ConfigError as e:
        report.error = str(e)
        return report

    env = load_environment(workspace_root, environ)
    resolved = resolve_with_sources(settings.as_source(), env)
    report.config = resolved.config
    report.sources = resolved.sources

    if settings.api_key and settings.api_key.strip():
        report.settings_key = mask_secret(settings.api_key.strip())
    for name in (ENV_API_KEY, ENV_API_KEY_ALT):
        value = (env.get(name) or "").strip()
        report.env_keys[name] = mask_secret(value) if value else None

    return report
