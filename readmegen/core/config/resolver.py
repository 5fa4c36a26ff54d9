"""
Configuration resolver — layered lookup of generation settings.

Each field is looked up in an ordered list of named sources and the
first non-empty value wins:

    settings file / CLI flags  >  environment  >  built-in default

This is a pure function of its inputs; callers load the settings file
and the environment themselves (see ``loader.py``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from readmegen.core.models.generation import GenerationConfig

# Environment variables, in lookup order
ENV_API_KEY = "GROQ_API_KEY"
ENV_API_KEY_ALT = "GROQ_API_TOKEN"
ENV_MODEL = "DEFAULT_MODEL"
ENV_ENDPOINT = "READMEGEN_ENDPOINT"

SOURCE_SETTINGS = "settings"
SOURCE_ENVIRONMENT = "environment"
SOURCE_DEFAULT = "default"

# field -> (settings key, environment keys)
_FIELD_KEYS: dict[str, tuple[str, tuple[str, ...]]] = {
    "api_key": ("api_key", (ENV_API_KEY, ENV_API_KEY_ALT)),
    "model": ("model", (ENV_MODEL,)),
    "auto_open": ("auto_open", ()),
    "endpoint": ("endpoint", (ENV_ENDPOINT,)),
}


@dataclass
class ResolvedConfig:
    """A resolved config plus the name of the source behind each field."""

    config: GenerationConfig
    sources: dict[str, str] = field(default_factory=dict)


def resolve_config(
    settings: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
    defaults: GenerationConfig | None = None,
) -> GenerationConfig:
    """Resolve the effective ``GenerationConfig``. Never raises."""
    return resolve_with_sources(settings, env, defaults).config


def resolve_with_sources(
    settings: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
    defaults: GenerationConfig | None = None,
) -> ResolvedConfig:
    """Like ``resolve_config`` but also reports where each value came from."""
    settings = settings or {}
    env = env or {}
    defaults = defaults or GenerationConfig()

    values: dict[str, Any] = {}
    sources: dict[str, str] = {}

    for name, (settings_key, env_keys) in _FIELD_KEYS.items():
        chain: list[tuple[str, Any]] = [(SOURCE_SETTINGS, settings.get(settings_key))]
        chain.extend((SOURCE_ENVIRONMENT, env.get(key)) for key in env_keys)
        chain.append((SOURCE_DEFAULT, getattr(defaults, name)))

        for source, raw in chain:
            value = _usable(raw)
            if value is not None:
                values[name] = value
                sources[name] = source
                break
        else:
            values[name] = getattr(defaults, name)
            sources[name] = SOURCE_DEFAULT

    return ResolvedConfig(config=GenerationConfig(**values), sources=sources)


def _usable(raw: Any) -> Any:
    """Trimmed value, or None if the source has nothing for this field."""
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        return raw if raw else None
    return raw
