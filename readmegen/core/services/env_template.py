"""
.env template — scaffold the environment file the config resolver reads.
"""

from __future__ import annotations

import logging
from pathlib import Path

from readmegen.core.config.loader import ENV_FILE
from readmegen.core.config.resolver import ENV_API_KEY, ENV_MODEL
from readmegen.core.models.generation import DEFAULT_MODEL

logger = logging.getLogger(__name__)

ENV_TEMPLATE = f"""\
# readmegen configuration
{ENV_API_KEY}=your_groq_api_key_here
{ENV_MODEL}={DEFAULT_MODEL}

# Get your API key from: https://console.groq.com/keys
# Available models: llama-3.3-70b-versatile, llama-3.1-8b-instant, openai/gpt-oss-120b
"""


def create_env_template(workspace_root: Path, *, overwrite: bool = False) -> Path:
    """Write a ``.env`` template into ``workspace_root``.

    Raises:
        FileExistsError: ``.env`` exists and ``overwrite`` is False.
    """
    env_path = workspace_root / ENV_FILE
    if env_path.exists() and not overwrite:
        raise FileExistsError(f"{env_path} already exists")

    env_path.write_text(ENV_TEMPLATE, encoding="utf-8")
    logger.info(".env template written to %s", env_path)
    return env_path
