"""
Static data bundled with the package.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

_DATA_DIR = Path(__file__).parent

SAMPLE_README_FILE = "sample_readme.md"


@lru_cache(maxsize=1)
def sample_readme() -> str:
    """The reference README used to anchor the generated format."""
    return (_DATA_DIR / SAMPLE_README_FILE).read_text(encoding="utf-8")
