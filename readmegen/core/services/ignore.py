"""
Ignore list — names excluded from the directory tree.

Matching is by exact, case-sensitive entry name at any depth.
"""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_IGNORES = frozenset({
    # version control / editors / OS metadata
    ".git", ".vscode", ".idea", ".vs", ".DS_Store",
    # dependencies and virtualenvs
    "node_modules", "venv", "env", ".env",
    # caches
    "__pycache__", ".pytest_cache", ".cache", ".nyc_output",
    # build output
    "dist", "build", ".next", "target", "out", "bin", "obj",
    # scratch and reports
    "logs", "coverage", "tmp", "temp", "FOLDER_STRUCTURE.md",
})


def build_ignore_list(custom_names: Iterable[str] | None = None) -> frozenset[str]:
    """Union the trimmed custom names with ``DEFAULT_IGNORES``.

    Empty names are dropped, duplicates collapse.
    """
    custom = {name.strip() for name in (custom_names or ()) if name and name.strip()}
    return frozenset(custom) | DEFAULT_IGNORES
