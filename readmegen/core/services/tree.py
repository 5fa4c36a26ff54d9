"""
Directory tree renderer — a deterministic ``tree``-style snapshot.

Entries are sorted by name and walked depth-first, so the same
directory contents always render to the same lines.  Entries that
cannot be stat-ed or listed are logged, recorded as skipped, and
the walk carries on with the next sibling.

Usage::

    from readmegen.core.services.tree import render_folder_structure

    result = render_folder_structure(Path("."), ["coverage"])
    print(result.to_markdown())
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from readmegen.core.errors import FileSystemError
from readmegen.core.models.tree import (
    BLANK,
    CONTINUATION,
    Connector,
    RenderResult,
    SkippedEntry,
    TreeLine,
)
from readmegen.core.services.ignore import build_ignore_list

logger = logging.getLogger(__name__)

# Well-known files that get a trailing "# comment"
FILE_COMMENTS: dict[str, str] = {
    "app.py": "main FastAPI app",
    "README.md": "Project documentation",
    ".gitignore": "gitignore file for GitHub",
    "__init__.py": "initializes package",
    "log.py": "main logic",
    "models.py": "models",
}


def render_tree(root: Path, ignore: frozenset[str]) -> RenderResult:
    """Render the tree below ``root``, skipping names in ``ignore``.

    Raises:
        FileSystemError: If ``root`` itself is missing or cannot be listed.
    """
    root = Path(root)
    try:
        names = _list_dir(root)
    except OSError as e:
        raise FileSystemError(f"Cannot read directory: {root} ({e.strerror or e})") from e

    result = RenderResult(root_name=_display(_root_name(root)))
    _walk(root, names, "", ignore, result)

    if result.skipped:
        logger.warning(
            "Tree for %s rendered with %d skipped entr%s",
            root, len(result.skipped), "y" if len(result.skipped) == 1 else "ies",
        )
    logger.debug("Rendered %d tree lines for %s", len(result.lines), root)
    return result


def render_folder_structure(
    root: Path,
    custom_names: Iterable[str] | None = None,
) -> RenderResult:
    """Build the ignore list from ``custom_names`` and render ``root``."""
    logger.info("Generating folder structure for: %s", root)
    return render_tree(root, build_ignore_list(custom_names))


def _walk(
    directory: Path,
    names: list[str],
    prefix: str,
    ignore: frozenset[str],
    result: RenderResult,
) -> None:
    entries = [name for name in names if name not in ignore]

    for index, name in enumerate(entries):
        path = directory / name
        try:
            st = path.lstat()
        except OSError as e:
            _skip(result, path, e)
            continue

        is_last = index == len(entries) - 1
        result.lines.append(
            TreeLine(
                prefix=prefix,
                connector=Connector.LAST if is_last else Connector.BRANCH,
                name=_display(name),
                annotation=FILE_COMMENTS.get(name, ""),
            )
        )

        # Symlinks are shown but never followed
        if not stat.S_ISDIR(st.st_mode):
            continue

        try:
            children = _list_dir(path)
        except OSError as e:
            _skip(result, path, e)
            continue

        _walk(path, children, prefix + (BLANK if is_last else CONTINUATION), ignore, result)


def _list_dir(directory: Path) -> list[str]:
    # Byte order of the on-disk names, undecodable bytes included
    return sorted(os.listdir(directory), key=os.fsencode)


def _display(name: str) -> str:
    """Printable UTF-8 form of a name; undecodable bytes become ``\\xNN``."""
    return os.fsencode(name).decode("utf-8", "backslashreplace")


def _skip(result: RenderResult, path: Path, error: OSError) -> None:
    reason = error.strerror or str(error)
    logger.warning("Cannot access: %s: %s", path, reason)
    result.skipped.append(SkippedEntry(path=_display(str(path)), reason=reason))


def _root_name(root: Path) -> str:
    name = root.name
    if not name:
        name = root.resolve().name or str(root)
    return name
