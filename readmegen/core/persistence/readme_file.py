"""
README persistence — write README.md, resolving conflicts with an
existing file.

    absent   → write
    present  → ask: overwrite | backup (then write) | cancel

Writes are atomic (write to temp file, then replace) so an
interrupted run never leaves a half-written README behind.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from readmegen.core.errors import PersistenceCancelled, PersistenceError
from readmegen.core.models.generation import ConflictDecision, PersistenceOutcome

logger = logging.getLogger(__name__)

README_FILE = "README.md"

ConflictResolver = Callable[[Path], ConflictDecision | None]
Opener = Callable[[str], object]


def backup_name(now: datetime) -> str:
    """``README.backup.<ISO-8601 with ':' and '.' replaced by '-'>.md``."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    stamp = now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    stamp = stamp.replace(":", "-").replace(".", "-")
    return f"README.backup.{stamp}.md"


def save_readme(
    content: str,
    target_dir: Path,
    decide_conflict: ConflictResolver,
    *,
    auto_open: bool = False,
    opener: Opener | None = None,
    now: datetime | None = None,
) -> PersistenceOutcome:
    """Save ``content`` as ``target_dir/README.md``.

    Args:
        content: README markdown.
        target_dir: Directory receiving the file.
        decide_conflict: Called with the existing path when README.md is
            already there.  Returning None counts as cancel.
        auto_open: Open the saved file with ``opener`` afterwards.
        opener: Callable taking a path string (e.g. ``click.launch``).
        now: Clock override for the backup timestamp.

    Raises:
        PersistenceCancelled: The conflict was resolved to cancel.
        PersistenceError: The file (or its backup) could not be written.
    """
    readme_path = target_dir / README_FILE
    backup_path: Path | None = None

    if readme_path.exists():
        decision = decide_conflict(readme_path)
        logger.info("%s exists, decision: %s", readme_path, decision.value if decision else "none")

        if decision is None or decision == ConflictDecision.CANCEL:
            raise PersistenceCancelled("Operation cancelled by user")

        if decision == ConflictDecision.BACKUP:
            backup_path = target_dir / backup_name(now or datetime.now(UTC))
            try:
                shutil.copy2(readme_path, backup_path)
            except OSError as e:
                raise PersistenceError(f"Cannot back up {readme_path}: {e}") from e
            logger.info("Backup created: %s", backup_path.name)

    _atomic_write(readme_path, content)
    logger.info("README saved to %s", readme_path)

    if auto_open and opener is not None:
        try:
            opener(str(readme_path))
        except OSError as e:
            logger.warning("Could not open %s: %s", readme_path, e)

    return PersistenceOutcome(written_path=readme_path, backup_path=backup_path)


def _atomic_write(path: Path, content: str) -> None:
    try:
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".readme_", suffix=".tmp")
        tmp = Path(tmp_path)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            tmp.chmod(0o644)
            tmp.replace(path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.error("Failed to save %s: %s", path, e)
        raise PersistenceError(f"Cannot write {path}: {e}") from e
