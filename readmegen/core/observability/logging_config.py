"""
Logging configuration — set up once by the CLI.

Every module does ``logger = logging.getLogger(__name__)`` and inherits
this config; the core never talks to any other log sink.

Console level, in precedence order:
    --debug / --verbose / --quiet  >  READMEGEN_LOG_LEVEL  >  WARNING

READMEGEN_LOG_FILE adds a detailed log file (the place to look when a
run fails); READMEGEN_LOG_FILE_LEVEL sets its level, INFO by default.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LOG_LEVEL = "READMEGEN_LOG_LEVEL"
ENV_LOG_FILE = "READMEGEN_LOG_FILE"
ENV_LOG_FILE_LEVEL = "READMEGEN_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

# WARNING and above — just the message
_FMT_MINIMAL = "%(message)s"

# INFO — timestamped with module context
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"

# DEBUG — file:line as well
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

_DATEFMT_CONSOLE = "%H:%M:%S"

# File output — "[INFO 2026-01-01T12:00:00] message"
_FMT_FILE = "[%(levelname)s %(asctime)s] %(name)s: %(message)s"
_DATEFMT_FILE = "%Y-%m-%dT%H:%M:%S"

# Third-party loggers that log every request at INFO/DEBUG
_NOISY_LOGGERS = ("httpx", "httpcore")


def cli_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Console level name for the global CLI flags."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LOG_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a detailed log file.
        log_file_level: Level for the log file (default: INFO).
        quiet_third_party: Keep HTTP client loggers at WARNING unless
            the console is at DEBUG.
    """
    console_level = _parse_level(level)

    if console_level <= logging.DEBUG:
        fmt = _FMT_DEBUG
    elif console_level <= logging.INFO:
        fmt = _FMT_VERBOSE
    else:
        fmt = _FMT_MINIMAL

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT_CONSOLE))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level, fallback=logging.INFO)
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _parse_level(level: str | None, fallback: int = logging.WARNING) -> int:
    """Level name to its numeric constant; unknown names give ``fallback``."""
    if not level:
        return fallback
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else fallback
