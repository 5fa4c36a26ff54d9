"""
Error taxonomy — every failure the pipeline can report.

Only traversal problems are recovered where they happen (the tree
renderer records them as ``SkippedEntry`` and moves on).  Everything
else propagates up to the generate use case, which turns it into a
single descriptive message on the result.
"""

from __future__ import annotations


class ReadmeGenError(Exception):
    """Base class for all pipeline failures."""

    kind = "error"


class ConfigurationError(ReadmeGenError):
    """No usable API key (or other unusable configuration)."""

    kind = "configuration"


class ConfigError(ConfigurationError):
    """Raised when the settings file is unreadable or malformed."""


class ValidationError(ReadmeGenError):
    """Project input is missing or malformed (e.g. a bad repo link)."""

    kind = "validation"


class FileSystemError(ReadmeGenError):
    """The root directory of a tree render cannot be read."""

    kind = "filesystem"


class NetworkError(ReadmeGenError):
    """The generation endpoint could not be reached."""

    kind = "network"


class ApiError(ReadmeGenError):
    """The generation endpoint answered with a non-success status."""

    kind = "api"

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"API Error ({status}): {message}")


class InvalidResponse(ReadmeGenError):
    """Success status, but the payload is not a chat completion."""

    kind = "invalid_response"


class PersistenceCancelled(ReadmeGenError):
    """The user declined to overwrite or back up an existing README."""

    kind = "cancelled"


class PersistenceError(ReadmeGenError):
    """Writing README.md (or its backup) failed."""

    kind = "persistence"
