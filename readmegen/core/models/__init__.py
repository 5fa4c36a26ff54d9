"""
Domain models — pydantic types for readmegen.

All models are re-exported here for convenient access:

    from readmegen.core.models import ProjectRequest, TreeLine, GenerationConfig
"""

from readmegen.core.models.generation import (
    ConflictDecision,
    GeneratedDocument,
    GenerationConfig,
    PersistenceOutcome,
)
from readmegen.core.models.request import ProjectRequest, parse_ignore_names
from readmegen.core.models.tree import Connector, RenderResult, SkippedEntry, TreeLine

__all__ = [
    # generation.py
    "ConflictDecision",
    # tree.py
    "Connector",
    "GeneratedDocument",
    "GenerationConfig",
    "PersistenceOutcome",
    # request.py
    "ProjectRequest",
    "RenderResult",
    "SkippedEntry",
    "TreeLine",
    "parse_ignore_names",
]
