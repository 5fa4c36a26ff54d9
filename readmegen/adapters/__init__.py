"""Adapters — input providers the generate pipeline talks to.

Public re-exports for convenient access.
"""

from readmegen.adapters.base import InputProvider, resolve_workspace
from readmegen.adapters.prompt import PromptInputProvider
from readmegen.adapters.static import StaticInputProvider

__all__ = [
    "InputProvider",
    "PromptInputProvider",
    "StaticInputProvider",
    "resolve_workspace",
]
