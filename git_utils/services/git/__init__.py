"""Git-related services for git-utils."""

from .repository import GitRepository
from .ref_source import RefSource
from .actions import ActionExecutor

__all__ = [
    "GitRepository",
    "RefSource",
    "ActionExecutor",
]
