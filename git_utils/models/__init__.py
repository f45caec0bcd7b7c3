"""Data models for git-utils."""

from .ref import Ref, RefScope, ActionKind, ActionRequest, ActionResult
from .keys import KeyEvent, KeyKind

__all__ = [
    "Ref",
    "RefScope",
    "ActionKind",
    "ActionRequest",
    "ActionResult",
    "KeyEvent",
    "KeyKind",
]
