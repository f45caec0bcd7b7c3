"""Ref model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class RefScope(Enum):
    """Which ref namespaces to list."""
    LOCAL = "local"
    REMOTE = "remote"
    ALL = "all"


class ActionKind(Enum):
    """Operation to perform on the selected ref."""
    CHECKOUT = "checkout"
    DELETE = "delete"
    RENAME = "rename"

    @property
    def is_destructive(self) -> bool:
        return self is ActionKind.DELETE


@dataclass(frozen=True)
class Ref:
    """A branch as seen when the session started."""
    name: str
    is_current: bool = False
    is_remote: bool = False
    committed_date: Optional[int] = None  # Unix timestamp, None = unknown
    commit: Optional[str] = None  # Object name the ref points at

    @property
    def remote_name(self) -> Optional[str]:
        """Remote part of a remote ref ('origin' for 'origin/feature/x')."""
        if not self.is_remote or "/" not in self.name:
            return None
        return self.name.split("/", 1)[0]

    @property
    def local_name(self) -> str:
        """Branch name without the remote prefix."""
        if not self.is_remote or "/" not in self.name:
            return self.name
        return self.name.split("/", 1)[1]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ActionRequest:
    """An action the user confirmed on a ref."""
    ref: Ref
    kind: ActionKind
    new_name: Optional[str] = None  # Rename target


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a successful action."""
    request: ActionRequest
    message: str
