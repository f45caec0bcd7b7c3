"""Configuration handling for git-utils"""

from dataclasses import dataclass, field
from typing import Optional, List

from git_utils.models.ref import ActionKind, RefScope


@dataclass
class Config:
    """Configuration for the branch picker with validation."""

    # What to list and what to do with the selection
    scope: str = "local"  # local, remote, all
    action: str = "checkout"  # checkout, delete, rename
    initial_query: str = ""

    # Picker behaviour
    wrap_cursor: bool = False
    confirm_destructive: bool = True
    recent_limit: int = 100  # Reflog entries scanned for recently used branches

    # Safety
    require_clean_worktree: bool = True
    force_delete: bool = False
    protected_branches: List[str] = field(default_factory=lambda: ["main", "master"])

    # Environment
    working_dir: Optional[str] = None
    verbose: bool = False
    debug: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_scope()
        self._validate_action()
        self._validate_recent_limit()
        self._validate_protected_branches()
        self._validate_initial_query()

    def _validate_scope(self):
        """Validate scope is one of allowed values."""
        allowed = [s.value for s in RefScope]
        if self.scope not in allowed:
            raise ValueError(f"scope must be one of {allowed}, got '{self.scope}'")

    def _validate_action(self):
        """Validate action is one of allowed values."""
        allowed = [a.value for a in ActionKind]
        if self.action not in allowed:
            raise ValueError(f"action must be one of {allowed}, got '{self.action}'")

    def _validate_recent_limit(self):
        """Validate recent_limit is not negative."""
        if self.recent_limit < 0:
            raise ValueError(f"recent_limit must not be negative, got {self.recent_limit}")

    def _validate_protected_branches(self):
        """Validate protected_branches list."""
        if not isinstance(self.protected_branches, list):
            raise ValueError("protected_branches must be a list")
        self.protected_branches = [name.strip() for name in self.protected_branches if name.strip()]

    def _validate_initial_query(self):
        """Queries are single-line."""
        if "\n" in self.initial_query or "\r" in self.initial_query:
            raise ValueError("initial_query must be a single line")

    @property
    def ref_scope(self) -> RefScope:
        return RefScope(self.scope)

    @property
    def action_kind(self) -> ActionKind:
        return ActionKind(self.action)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "scope": self.scope,
            "action": self.action,
            "initial_query": self.initial_query,
            "wrap_cursor": self.wrap_cursor,
            "confirm_destructive": self.confirm_destructive,
            "recent_limit": self.recent_limit,
            "require_clean_worktree": self.require_clean_worktree,
            "force_delete": self.force_delete,
            "protected_branches": self.protected_branches,
            "working_dir": self.working_dir,
            "verbose": self.verbose,
            "debug": self.debug,
            "log_file": self.log_file,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = set(cls().to_dict())
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
