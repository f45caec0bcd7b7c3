"""Shared constants for git-utils."""

from typing import List, Tuple


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NOT_A_REPOSITORY = 128  # Same code git uses for "not a git repository"
EXIT_CANCELLED = 130  # Conventional code for Ctrl+C


# Git aliases registered by `git-utils install`: (alias, subcommand)
ALIASES: List[Tuple[str, str]] = [
    ("iswitch", "switch"),
]


# Ref namespaces
LOCAL_REFS = "refs/heads"
REMOTE_REFS = "refs/remotes"


# Symbol constants
SYMBOL_SELECTED = "> "
SYMBOL_UNSELECTED = "  "
SYMBOL_CURRENT_BRANCH = " *"


# Prompt text shown before the query, per action
PROMPTS = {
    "checkout": "Switch to: ",
    "delete": "Delete: ",
    "rename": "Rename: ",
}


# TUI styles (Rich style strings)
TUI_STYLES = {
    "selected": "reverse",
    "current": "green",
    "remote": "red",
    "age": "dim",
    "error": "bold red",
    "info": "green",
    "confirm": "bold yellow",
    "hint": "dim",
    "caret": "reverse",
}


# Footer hints per mode
HINT_TEXT = "↑/↓ move · enter select · esc cancel"
CONFIRM_HINT = "enter/y confirm · any other key to go back"
RENAME_HINT = "enter rename · esc back"
