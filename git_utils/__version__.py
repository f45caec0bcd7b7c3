"""Version information for git-utils."""

__version__ = "0.1.0"
