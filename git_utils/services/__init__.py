"""Services for git-utils."""
