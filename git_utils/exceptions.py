"""Custom exceptions for git-utils"""

from typing import Optional


class GitUtilsError(Exception):
    """Base exception for all git-utils errors."""
    pass


class RepositoryError(GitUtilsError):
    """Exception raised when the repository cannot be used at all.

    Raised before any interactive session starts: not inside a working tree,
    a bare repository, or a ref store that cannot be read.
    """

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Not a usable git repository: '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ActionError(GitUtilsError):
    """Exception raised when an action on a ref fails."""

    def __init__(self, operation: str, ref: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.ref = ref
        self.message = message

        error_msg = f"Cannot {operation}"
        if ref:
            error_msg += f" '{ref}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class CheckoutError(ActionError):
    """Exception raised when a checkout is refused or fails."""

    def __init__(self, ref: str, message: Optional[str] = None):
        super().__init__("checkout", ref, message)


class ProtectedRefError(ActionError):
    """Exception raised when deleting the current or a protected branch."""

    def __init__(self, ref: str, message: str = "Branch is protected"):
        super().__init__("delete", ref, message)


class TerminalError(GitUtilsError):
    """Exception raised when the terminal cannot be taken over."""
    pass


class InstallError(GitUtilsError):
    """Exception raised when a git alias cannot be registered."""

    def __init__(self, alias: str, message: Optional[str] = None):
        self.alias = alias
        self.message = message

        error_msg = f"Could not install alias '{alias}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
