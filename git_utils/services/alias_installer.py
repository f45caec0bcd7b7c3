"""Registers git-utils subcommands as git aliases."""

import shlex
import shutil
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import git

from git_utils.constants import ALIASES
from git_utils.exceptions import InstallError
from git_utils.logging_config import get_logger
from git_utils.services.git.repository import error_text

logger = get_logger(__name__)

SCOPE_FLAGS = {
    "user": "--global",
    "system": "--system",
    "local": "--local",
}


def resolve_executable(argv0: Optional[str] = None) -> str:
    """Absolute path of the running git-utils executable, with forward slashes.

    Git runs `!` aliases through a POSIX shell, even on Windows.
    """
    argv0 = argv0 or sys.argv[0]
    found = shutil.which(argv0)
    path = Path(found) if found else Path(argv0).resolve()
    return path.as_posix()


def alias_command(executable: str, command: str) -> str:
    """Value stored in `alias.<name>`."""
    return f"!{shlex.quote(executable)} {command}"


class AliasInstaller:
    """Writes `alias.<name>` entries into git config."""

    def __init__(
        self,
        executable: str,
        working_dir: Optional[str] = None,
        aliases: Sequence[Tuple[str, str]] = ALIASES,
    ):
        """Initialize the installer.

        Args:
            executable: Path to the git-utils executable the aliases will run
            working_dir: Directory git runs in (matters for --local)
            aliases: (alias, subcommand) pairs to register
        """
        self.executable = executable
        self.git = git.Git(working_dir)
        self.aliases = list(aliases)

    def install(self, scope: str = "user") -> List[Tuple[str, str]]:
        """Register every alias in the given config scope.

        Args:
            scope: "user", "system" or "local"

        Returns:
            The (alias, subcommand) pairs that were installed

        Raises:
            InstallError: If git refuses to write an alias
        """
        if scope not in SCOPE_FLAGS:
            raise ValueError(f"scope must be one of {list(SCOPE_FLAGS)}, got '{scope}'")

        installed = []
        for alias, command in self.aliases:
            value = alias_command(self.executable, command)
            logger.info(f"> git config {SCOPE_FLAGS[scope]} alias.{alias} {value}")
            try:
                self.git.config(SCOPE_FLAGS[scope], f"alias.{alias}", value)
            except git.exc.GitCommandError as e:
                raise InstallError(alias, error_text(e))
            installed.append((alias, command))
        return installed
