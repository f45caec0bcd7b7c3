"""Thin wrapper over a GitPython repository."""

import os
from typing import List, Optional

import git

from git_utils.exceptions import RepositoryError
from git_utils.logging_config import get_logger

logger = get_logger(__name__)


def error_text(error: git.exc.GitCommandError) -> str:
    """Return git's own stderr message from a GitCommandError."""
    stderr = error.stderr or ""
    if not isinstance(stderr, str):
        stderr = stderr.decode("utf-8", errors="ignore")
    stderr = stderr.strip()
    # GitPython decorates stderr as "stderr: '<text>'"
    if stderr.startswith("stderr: '") and stderr.endswith("'"):
        stderr = stderr[len("stderr: '"):-1].strip()
    for prefix in ("fatal: ", "error: "):
        if stderr.startswith(prefix):
            stderr = stderr[len(prefix):]
    return stderr or f"git exited with status {error.status}"


class GitRepository:
    """Runs git commands against one working tree."""

    def __init__(self, repo: git.Repo):
        self.repo = repo
        self.working_dir = repo.working_tree_dir

    @classmethod
    def open(cls, path: Optional[str] = None) -> "GitRepository":
        """Open the repository containing `path` (default: current directory).

        Raises:
            RepositoryError: If `path` is not inside a git working tree
        """
        path = path or os.getcwd()
        try:
            repo = git.Repo(path, search_parent_directories=True)
        except git.exc.NoSuchPathError:
            raise RepositoryError(path, "No such directory")
        except git.exc.InvalidGitRepositoryError:
            raise RepositoryError(path, "Not inside a git working tree")

        if repo.bare:
            repo.close()
            raise RepositoryError(path, "Repository has no working tree")

        logger.debug(f"Opened repository at {repo.working_tree_dir}")
        return cls(repo)

    def close(self) -> None:
        self.repo.close()

    def query(self, *args: str) -> str:
        """Run `git <args>` and return its stripped stdout.

        Raises:
            git.exc.GitCommandError: If git exits with a non-zero status
        """
        logger.info(f"> git {' '.join(args)}")
        try:
            output = self.repo.git.execute(["git", *args])
        except git.exc.GitCommandError as e:
            logger.debug(f" -> status {e.status}: {error_text(e)}")
            raise
        logger.debug(" -> status 0")
        return output.strip()

    def try_query(self, *args: str) -> Optional[str]:
        """Like query(), but exit status 1 means "no answer" and yields None."""
        try:
            return self.query(*args)
        except git.exc.GitCommandError as e:
            if e.status == 1:
                return None
            raise

    def query_list(self, *args: str) -> List[str]:
        """Run a command and split its output into non-empty lines."""
        return [line for line in self.query(*args).splitlines() if line.strip()]

    def query_success(self, *args: str) -> bool:
        return self.try_query(*args) is not None

    def run(self, *args: str) -> None:
        self.query(*args)

    def current_branch(self) -> Optional[str]:
        """Name of the checked-out branch, or None on a detached HEAD."""
        try:
            if self.repo.head.is_detached:
                return None
            return self.repo.active_branch.name
        except TypeError:
            # Detached HEAD
            return None

    def is_clean(self) -> bool:
        """True when the index and tracked files match HEAD.

        Untracked files do not count, they survive a branch switch.
        """
        modifications = self.query_list(
            "status", "--porcelain=1", "--untracked-files=no", "--ignored=no"
        )
        return not modifications

    def ref_exists(self, refname: str) -> bool:
        return self.query_success("show-ref", "--quiet", "--verify", refname)

    def upstream_of(self, branch: str) -> Optional[str]:
        """Short name of the branch's upstream (e.g. 'origin/main'), if any."""
        upstream = self.query(
            "for-each-ref", "--format=%(upstream:short)", f"refs/heads/{branch}"
        )
        return upstream or None
