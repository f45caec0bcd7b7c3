"""Git actions performed on a selected ref."""

from typing import TYPE_CHECKING, Union

import git

from git_utils.exceptions import ActionError, CheckoutError, ProtectedRefError
from git_utils.logging_config import get_logger
from git_utils.models.ref import ActionKind, ActionRequest, ActionResult, Ref
from git_utils.services.git.repository import GitRepository, error_text

if TYPE_CHECKING:
    from git_utils.config import Config

logger = get_logger(__name__)


class ActionExecutor:
    """Service that turns an ActionRequest into exactly one git operation.

    Nothing is cached between calls: every check reads the repository again,
    so a ref changed by another process is seen as it is now.
    """

    def __init__(self, repository: GitRepository, config: Union["Config", dict]):
        """Initialize the executor.

        Args:
            repository: Repository to act on
            config: Configuration dictionary or Config object
        """
        self.repository = repository
        self.config = config

    def execute(self, request: ActionRequest) -> ActionResult:
        """Perform the requested action.

        Raises:
            CheckoutError: If a checkout is refused or fails
            ProtectedRefError: If deleting the current or a protected branch
            ActionError: If any other action fails
        """
        logger.info(f"Executing {request.kind.value} on {request.ref.name}")
        handlers = {
            ActionKind.CHECKOUT: self._checkout,
            ActionKind.DELETE: self._delete,
            ActionKind.RENAME: self._rename,
        }
        result = handlers[request.kind](request)
        logger.info(result.message)
        return result

    def _checkout(self, request: ActionRequest) -> ActionResult:
        ref = request.ref

        if self.config.get("require_clean_worktree", True) and not self.repository.is_clean():
            raise CheckoutError(
                ref.name,
                "There are changes in the index/worktree which must be committed, "
                "reverted, or stashed before switching branches",
            )

        if ref.is_remote:
            return self._checkout_remote(request)

        if not self.repository.ref_exists(f"refs/heads/{ref.name}"):
            raise CheckoutError(ref.name, "Branch no longer exists")

        try:
            self.repository.run("switch", ref.name)
        except git.exc.GitCommandError as e:
            raise CheckoutError(ref.name, error_text(e))
        return ActionResult(request, f"Switched to branch {ref.name}")

    def _checkout_remote(self, request: ActionRequest) -> ActionResult:
        """Switch to the local branch tracking a remote ref, creating it if needed."""
        ref = request.ref
        local_name = ref.local_name
        if ref.remote_name is None:
            raise CheckoutError(ref.name, "Remote ref is not in '<remote>/<branch>' form")

        if not self.repository.ref_exists(f"refs/remotes/{ref.name}"):
            raise CheckoutError(ref.name, "Remote branch no longer exists")

        try:
            if self.repository.ref_exists(f"refs/heads/{local_name}"):
                current_upstream = self.repository.upstream_of(local_name)
                if current_upstream is None:
                    raise CheckoutError(
                        ref.name,
                        f"Branch with name '{local_name}' already exists but isn't tracking "
                        f"requested branch '{ref.name}'",
                    )
                if current_upstream != ref.name:
                    raise CheckoutError(
                        ref.name,
                        f"Branch with name '{local_name}' already exists but has different "
                        f"tracking branch '{current_upstream}' (expected '{ref.name}')",
                    )
                self.repository.run("switch", local_name)
                return ActionResult(
                    request, f"Switched to branch {local_name}, tracking {ref.name}"
                )

            self.repository.run("switch", "--track", ref.name, "--create", local_name)
        except git.exc.GitCommandError as e:
            raise CheckoutError(ref.name, error_text(e))
        return ActionResult(request, f"Switched to new branch {local_name}, tracking {ref.name}")

    def _delete(self, request: ActionRequest) -> ActionResult:
        ref = request.ref

        if ref.is_remote:
            # Removes the remote-tracking ref only; the remote is never contacted
            try:
                self.repository.run("branch", "--delete", "--remotes", ref.name)
            except git.exc.GitCommandError as e:
                raise ActionError("delete", ref.name, error_text(e))
            return ActionResult(request, f"Deleted remote-tracking branch {ref.name}")

        current = self.repository.current_branch()
        if ref.name == current:
            raise ProtectedRefError(ref.name, "Cannot delete the checked-out branch")
        if ref.name in self.config.get("protected_branches", []):
            raise ProtectedRefError(ref.name)

        flag = "-D" if self.config.get("force_delete", False) else "-d"
        try:
            self.repository.run("branch", flag, ref.name)
        except git.exc.GitCommandError as e:
            raise ActionError("delete", ref.name, error_text(e))
        return ActionResult(request, f"Deleted branch {ref.name}")

    def _rename(self, request: ActionRequest) -> ActionResult:
        ref = request.ref
        new_name = (request.new_name or "").strip()

        if ref.is_remote:
            raise ActionError("rename", ref.name, "Remote branches cannot be renamed")
        if not new_name:
            raise ActionError("rename", ref.name, "New name is empty")
        if new_name == ref.name:
            raise ActionError("rename", ref.name, "New name is the same as the old one")
        if not is_valid_branch_name(self.repository, new_name):
            raise ActionError("rename", ref.name, f"'{new_name}' is not a valid branch name")

        try:
            self.repository.run("branch", "-m", ref.name, new_name)
        except git.exc.GitCommandError as e:
            raise ActionError("rename", ref.name, error_text(e))
        return ActionResult(request, f"Renamed branch {ref.name} to {new_name}")


def is_valid_branch_name(repository: GitRepository, name: str) -> bool:
    """Check a branch name with `git check-ref-format --branch`."""
    try:
        repository.query("check-ref-format", "--branch", name)
    except git.exc.GitCommandError:
        return False
    return True


def describe(ref: Ref, kind: ActionKind) -> str:
    """One-line description of an action, used in confirmation prompts."""
    if kind is ActionKind.DELETE:
        target = "remote-tracking branch" if ref.is_remote else "branch"
        return f"Delete {target} '{ref.name}'?"
    if kind is ActionKind.RENAME:
        return f"Rename branch '{ref.name}' to:"
    return f"Switch to '{ref.name}'?"
