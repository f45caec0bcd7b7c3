"""Ref listing service for git-utils."""

import re
from typing import Dict, List, Optional

import git

from git_utils.constants import LOCAL_REFS, REMOTE_REFS
from git_utils.exceptions import RepositoryError
from git_utils.logging_config import get_logger
from git_utils.models.ref import Ref, RefScope
from git_utils.services.git.repository import GitRepository, error_text

logger = get_logger(__name__)

# Ref names cannot contain control characters, so a tab is a safe separator
_REF_FORMAT = "%(refname)%09%(committerdate:raw)%09%(HEAD)%09%(objectname)"
_CHECKOUT_PATTERN = re.compile(r"^checkout: moving from (?P<source>\S+) to (?P<target>\S+)$")


class RefSource:
    """Service for listing the refs a session can pick from."""

    def __init__(self, repository: GitRepository, recent_limit: int = 100):
        """Initialize the ref source.

        Args:
            repository: Repository to read refs from
            recent_limit: Number of reflog entries scanned to order branches by recent use
        """
        self.repository = repository
        self.recent_limit = recent_limit

    def list_refs(self, scope: RefScope = RefScope.LOCAL) -> List[Ref]:
        """List branches in `scope`, most recently used first.

        Local branches are ranked by checkouts recorded in HEAD's reflog.
        Remote refs are ranked by the reflog commits they point at, since
        checking one out never names it. Anything not seen in the reflog
        follows in alphabetical order. Remote refs are read as they are
        known locally, nothing is fetched.

        Raises:
            RepositoryError: If the refs cannot be read
        """
        namespaces = {
            RefScope.LOCAL: [LOCAL_REFS],
            RefScope.REMOTE: [REMOTE_REFS],
            RefScope.ALL: [LOCAL_REFS, REMOTE_REFS],
        }[scope]

        refs: List[Ref] = []
        for namespace in namespaces:
            found = self._read_namespace(namespace)
            if namespace == REMOTE_REFS:
                recent = names_by_commit(found, self.recent_commits())
            else:
                recent = self.recent_branches()
            refs.extend(order_by_recent(found, recent))

        logger.debug(f"Listed {len(refs)} refs ({scope.value})")
        return refs

    def _read_namespace(self, namespace: str) -> List[Ref]:
        try:
            lines = self.repository.query_list("for-each-ref", f"--format={_REF_FORMAT}", namespace)
        except git.exc.GitCommandError as e:
            raise RepositoryError(self.repository.working_dir or "", error_text(e))

        is_remote = namespace == REMOTE_REFS
        refs = []
        for line in lines:
            ref = parse_ref_line(line, namespace, is_remote)
            if ref is not None:
                refs.append(ref)
        return sorted(refs, key=lambda r: r.name)

    def _reflog(self, fmt: str) -> List[str]:
        """Newest-first HEAD reflog entries, empty when there is no reflog."""
        if self.recent_limit == 0:
            return []
        try:
            return self.repository.query_list(
                "reflog", "show", f"--format={fmt}", f"-n{self.recent_limit}", "HEAD"
            )
        except git.exc.GitCommandError as e:
            # No commits yet, or no reflog
            logger.debug(f"Could not read reflog: {error_text(e)}")
            return []

    def recent_branches(self) -> List[str]:
        """Branch names from HEAD's reflog, most recently checked out first."""
        branches: List[str] = []
        for message in self._reflog("%gs"):
            match = _CHECKOUT_PATTERN.match(message.strip())
            if not match:
                continue
            for name in (match.group("target"), match.group("source")):
                if name not in branches:
                    branches.append(name)
        return branches

    def recent_commits(self) -> List[str]:
        """Commits HEAD has pointed at, most recent first, without repeats."""
        commits: List[str] = []
        for commit in self._reflog("%H"):
            commit = commit.strip()
            if commit not in commits:
                commits.append(commit)
        return commits


def parse_ref_line(line: str, namespace: str, is_remote: bool) -> Optional[Ref]:
    """Parse one line of for-each-ref output; symbolic */HEAD refs yield None."""
    fields = line.split("\t")
    fields += [""] * (4 - len(fields))
    refname, date, head, commit = fields[:4]

    name = refname[len(namespace) + 1:] if refname.startswith(namespace + "/") else refname
    if not name or name.endswith("/HEAD"):
        return None

    committed_date = None
    if date.strip():
        try:
            committed_date = int(date.split()[0])
        except ValueError:
            logger.debug(f"Unparseable commit date for {name}: {date!r}")

    return Ref(
        name=name,
        is_current=head.strip() == "*" and not is_remote,
        is_remote=is_remote,
        committed_date=committed_date,
        commit=commit.strip() or None,
    )


def names_by_commit(refs: List[Ref], commits: List[str]) -> List[str]:
    """Names of the refs pointing at each of `commits`, in commit order."""
    by_commit: Dict[str, List[str]] = {}
    for ref in refs:
        if ref.commit:
            by_commit.setdefault(ref.commit, []).append(ref.name)
    names: List[str] = []
    for commit in commits:
        names.extend(by_commit.pop(commit, []))
    return names


def order_by_recent(refs: List[Ref], recent: List[str]) -> List[Ref]:
    """Put refs named in `recent` first, in that order; keep the rest as given."""
    by_name = {ref.name: ref for ref in refs}
    ordered = [by_name[name] for name in recent if name in by_name]
    seen = {ref.name for ref in ordered}
    ordered.extend(ref for ref in refs if ref.name not in seen)
    return ordered
