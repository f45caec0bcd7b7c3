"""Pytest fixtures for git-utils tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from git_utils.models.ref import ActionResult, Ref
from git_utils.services.git.actions import ActionExecutor
from git_utils.services.git.repository import GitRepository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a picker configuration dictionary."""
    return {
        'scope': 'local',
        'action': 'checkout',
        'initial_query': '',
        'wrap_cursor': False,
        'confirm_destructive': True,
        'require_clean_worktree': True,
        'force_delete': False,
        'protected_branches': ['main', 'master'],
        'recent_limit': 100,
        'verbose': False,
        'debug': False,
    }


def _commit_file(repo, name, content, message):
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    repo.index.commit(message)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    # Initialize repository
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit on main branch
    _commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    # Add a fake remote so remote-tracking refs can be created locally
    try:
        repo.create_remote('origin', 'git@github.com:test/test-repo.git')
    except Exception:
        pass

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with feature/login, feature/logout and hotfix.

    Branches are visited in that order and the repository ends on main, so
    the reflog orders them main, hotfix, feature/logout, feature/login.
    """
    repo = git_repo

    repo.git.checkout('-b', 'feature/login')
    _commit_file(repo, "login.txt", "Login\n", "Add login")

    repo.git.checkout('main')
    repo.git.checkout('-b', 'feature/logout')
    _commit_file(repo, "logout.txt", "Logout\n", "Add logout")

    repo.git.checkout('main')
    repo.git.checkout('-b', 'hotfix')
    _commit_file(repo, "hotfix.txt", "Fix\n", "Fix things")

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def git_repo_with_remote(git_repo_with_branches):
    """Add remote-tracking refs as a fetch from origin would have created them."""
    repo = git_repo_with_branches
    head = repo.head.commit.hexsha
    login = repo.refs['feature/login'].commit.hexsha

    repo.git.update_ref('refs/remotes/origin/main', head)
    repo.git.update_ref('refs/remotes/origin/feature/login', login)
    repo.git.update_ref('refs/remotes/origin/release/1.0', head)
    repo.git.symbolic_ref('refs/remotes/origin/HEAD', 'refs/remotes/origin/main')

    yield repo


@pytest.fixture
def repository(git_repo_with_branches):
    """GitRepository wrapper around the branch fixture."""
    wrapper = GitRepository.open(git_repo_with_branches.working_dir)
    yield wrapper
    wrapper.close()


@pytest.fixture
def sample_refs():
    """Refs used by the pure-logic tests."""
    return [
        Ref("main", is_current=True, committed_date=1_700_000_000),
        Ref("feature/login", committed_date=1_699_000_000),
        Ref("feature/logout", committed_date=1_698_000_000),
        Ref("hotfix"),
    ]


@pytest.fixture
def mock_executor():
    """Create a mock ActionExecutor that always succeeds."""
    executor = Mock(spec=ActionExecutor)

    def _execute(request):
        return ActionResult(request, f"{request.kind.value} {request.ref.name}")

    executor.execute = Mock(side_effect=_execute)
    return executor
