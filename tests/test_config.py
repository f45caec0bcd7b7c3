"""Tests for Config"""
import pytest

from git_utils.config import Config
from git_utils.models.ref import ActionKind, RefScope


class TestConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test default values."""
        config = Config()
        assert config.ref_scope is RefScope.LOCAL
        assert config.action_kind is ActionKind.CHECKOUT
        assert config.protected_branches == ["main", "master"]
        assert config.confirm_destructive is True
        assert config.require_clean_worktree is True

    @pytest.mark.parametrize("kwargs", [
        {"scope": "everything"},
        {"action": "merge"},
        {"recent_limit": -1},
        {"protected_branches": "main"},
        {"initial_query": "a\nb"},
    ])
    def test_invalid_values(self, kwargs):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            Config(**kwargs)

    def test_protected_branches_stripped(self):
        """Test that blank protected names are dropped."""
        config = Config(protected_branches=[" main ", "", "develop"])
        assert config.protected_branches == ["main", "develop"]

    def test_from_dict_ignores_unknown(self):
        """Test building from a dictionary with extra keys."""
        config = Config.from_dict({"scope": "all", "unknown": 1})
        assert config.scope == "all"

    def test_dict_access(self):
        """Test the dictionary-style accessors."""
        config = Config(wrap_cursor=True)
        assert config.get("wrap_cursor") is True
        assert config.get("missing", "x") == "x"
        assert config.to_dict()["wrap_cursor"] is True
