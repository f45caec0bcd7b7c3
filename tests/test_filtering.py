"""Tests for the ref filter"""
from git_utils.filtering import filter_refs, matches
from git_utils.models.ref import Ref


def _names(refs):
    return [ref.name for ref in refs]


class TestFilterRefs:
    """Test live filtering of the ref list."""

    def test_feat_scenario(self, sample_refs):
        """Test the documented 'feat' example."""
        assert _names(filter_refs(sample_refs, "feat")) == ["feature/login", "feature/logout"]

    def test_empty_query_is_identity(self, sample_refs):
        """Test that an empty query returns every ref in order."""
        result = filter_refs(sample_refs, "")
        assert result == sample_refs
        assert result is not sample_refs

    def test_case_insensitive(self, sample_refs):
        """Test that matching ignores case."""
        assert _names(filter_refs(sample_refs, "HOT")) == ["hotfix"]
        assert _names(filter_refs([Ref("Feature/UI")], "feature/ui")) == ["Feature/UI"]

    def test_no_match(self, sample_refs):
        """Test a query nothing contains."""
        assert filter_refs(sample_refs, "xyz") == []

    def test_substring_anywhere(self, sample_refs):
        """Test that the query can match in the middle of a name."""
        assert _names(filter_refs(sample_refs, "log")) == ["feature/login", "feature/logout"]
        assert _names(filter_refs(sample_refs, "out")) == ["feature/logout"]

    def test_keeps_original_order(self):
        """Test that matches are not re-sorted."""
        refs = [Ref("zeta-fix"), Ref("alpha-fix"), Ref("mid-fix")]
        assert _names(filter_refs(refs, "fix")) == ["zeta-fix", "alpha-fix", "mid-fix"]

    def test_extending_query_narrows(self, sample_refs):
        """Test that appending characters only removes refs."""
        query = ""
        previous = filter_refs(sample_refs, query)
        for char in "feature/logo":
            query += char
            current = filter_refs(sample_refs, query)
            iterator = iter(previous)
            assert all(ref in iterator for ref in current)
            previous = current
        assert _names(previous) == ["feature/logout"]

    def test_deterministic(self, sample_refs):
        """Test that the same inputs give the same output."""
        assert filter_refs(sample_refs, "e") == filter_refs(sample_refs, "e")

    def test_matches(self):
        """Test the single-ref predicate."""
        assert matches(Ref("feature/login"), "LOGIN")
        assert matches(Ref("feature/login"), "")
        assert not matches(Ref("feature/login"), "logout")
