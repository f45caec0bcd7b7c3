"""Tests for row formatters"""
import pytest

from git_utils.formatters import format_age, format_branch_name, format_ref_row
from git_utils.models.ref import Ref

NOW = 1_700_000_000


def test_format_branch_name():
    """Test the current-branch marker."""
    assert format_branch_name("main", True) == "main *"
    assert format_branch_name("main") == "main"


@pytest.mark.parametrize("age,expected", [
    (30, "0m"),
    (5 * 60, "5m"),
    (3 * 3600, "3h"),
    (12 * 86400, "12d"),
    (800 * 86400, "2y"),
])
def test_format_age(age, expected):
    """Test relative ages."""
    assert format_age(NOW - age, NOW) == expected


def test_format_age_unknown():
    """Test refs without a date."""
    assert format_age(None, NOW) == ""


def test_format_ref_row_right_aligns_age():
    """Test the age column fills the width."""
    row = format_ref_row(Ref("main", committed_date=NOW - 3600), False, width=20, now=NOW)
    assert row.plain == "  main" + " " * 12 + "1h"
    assert row.cell_len == 20


def test_format_ref_row_selected():
    """Test the selection marker."""
    row = format_ref_row(Ref("hotfix"), True, width=20, now=NOW)
    assert row.plain == "> hotfix"
