"""Tests for cursor and scroll handling"""
import pytest

from git_utils.view_model import ListView, clamp, jump, move


class TestClamp:
    """Test bringing the view back into bounds."""

    @pytest.mark.parametrize("count", [1, 2, 5, 20])
    @pytest.mark.parametrize("position", [-5, -1, 0, 3, 19, 100])
    def test_cursor_within_bounds(self, count, position):
        """Test that any requested position lands inside the list."""
        view = clamp(ListView(position, 0), count, height=4)
        assert 0 <= view.cursor <= count - 1
        assert view.selection(count) == view.cursor

    def test_empty_list_has_no_selection(self):
        """Test that an empty list reports no selection."""
        view = clamp(ListView(7, 3), 0, height=4)
        assert view.selection(0) is None
        assert view == ListView(0, 0)

    def test_snaps_to_last_row_when_list_shrinks(self):
        """Test that a cursor past the end moves to the last row."""
        view = clamp(ListView(9, 6), 3, height=4)
        assert view.cursor == 2
        assert view.offset == 0

    def test_window_stays_full(self):
        """Test that the window does not scroll past the end of the list."""
        view = clamp(ListView(8, 8), 10, height=4)
        assert view.cursor == 8
        assert view.offset == 6

    def test_zero_height_treated_as_one(self):
        """Test that a degenerate height still shows the cursor."""
        view = clamp(ListView(3, 0), 10, height=0)
        assert view.offset == 3


class TestMove:
    """Test cursor movement and scrolling."""

    def test_scrolls_forward_by_overflow(self):
        """Test moving past the last visible row scrolls by exactly one."""
        view = ListView(3, 0)
        view = move(view, 1, 10, height=4)
        assert view == ListView(4, 1)

    def test_scrolls_forward_by_larger_overflow(self):
        """Test a jump of several rows scrolls just enough."""
        view = move(ListView(3, 0), 3, 10, height=4)
        assert view == ListView(6, 3)

    def test_scrolls_backward_symmetrically(self):
        """Test moving above the first visible row scrolls back."""
        view = move(ListView(4, 4), -1, 10, height=4)
        assert view == ListView(3, 3)

    def test_no_scroll_inside_window(self):
        """Test that moving inside the window keeps the offset."""
        view = move(ListView(1, 0), 1, 10, height=4)
        assert view == ListView(2, 0)

    def test_stops_at_ends_without_wrap(self):
        """Test that the cursor does not wrap by default."""
        assert move(ListView(0, 0), -1, 5, height=4).cursor == 0
        assert move(ListView(4, 1), 1, 5, height=4).cursor == 4

    def test_wraps_when_enabled(self):
        """Test wrapping past either end."""
        view = move(ListView(4, 1), 1, 5, height=4, wrap=True)
        assert view == ListView(0, 0)
        view = move(ListView(0, 0), -1, 5, height=4, wrap=True)
        assert view == ListView(4, 1)

    def test_move_on_empty_list(self):
        """Test that moving in an empty list keeps no selection."""
        view = move(ListView(0, 0), 1, 0, height=4)
        assert view.selection(0) is None


class TestJumpAndVisibleRange:
    """Test absolute positioning and the visible window."""

    def test_jump_to_end(self):
        """Test jumping to the last row scrolls it into view."""
        view = jump(ListView(0, 0), 9, 10, height=4)
        assert view == ListView(9, 6)

    def test_jump_to_start(self):
        """Test jumping back to the first row."""
        view = jump(ListView(9, 6), 0, 10, height=4)
        assert view == ListView(0, 0)

    def test_visible_range(self):
        """Test the rows inside the window."""
        assert list(ListView(5, 3).visible_range(10, 4)) == [3, 4, 5, 6]
        assert list(ListView(0, 0).visible_range(2, 4)) == [0, 1]
        assert list(ListView(0, 0).visible_range(0, 4)) == []
