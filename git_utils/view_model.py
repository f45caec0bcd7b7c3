"""Cursor and scroll state of the ref list."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ListView:
    """Cursor position and first visible row of a list.

    `cursor` is meaningless for an empty list; use selection() to tell
    "no selection" apart from row 0.
    """
    cursor: int = 0
    offset: int = 0

    def selection(self, count: int) -> Optional[int]:
        return self.cursor if count > 0 else None

    def visible_range(self, count: int, height: int) -> range:
        """Indices of the rows that fit in the window."""
        height = max(1, height)
        return range(self.offset, min(count, self.offset + height))


def clamp(view: ListView, count: int, height: int) -> ListView:
    """Bring `view` back into bounds for a list of `count` rows.

    The cursor snaps to the last row when the list shrank below it, and the
    window scrolls by exactly the amount needed to show the cursor.
    """
    height = max(1, height)
    if count <= 0:
        return ListView(0, 0)

    cursor = min(max(view.cursor, 0), count - 1)

    # Keep the window as full as possible
    offset = min(max(view.offset, 0), max(0, count - height))

    # Make sure the cursor is in view
    if cursor >= offset + height:
        offset = cursor - height + 1
    elif cursor < offset:
        offset = cursor

    return ListView(cursor, offset)


def move(view: ListView, delta: int, count: int, height: int, wrap: bool = False) -> ListView:
    """Move the cursor by `delta` rows.

    Without `wrap` the cursor stops at either end; with it, moving past the
    last row continues from the first and vice versa.
    """
    if count <= 0:
        return ListView(0, 0)
    target = view.cursor + delta
    if wrap:
        target %= count
    return clamp(ListView(target, view.offset), count, height)


def jump(view: ListView, index: int, count: int, height: int) -> ListView:
    """Put the cursor on row `index`."""
    return clamp(ListView(index, view.offset), count, height)
