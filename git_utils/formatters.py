"""Formatting utilities for picker rows."""

import time
from typing import Optional

from rich.text import Text

from git_utils.constants import (
    SYMBOL_CURRENT_BRANCH,
    SYMBOL_SELECTED,
    SYMBOL_UNSELECTED,
    TUI_STYLES,
)
from git_utils.models.ref import Ref


def format_branch_name(name: str, is_current: bool = False) -> str:
    """
    Format branch name with optional current branch indicator.

    Args:
        name: Branch name
        is_current: Whether this is the current branch

    Returns:
        Formatted branch name
    """
    return name + (SYMBOL_CURRENT_BRANCH if is_current else "")


def format_age(committed_date: Optional[int], now: Optional[float] = None) -> str:
    """
    Format the age of a commit as a short relative string.

    Args:
        committed_date: Unix timestamp of the commit, or None
        now: Reference time (defaults to the current time)

    Returns:
        Age such as "5m", "3h", "12d", "2y", or "" if unknown
    """
    if committed_date is None:
        return ""
    now = time.time() if now is None else now
    seconds = max(0, int(now - committed_date))

    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h"
    days = hours // 24
    if days < 365:
        return f"{days}d"
    return f"{days // 365}y"


def format_ref_row(ref: Ref, selected: bool, width: int = 80, now: Optional[float] = None) -> Text:
    """
    Build one list row: selection marker, name, current marker and age.

    Args:
        ref: Ref to show
        selected: Whether the cursor is on this row
        width: Available columns; the age is right-aligned within them
        now: Reference time for the age column

    Returns:
        Styled Rich Text
    """
    row = Text(SYMBOL_SELECTED if selected else SYMBOL_UNSELECTED)

    name_style = ""
    if ref.is_current:
        name_style = TUI_STYLES["current"]
    elif ref.is_remote:
        name_style = TUI_STYLES["remote"]
    row.append(format_branch_name(ref.name, ref.is_current), style=name_style)

    age = format_age(ref.committed_date, now)
    if age:
        padding = max(1, width - row.cell_len - len(age))
        row.append(" " * padding)
        row.append(age, style=TUI_STYLES["age"])

    if selected:
        row.stylize(TUI_STYLES["selected"])
    return row
