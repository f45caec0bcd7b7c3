"""Live filtering of the ref list."""

from typing import List, Sequence

from git_utils.models.ref import Ref


def matches(ref: Ref, query: str) -> bool:
    """Case-insensitive substring match on the ref name."""
    return query.casefold() in ref.name.casefold()


def filter_refs(refs: Sequence[Ref], query: str) -> List[Ref]:
    """
    Narrow `refs` to those matching `query`.

    Pure and stable: matching refs keep their original relative order,
    and an empty query returns every ref.

    Args:
        refs: Full ref list, in display order
        query: Text typed by the user

    Returns:
        New list of matching refs
    """
    if not query:
        return list(refs)
    return [ref for ref in refs if matches(ref, query)]
