"""
Shared text helpers for the extractors.

This module contains pure helper functions used by the field pickers, the
location classifier and the tech stack matcher.
"""

from typing import Callable, Iterable, List, Optional


def clean_text(value: Optional[str]) -> str:
    """Trim a possibly missing string; None becomes an empty string."""
    return value.strip() if value else ""


def is_non_empty(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def pick_first(
    candidates: Iterable[Optional[str]],
    predicate: Callable[[Optional[str]], bool] = is_non_empty,
) -> Optional[str]:
    """
    Return the first candidate satisfying the predicate, trimmed.

    Candidates are consumed lazily, so later (more expensive) lookups can be
    passed as a generator and are only evaluated when earlier ones fail.

    Args:
        candidates: Ordered candidate values, possibly None
        predicate: Acceptance test, non-empty after trimming by default

    Returns:
        The first accepted candidate with surrounding whitespace removed,
        or None if no candidate is accepted
    """
    for candidate in candidates:
        if predicate(candidate):
            return clean_text(candidate)
    return None


def unique_in_order(values: Iterable[str]) -> List[str]:
    """Remove exact duplicates while preserving first-seen order."""
    seen = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


def join_text_sources(*sources: Optional[str]) -> str:
    """Join the non-empty text sources with newlines."""
    return "\n".join(source for source in sources if source)
