# jdfilter/extractors/location.py
"""
Remote / on-site classification for job postings.

A posting is Remote when the page mentions the word "remote" and never
negates it ("no remote", "not remote", "non-remote"). Anything else is
NotRemote, and the page's short text nodes are scanned for snippets that
look like a location or a work-mode descriptor.
"""

import re
from typing import Iterable, List

from jdfilter.models.location import LocationResult
from jdfilter.utils.constants import (
    CITY_STATE_PATTERN,
    HINT_MAX_LENGTH,
    HINT_MIN_LENGTH,
    NON_REMOTE_PATTERN,
    ON_SITE_PATTERN,
    REMOTE_PATTERN,
    STATE_CITY_PATTERN,
)

_REMOTE_RE = re.compile(REMOTE_PATTERN, re.IGNORECASE)
_NON_REMOTE_RE = re.compile(NON_REMOTE_PATTERN, re.IGNORECASE)
_ON_SITE_RE = re.compile(ON_SITE_PATTERN, re.IGNORECASE)
_CITY_STATE_RE = re.compile(CITY_STATE_PATTERN)
_STATE_CITY_RE = re.compile(STATE_CITY_PATTERN)


def is_remote(text: str) -> bool:
    if not text:
        return False
    return bool(_REMOTE_RE.search(text)) and not _NON_REMOTE_RE.search(text)


def collect_location_hints(node_texts: Iterable[str]) -> List[str]:
    """
    Collect location hints from individual text nodes.

    Each node is judged on its own trimmed text, and only when it is between
    HINT_MIN_LENGTH and HINT_MAX_LENGTH characters so whole-page wrappers
    are ignored.

    Args:
        node_texts: Text of each candidate node in document order

    Returns:
        De-duplicated hints in the order they were found
    """
    hints: List[str] = []

    def add(hint: str) -> None:
        if hint and hint not in hints:
            hints.append(hint)

    for raw in node_texts:
        text = (raw or "").strip()
        if len(text) < HINT_MIN_LENGTH or len(text) > HINT_MAX_LENGTH:
            continue

        if _ON_SITE_RE.search(text):
            add(text)

        if ',' in text:
            city_state = _CITY_STATE_RE.search(text)
            if city_state:
                add(city_state.group(0).strip())
            state_city = _STATE_CITY_RE.search(text)
            if state_city:
                add(state_city.group(0).strip())

    return hints


def classify_location(text: str, node_texts: Iterable[str]) -> LocationResult:
    """
    Classify the posting's location.

    Args:
        text: Aggregated page text (body, descriptions, titles, scripts)
        node_texts: Candidate nodes for hints; only consumed when NotRemote

    Returns:
        LocationResult.remote_role() or LocationResult.not_remote(hints)
    """
    if is_remote(text):
        return LocationResult.remote_role()
    return LocationResult.not_remote(collect_location_hints(node_texts))
