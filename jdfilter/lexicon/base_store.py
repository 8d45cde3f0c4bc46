# jdfilter/lexicon/base_store.py
from typing import Iterable, List

from jdfilter.errors import InvalidLexiconError
from jdfilter.utils.text_utils import unique_in_order


def clean_labels(raw_labels: Iterable[str]) -> List[str]:
    """
    Canonical form of a lexicon: trimmed, non-empty, de-duplicated, order kept.

    Raises:
        InvalidLexiconError: if nothing is left after cleaning
    """
    if raw_labels is None or isinstance(raw_labels, str):
        raise InvalidLexiconError("Tech stacks must be provided as a list of strings")

    cleaned = unique_in_order(
        label.strip() for label in raw_labels if isinstance(label, str) and label.strip()
    )
    if not cleaned:
        raise InvalidLexiconError("Tech stacks must contain at least one non-empty entry")
    return cleaned


class BaseLexiconStore:
    """Persistence for the tech lexicon. Subclasses implement _read and _write."""

    def load(self) -> List[str]:
        """Stored labels, or an empty list when nothing has been stored yet."""
        return self._read()

    def replace(self, labels: Iterable[str]) -> List[str]:
        """Persist a full replacement and return the stored canonical form."""
        cleaned = clean_labels(labels)
        return self._write(cleaned)

    def _read(self) -> List[str]:
        raise NotImplementedError("Subclasses must implement _read()")

    def _write(self, labels: List[str]) -> List[str]:
        raise NotImplementedError("Subclasses must implement _write()")
