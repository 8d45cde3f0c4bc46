# jdfilter/lexicon/tech_lexicon.py
import logging
import threading
from typing import Iterable, Optional, Tuple

from jdfilter.errors import InvalidLexiconError, LexiconStoreError
from jdfilter.lexicon.base_store import BaseLexiconStore, clean_labels
from jdfilter.utils.constants import DEFAULT_TECH_STACKS


class TechLexicon:
    """
    Process-wide holder of the current tech lexicon.

    The labels live in an immutable tuple. Readers take the current tuple
    without locking; replace() persists through the store under a writer
    lock and then swaps the reference, so a reader sees either the whole old
    lexicon or the whole new one.
    """

    def __init__(self, store: Optional[BaseLexiconStore] = None, defaults: Iterable[str] = DEFAULT_TECH_STACKS):
        self._store = store
        self._defaults: Tuple[str, ...] = tuple(defaults)
        self._labels: Tuple[str, ...] = self._defaults
        self._write_lock = threading.Lock()
        self.logger = logging.getLogger("TechLexicon")

    def load(self) -> Tuple[str, ...]:
        """Read the stored lexicon, falling back to the defaults if empty or unavailable."""
        labels: Tuple[str, ...] = ()
        if self._store is not None:
            try:
                labels = tuple(clean_labels(self._store.load()))
            except InvalidLexiconError:
                labels = ()
            except LexiconStoreError as e:
                self.logger.warning(f"Could not load stored lexicon, using defaults: {e}")

        if not labels:
            self.logger.info(f"Using default lexicon ({len(self._defaults)} tech stacks)")
            labels = self._defaults

        with self._write_lock:
            self._labels = labels
        self.logger.info(f"Loaded {len(labels)} tech stacks")
        return labels

    def snapshot(self) -> Tuple[str, ...]:
        return self._labels

    def replace(self, labels: Iterable[str]) -> Tuple[str, ...]:
        """
        Replace the whole lexicon.

        Raises:
            InvalidLexiconError: if the labels are empty after cleaning
            LexiconStoreError: if the store could not persist them; the
                in-memory lexicon is left unchanged
        """
        with self._write_lock:
            if self._store is not None:
                stored = tuple(self._store.replace(labels))
            else:
                stored = tuple(clean_labels(labels))
            self._labels = stored

        self.logger.info(f"Replaced lexicon with {len(stored)} tech stacks")
        return stored

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self):
        return iter(self._labels)
