# jdfilter/lexicon/supabase_store.py
import logging
from typing import List

from supabase import create_client

from jdfilter.errors import LexiconStoreError
from jdfilter.lexicon.base_store import BaseLexiconStore


class SupabaseLexiconStore(BaseLexiconStore):
    """
    Stores the lexicon as one document row: {key, labels}.

    A replace is a single upsert of the whole row, so the stored lexicon is
    never a mix of two versions.
    """

    def __init__(self, url: str, key: str, table: str = "tech_lexicon", lexicon_key: str = "default"):
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set")
        self.supabase = create_client(url, key)
        self.table = table
        self.lexicon_key = lexicon_key
        self.logger = logging.getLogger("SupabaseLexiconStore")

    def _read(self) -> List[str]:
        try:
            result = self.supabase.table(self.table) \
                .select("labels") \
                .eq("key", self.lexicon_key) \
                .execute()
        except Exception as e:
            raise LexiconStoreError(f"Error loading lexicon from {self.table}: {e}") from e

        if not result.data:
            return []
        return list(result.data[0].get("labels") or [])

    def _write(self, labels: List[str]) -> List[str]:
        try:
            result = self.supabase.table(self.table) \
                .upsert({"key": self.lexicon_key, "labels": labels}, on_conflict="key") \
                .execute()
        except Exception as e:
            raise LexiconStoreError(f"Error saving lexicon to {self.table}: {e}") from e

        self.logger.info(f"Saved {len(labels)} tech stacks to {self.table}")
        if result.data:
            return list(result.data[0].get("labels") or labels)
        return list(labels)
