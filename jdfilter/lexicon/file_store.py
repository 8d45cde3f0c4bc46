# jdfilter/lexicon/file_store.py
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List

from jdfilter.errors import LexiconStoreError
from jdfilter.lexicon.base_store import BaseLexiconStore


class JsonFileLexiconStore(BaseLexiconStore):
    """Stores the lexicon as {"techStacks": [...]} in a JSON file."""

    def __init__(self, path: str):
        self.path = Path(path)
        self.logger = logging.getLogger("JsonFileLexiconStore")

    def _read(self) -> List[str]:
        if not self.path.exists():
            self.logger.info(f"No lexicon file at {self.path}")
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LexiconStoreError(f"Could not read lexicon file {self.path}: {e}") from e

        labels = data.get("techStacks") if isinstance(data, dict) else data
        if not isinstance(labels, list):
            raise LexiconStoreError(f"Lexicon file {self.path} has no techStacks list")
        return [label for label in labels if isinstance(label, str)]

    def _write(self, labels: List[str]) -> List[str]:
        # Write to a sibling temp file then rename, so readers never see a partial file.
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump({"techStacks": labels}, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise LexiconStoreError(f"Could not write lexicon file {self.path}: {e}") from e

        self.logger.info(f"Saved {len(labels)} tech stacks to {self.path}")
        return list(labels)
