"""Persistence of bookmarked chapter snapshots."""

import json
import logging
from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from models.chapter import SavedChapter
from models.database import Database

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "savedBookChapters"

_SAVED_LIST = TypeAdapter(list[SavedChapter])


class SavedChapterStore:
    """Reads and rewrites the saved-chapter list stored under one fixed key."""

    def __init__(self, db: Database, key: str = DEFAULT_STORAGE_KEY):
        self.db = db
        self.key = key

    def load(self) -> list[SavedChapter]:
        """Return the stored chapters; unreadable data counts as an empty list."""
        raw = self.db.get_item(self.key)
        if not raw:
            return []
        try:
            return _SAVED_LIST.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error("Failed to parse saved chapters under '%s': %s", self.key, e)
            return []

    def save(self, chapters: Sequence[SavedChapter]):
        payload = json.dumps(
            [c.model_dump() for c in chapters],
            ensure_ascii=False,
        )
        self.db.set_item(self.key, payload)
        logger.info("Persisted %d saved chapters", len(chapters))
