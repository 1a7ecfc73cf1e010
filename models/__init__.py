"""Models package: chapter records, enums, and local storage."""

from models.database import Database
from models.chapter import (
    Section,
    ChapterPlan,
    ChapterOutline,
    WrittenChapterContent,
    SavedChapter,
    ReviewedChapter,
    FinalReviewResult,
)
from models.enums import Difficulty, ImageTone
from models.saved_chapters import SavedChapterStore, DEFAULT_STORAGE_KEY

__all__ = [
    "Database",
    "Section",
    "ChapterPlan",
    "ChapterOutline",
    "WrittenChapterContent",
    "SavedChapter",
    "ReviewedChapter",
    "FinalReviewResult",
    "Difficulty",
    "ImageTone",
    "SavedChapterStore",
    "DEFAULT_STORAGE_KEY",
]
