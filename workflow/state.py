"""Draft state, actions, and side-effect requests."""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from models.chapter import ChapterOutline, ChapterPlan, ReviewedChapter, SavedChapter, WrittenChapterContent


@dataclass(frozen=True)
class DraftState:
    """Everything the user is currently working on.

    Fields:
    - topic: book topic of the current outline
    - outline: chapters in book order
    - written: outline id -> written content (entries may lag behind the outline)
    - saved: bookmarked snapshots, unique by id
    - covers: outline id -> cover image data URI
    - generation: bumped on every outline generation; chapter-scoped results
      carrying an older value are dropped
    - error: the single current user-facing error message
    """

    topic: str = ""
    outline: tuple[ChapterOutline, ...] = ()
    written: Mapping[str, WrittenChapterContent] = field(default_factory=dict)
    saved: tuple[SavedChapter, ...] = ()
    covers: Mapping[str, str] = field(default_factory=dict)
    generation: int = 0
    error: Optional[str] = None

    def find_chapter(self, chapter_id: str) -> Optional[ChapterOutline]:
        for chapter in self.outline:
            if chapter.id == chapter_id:
                return chapter
        return None

    def chapter_number(self, chapter_id: str) -> int:
        """1-based position of a chapter in the outline, 0 if absent."""
        for i, chapter in enumerate(self.outline):
            if chapter.id == chapter_id:
                return i + 1
        return 0

    def is_saved(self, chapter_id: str) -> bool:
        return any(c.id == chapter_id for c in self.saved)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OutlineRequested:
    topic: str


@dataclass(frozen=True)
class OutlineGenerated:
    plans: Sequence[ChapterPlan]
    generation: int
    created_at_ms: int


@dataclass(frozen=True)
class OutlineAdjusted:
    chapter_id: str
    plan: ChapterPlan
    generation: int


@dataclass(frozen=True)
class ChapterWritten:
    chapter_id: str
    content: WrittenChapterContent
    generation: int


@dataclass(frozen=True)
class ChapterAdjusted:
    chapter_id: str
    content: WrittenChapterContent
    generation: int


@dataclass(frozen=True)
class ReviewCompleted:
    chapters: Sequence[ReviewedChapter]
    generation: int


@dataclass(frozen=True)
class CoverGenerated:
    chapter_id: str
    data_uri: str
    generation: int


@dataclass(frozen=True)
class ChapterSaved:
    snapshot: SavedChapter


@dataclass(frozen=True)
class ChapterDeleted:
    chapter_id: str


@dataclass(frozen=True)
class SavedChaptersLoaded:
    chapters: Sequence[SavedChapter]


@dataclass(frozen=True)
class ErrorRaised:
    message: str


@dataclass(frozen=True)
class ErrorCleared:
    pass


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PersistSavedChapters:
    chapters: tuple[SavedChapter, ...]


@dataclass(frozen=True)
class Transition:
    state: DraftState
    effects: tuple = ()
