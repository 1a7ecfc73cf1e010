"""Draft session: runs user actions against the agents and the state store.

Each public coroutine is one user action. Failures never propagate: they are
logged, turned into a user-facing message in ``state.error``, and the action
returns ``None``/``False``. Actions on different chapters may run
concurrently; results for the same chapter are last-write-wins.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from agents.editor_agent import EditorAgent
from agents.illustrator_agent import IllustratorAgent
from agents.planner_agent import PlannerAgent
from agents.writer_agent import WriterAgent
from config.exceptions import BookDraftError, DatabaseError, InvalidParameterError
from config.settings import Settings
from models.chapter import ReviewedChapter, SavedChapter, WrittenChapterContent
from models.database import Database
from models.enums import ImageTone
from models.saved_chapters import SavedChapterStore
from tools.gemini_client import GeminiClient
from tools.text_utils import build_manuscript
from workflow.conditions import require_all_chapters_written, require_chapter, require_written
from workflow.messages import describe_error
from workflow.state import (
    ChapterAdjusted,
    ChapterDeleted,
    ChapterSaved,
    ChapterWritten,
    CoverGenerated,
    DraftState,
    ErrorCleared,
    ErrorRaised,
    OutlineAdjusted,
    OutlineGenerated,
    OutlineRequested,
    PersistSavedChapters,
    ReviewCompleted,
    SavedChaptersLoaded,
)
from workflow.transitions import reduce

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class OutlineParams:
    topic: str
    num_chapters: int = 5
    difficulty: int = 3
    direction: Optional[str] = None
    thinking_mode: bool = True


def _require_instruction(instruction: str):
    if not instruction or not instruction.strip():
        raise InvalidParameterError("instruction", "Adjustment instruction must not be blank")


class DraftSession:
    """Owns one ``DraftState`` and applies every change through ``reduce``."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        llm_client: Optional[GeminiClient] = None,
        store: Optional[SavedChapterStore] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.settings = settings or Settings()
        self.llm = llm_client or GeminiClient(self.settings)
        self.planner = PlannerAgent(self.llm, self.settings)
        self.writer = WriterAgent(self.llm, self.settings)
        self.editor = EditorAgent(self.llm, self.settings)
        self.illustrator = IllustratorAgent(self.llm, self.settings)
        self.store = store or SavedChapterStore(
            Database(self.settings.storage_path), self.settings.storage_key,
        )
        self.thinking_mode = self.settings.thinking_mode
        self.state = DraftState()
        self._clock = clock

    # ---- State plumbing ----

    def dispatch(self, action) -> DraftState:
        """Apply ``action``; the new state is kept only once its effects have run."""
        transition = reduce(self.state, action)
        for effect in transition.effects:
            self._run_effect(effect)
        self.state = transition.state
        return self.state

    def _run_effect(self, effect):
        if isinstance(effect, PersistSavedChapters):
            self.store.save(effect.chapters)
        else:
            raise TypeError(f"Unknown effect: {type(effect).__name__}")

    def _fail(self, action: str, error: Exception):
        if isinstance(error, BookDraftError):
            logger.error("%s failed: %s", action, error)
        else:
            logger.exception("Unexpected failure in %s", action)
        self.dispatch(ErrorRaised(describe_error(action, error)))

    async def _attempt(self, action: str, operation: Callable[[], Awaitable[T]]) -> Optional[T]:
        try:
            return await operation()
        except Exception as e:
            self._fail(action, e)
            return None

    # ---- Saved chapters ----

    def load_saved_chapters(self) -> tuple[SavedChapter, ...]:
        """Read saved chapters from storage; storage errors count as an empty list."""
        try:
            chapters = self.store.load()
        except DatabaseError as e:
            logger.error("Failed to load saved chapters: %s", e)
            chapters = []
        self.dispatch(SavedChaptersLoaded(chapters))
        return self.state.saved

    def save_chapter(self, chapter_id: str) -> bool:
        """Bookmark a snapshot of a written chapter. Saving twice is a no-op."""
        try:
            chapter = require_chapter(self.state, chapter_id)
            written = require_written(self.state, chapter_id)
            self.dispatch(ChapterSaved(SavedChapter.snapshot(chapter, written)))
        except Exception as e:
            self._fail("save_chapter", e)
            return False
        return True

    def delete_saved_chapter(self, chapter_id: str) -> bool:
        try:
            self.dispatch(ChapterDeleted(chapter_id))
        except Exception as e:
            self._fail("delete_chapter", e)
            return False
        return True

    # ---- Outline ----

    async def generate_outline(self, params: OutlineParams) -> bool:
        """Replace the current outline; all written content is discarded first."""
        try:
            self.dispatch(OutlineRequested(params.topic))
        except InvalidParameterError as e:
            self._fail("generate_outline", e)
            return False

        self.thinking_mode = params.thinking_mode
        generation = self.state.generation
        plans = await self._attempt("generate_outline", lambda: self.planner.generate_outline(
            params.topic,
            params.num_chapters,
            params.difficulty,
            direction=params.direction,
            thinking_mode=params.thinking_mode,
        ))
        if plans is None:
            return False

        self.dispatch(OutlineGenerated(plans, generation, int(self._clock() * 1000)))
        logger.info("Outline ready: %d chapters", len(self.state.outline))
        return True

    async def adjust_outline(self, chapter_id: str, instruction: str) -> bool:
        self.dispatch(ErrorCleared())
        generation = self.state.generation

        async def run():
            _require_instruction(instruction)
            chapter = require_chapter(self.state, chapter_id)
            return await self.planner.adjust_outline(chapter.to_plan(), instruction)

        plan = await self._attempt("adjust_outline", run)
        if plan is None:
            return False
        self.dispatch(OutlineAdjusted(chapter_id, plan, generation))
        return True

    # ---- Chapters ----

    async def write_chapter(self, chapter_id: str, thinking_mode: Optional[bool] = None) -> Optional[WrittenChapterContent]:
        self.dispatch(ErrorCleared())
        generation = self.state.generation
        thinking = self.thinking_mode if thinking_mode is None else thinking_mode

        async def run():
            chapter = require_chapter(self.state, chapter_id)
            return await self.writer.write_chapter(
                self.state.topic,
                chapter,
                self.state.chapter_number(chapter_id),
                len(self.state.outline),
                [c.title for c in self.state.outline],
                thinking_mode=thinking,
            )

        content = await self._attempt("write_chapter", run)
        if content is None:
            return None
        self.dispatch(ChapterWritten(chapter_id, content, generation))
        return content

    async def write_all_chapters(self, rewrite: bool = False) -> int:
        """Write every chapter concurrently; returns how many succeeded."""
        ids = [c.id for c in self.state.outline if rewrite or c.id not in self.state.written]
        results = await asyncio.gather(*(self.write_chapter(chapter_id) for chapter_id in ids))
        return sum(1 for r in results if r is not None)

    async def adjust_chapter(self, chapter_id: str, instruction: str) -> Optional[WrittenChapterContent]:
        self.dispatch(ErrorCleared())
        generation = self.state.generation

        async def run():
            _require_instruction(instruction)
            original = require_written(self.state, chapter_id)
            return await self.writer.adjust_chapter(original, instruction)

        content = await self._attempt("adjust_chapter", run)
        if content is None:
            return None
        self.dispatch(ChapterAdjusted(chapter_id, content, generation))
        return content

    async def final_review(self) -> bool:
        """Copy-edit the whole book in one request; nothing changes unless it succeeds."""
        self.dispatch(ErrorCleared())
        generation = self.state.generation

        async def run():
            require_all_chapters_written(self.state)
            chapters = [
                ReviewedChapter(title=c.title, content=self.state.written[c.id].content)
                for c in self.state.outline
            ]
            return await self.editor.final_review(chapters)

        reviewed = await self._attempt("final_review", run)
        if reviewed is None:
            return False
        self.dispatch(ReviewCompleted(reviewed, generation))
        return True

    # ---- Covers ----

    async def generate_cover(self, chapter_id: str, tone: ImageTone | str) -> Optional[str]:
        self.dispatch(ErrorCleared())
        generation = self.state.generation

        async def run():
            written = require_written(self.state, chapter_id)
            return await self.illustrator.generate_cover(written.content, tone)

        data_uri = await self._attempt("generate_cover", run)
        if data_uri is None:
            return None
        self.dispatch(CoverGenerated(chapter_id, data_uri, generation))
        return data_uri

    async def generate_saved_cover(self, chapter_id: str, tone: ImageTone | str) -> Optional[str]:
        """Cover for a bookmarked chapter; the result is returned, not stored."""
        self.dispatch(ErrorCleared())

        async def run():
            saved = next((c for c in self.state.saved if c.id == chapter_id), None)
            if saved is None:
                raise InvalidParameterError("chapter_id", f"No saved chapter with id '{chapter_id}'")
            return await self.illustrator.generate_cover(saved.content, tone)

        return await self._attempt("generate_cover", run)

    # ---- Export ----

    def export_manuscript(self) -> str:
        """The whole draft as one Markdown document; empty when there is no outline."""
        if not self.state.outline:
            return ""
        return build_manuscript(self.state.outline, self.state.written)
