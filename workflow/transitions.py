"""Pure state transitions: ``reduce(state, action) -> Transition``.

No I/O happens here. Persisting saved chapters is requested through the
``PersistSavedChapters`` effect and carried out by the session.
"""

import logging
from dataclasses import replace
from typing import Callable

from config.exceptions import InvalidParameterError
from models.chapter import ChapterOutline
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
    Transition,
)

logger = logging.getLogger(__name__)


def make_outline_id(created_at_ms: int, index: int) -> str:
    """Timestamp + position; unique within one generated outline."""
    return f"{created_at_ms}-{index}"


def _is_current(state: DraftState, generation: int, chapter_id: str | None = None) -> bool:
    if generation != state.generation:
        logger.warning(
            "Dropping result from outline generation %d (current %d)", generation, state.generation,
        )
        return False
    if chapter_id is not None and state.find_chapter(chapter_id) is None:
        logger.warning("Dropping result for unknown chapter id '%s'", chapter_id)
        return False
    return True


# ---- Outline ----

def _outline_requested(state: DraftState, action: OutlineRequested) -> Transition:
    if not action.topic or not action.topic.strip():
        raise InvalidParameterError("topic", "Book topic must not be blank")
    return Transition(replace(
        state,
        topic=action.topic,
        outline=(),
        written={},
        covers={},
        error=None,
        generation=state.generation + 1,
    ))


def _outline_generated(state: DraftState, action: OutlineGenerated) -> Transition:
    if not _is_current(state, action.generation):
        return Transition(state)
    outline = tuple(
        ChapterOutline(id=make_outline_id(action.created_at_ms, i), **plan.model_dump())
        for i, plan in enumerate(action.plans)
    )
    return Transition(replace(state, outline=outline, written={}, covers={}))


def _outline_adjusted(state: DraftState, action: OutlineAdjusted) -> Transition:
    if not _is_current(state, action.generation, action.chapter_id):
        return Transition(state)
    outline = tuple(
        c.with_plan(action.plan) if c.id == action.chapter_id else c
        for c in state.outline
    )
    return Transition(replace(state, outline=outline))


# ---- Chapter content ----

def _chapter_written(state: DraftState, action: ChapterWritten) -> Transition:
    if not _is_current(state, action.generation, action.chapter_id):
        return Transition(state)
    return Transition(replace(state, written={**state.written, action.chapter_id: action.content}))


def _chapter_adjusted(state: DraftState, action: ChapterAdjusted) -> Transition:
    if not _is_current(state, action.generation, action.chapter_id):
        return Transition(state)
    if action.chapter_id not in state.written:
        logger.warning("Dropping adjustment for unwritten chapter '%s'", action.chapter_id)
        return Transition(state)
    return Transition(replace(state, written={**state.written, action.chapter_id: action.content}))


def _review_completed(state: DraftState, action: ReviewCompleted) -> Transition:
    """Overwrite content of the first outline entry whose title matches exactly.

    Intent is kept from before the review. Titles with no match are skipped.
    """
    if not _is_current(state, action.generation):
        return Transition(state)
    written = dict(state.written)
    for reviewed in action.chapters:
        match = next((c for c in state.outline if c.title == reviewed.title), None)
        if match is None or match.id not in written:
            logger.warning("Final review returned unmatched chapter title '%s'", reviewed.title)
            continue
        written[match.id] = written[match.id].model_copy(update={"content": reviewed.content})
    return Transition(replace(state, written=written))


def _cover_generated(state: DraftState, action: CoverGenerated) -> Transition:
    if not _is_current(state, action.generation, action.chapter_id):
        return Transition(state)
    return Transition(replace(state, covers={**state.covers, action.chapter_id: action.data_uri}))


# ---- Saved chapters ----

def _chapter_saved(state: DraftState, action: ChapterSaved) -> Transition:
    if state.is_saved(action.snapshot.id):
        return Transition(state)
    saved = state.saved + (action.snapshot,)
    return Transition(replace(state, saved=saved), (PersistSavedChapters(saved),))


def _chapter_deleted(state: DraftState, action: ChapterDeleted) -> Transition:
    saved = tuple(c for c in state.saved if c.id != action.chapter_id)
    if len(saved) == len(state.saved):
        return Transition(state)
    return Transition(replace(state, saved=saved), (PersistSavedChapters(saved),))


def _saved_loaded(state: DraftState, action: SavedChaptersLoaded) -> Transition:
    return Transition(replace(state, saved=tuple(action.chapters)))


# ---- Error slot ----

def _error_raised(state: DraftState, action: ErrorRaised) -> Transition:
    return Transition(replace(state, error=action.message))


def _error_cleared(state: DraftState, action: ErrorCleared) -> Transition:
    return Transition(replace(state, error=None))


_HANDLERS: dict[type, Callable] = {
    OutlineRequested: _outline_requested,
    OutlineGenerated: _outline_generated,
    OutlineAdjusted: _outline_adjusted,
    ChapterWritten: _chapter_written,
    ChapterAdjusted: _chapter_adjusted,
    ReviewCompleted: _review_completed,
    CoverGenerated: _cover_generated,
    ChapterSaved: _chapter_saved,
    ChapterDeleted: _chapter_deleted,
    SavedChaptersLoaded: _saved_loaded,
    ErrorRaised: _error_raised,
    ErrorCleared: _error_cleared,
}


def reduce(state: DraftState, action) -> Transition:
    """Apply one action to the state.

    Raises:
        InvalidParameterError: ``OutlineRequested`` with a blank topic.
        TypeError: Unknown action type.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown action: {type(action).__name__}")
    return handler(state, action)
