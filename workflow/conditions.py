"""Precondition checks on the draft state."""

from config.exceptions import InvalidParameterError, PreconditionError
from models.chapter import ChapterOutline, WrittenChapterContent
from workflow.state import DraftState


def all_chapters_written(state: DraftState) -> bool:
    """True when the outline is non-empty and every entry has written content."""
    return bool(state.outline) and all(c.id in state.written for c in state.outline)


def require_chapter(state: DraftState, chapter_id: str) -> ChapterOutline:
    chapter = state.find_chapter(chapter_id)
    if chapter is None:
        raise InvalidParameterError("chapter_id", f"No chapter with id '{chapter_id}'")
    return chapter


def require_written(state: DraftState, chapter_id: str) -> WrittenChapterContent:
    require_chapter(state, chapter_id)
    written = state.written.get(chapter_id)
    if written is None:
        raise PreconditionError(f"Chapter '{chapter_id}' has not been written yet", {"chapter_id": chapter_id})
    return written


def require_all_chapters_written(state: DraftState):
    if not state.outline:
        raise PreconditionError("No outline to review")
    missing = [c.id for c in state.outline if c.id not in state.written]
    if missing:
        raise PreconditionError(
            "Final review requires every chapter to be written",
            {"missing": len(missing), "total": len(state.outline)},
        )
