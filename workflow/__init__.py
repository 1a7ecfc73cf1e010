"""Workflow package: draft state, transitions, guards, and the session."""

from workflow.state import DraftState, Transition, PersistSavedChapters
from workflow.transitions import reduce, make_outline_id
from workflow.conditions import (
    all_chapters_written,
    require_chapter,
    require_written,
    require_all_chapters_written,
)
from workflow.session import DraftSession, OutlineParams

__all__ = [
    "DraftState",
    "Transition",
    "PersistSavedChapters",
    "reduce",
    "make_outline_id",
    "all_chapters_written",
    "require_chapter",
    "require_written",
    "require_all_chapters_written",
    "DraftSession",
    "OutlineParams",
]
