"""Tests for the pure draft-state transitions."""

from dataclasses import replace

import pytest

from config.exceptions import InvalidParameterError
from models.chapter import ChapterPlan, ReviewedChapter, SavedChapter, WrittenChapterContent
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
from workflow.transitions import make_outline_id, reduce


def _written(text="本文"):
    return WrittenChapterContent(content=text, intent="意図")


def _snapshot(state, chapter_id):
    return SavedChapter.snapshot(state.find_chapter(chapter_id), state.written[chapter_id])


class TestOutlineTransitions:
    def test_outline_requested_clears_draft_and_bumps_generation(self, written_state):
        state = replace(written_state, covers={"1000-0": "data:x"}, error="前のエラー")

        result = reduce(state, OutlineRequested("新しいテーマ"))

        assert result.state.topic == "新しいテーマ"
        assert result.state.outline == ()
        assert result.state.written == {}
        assert result.state.covers == {}
        assert result.state.error is None
        assert result.state.generation == state.generation + 1
        assert result.effects == ()

    def test_outline_requested_keeps_saved_chapters(self, written_state):
        snapshot = _snapshot(written_state, "1000-0")
        state = replace(written_state, saved=(snapshot,))
        assert reduce(state, OutlineRequested("次")).state.saved == (snapshot,)

    def test_blank_topic_raises(self, sample_state):
        with pytest.raises(InvalidParameterError):
            reduce(sample_state, OutlineRequested("  "))

    def test_outline_generated_assigns_ids_in_order(self, plan_dicts):
        state = reduce(DraftState(), OutlineRequested("テーマ")).state
        plans = [ChapterPlan(**p) for p in plan_dicts]

        state = reduce(state, OutlineGenerated(plans, state.generation, 1700000000000)).state

        assert [c.id for c in state.outline] == [f"1700000000000-{i}" for i in range(5)]
        assert [c.title for c in state.outline] == [p.title for p in plans]
        assert state.written == {}

    def test_stale_outline_is_dropped(self, sample_state, plan_dicts):
        plans = [ChapterPlan(**plan_dicts[0])]
        result = reduce(sample_state, OutlineGenerated(plans, sample_state.generation - 1, 1))
        assert result.state is sample_state

    def test_outline_adjusted_replaces_one_entry_and_keeps_id(self, written_state, make_plan):
        plan = ChapterPlan(**make_plan("改訂された戦略", n_sections=4))

        state = reduce(written_state, OutlineAdjusted("1000-2", plan, written_state.generation)).state

        assert state.outline[2].id == "1000-2"
        assert state.outline[2].title == "改訂された戦略"
        assert len(state.outline[2].sections) == 4
        assert [c for i, c in enumerate(state.outline) if i != 2] == \
            [c for i, c in enumerate(written_state.outline) if i != 2]
        assert state.written == written_state.written

    def test_outline_adjusted_for_unknown_id_is_dropped(self, sample_state, make_plan):
        plan = ChapterPlan(**make_plan("x"))
        result = reduce(sample_state, OutlineAdjusted("missing", plan, sample_state.generation))
        assert result.state is sample_state

    def test_make_outline_id(self):
        assert make_outline_id(1700000000000, 3) == "1700000000000-3"


class TestChapterTransitions:
    def test_chapter_written_adds_content(self, sample_state):
        state = reduce(sample_state, ChapterWritten("1000-1", _written(), sample_state.generation)).state
        assert state.written == {"1000-1": _written()}

    def test_rewrite_overwrites(self, written_state):
        state = reduce(written_state, ChapterWritten("1000-1", _written("新"), written_state.generation)).state
        assert state.written["1000-1"].content == "新"

    def test_result_for_previous_outline_is_dropped(self, sample_state):
        stale = ChapterWritten("1000-1", _written(), sample_state.generation - 1)
        assert reduce(sample_state, stale).state.written == {}

    def test_result_for_unknown_chapter_is_dropped(self, sample_state):
        result = reduce(sample_state, ChapterWritten("other", _written(), sample_state.generation))
        assert result.state.written == {}

    def test_adjusted_requires_existing_content(self, sample_state):
        result = reduce(sample_state, ChapterAdjusted("1000-1", _written(), sample_state.generation))
        assert result.state.written == {}

    def test_adjusted_replaces_content(self, written_state):
        state = reduce(written_state, ChapterAdjusted("1000-1", _written("調整後"), written_state.generation)).state
        assert state.written["1000-1"].content == "調整後"

    def test_cover_generated(self, written_state):
        state = reduce(written_state, CoverGenerated("1000-0", "data:image/jpeg;base64,AA", written_state.generation)).state
        assert state.covers == {"1000-0": "data:image/jpeg;base64,AA"}


class TestReviewCompleted:
    def test_content_replaced_by_title_and_intent_kept(self, written_state):
        reviewed = [ReviewedChapter(title=c.title, content=f"{c.title}（推敲済み）") for c in written_state.outline]

        state = reduce(written_state, ReviewCompleted(reviewed, written_state.generation)).state

        for chapter in state.outline:
            assert state.written[chapter.id].content == f"{chapter.title}（推敲済み）"
            assert state.written[chapter.id].intent == f"{chapter.title}の意図"

    def test_unmatched_title_is_skipped(self, written_state):
        reviewed = [ReviewedChapter(title="存在しない章", content="x")]
        state = reduce(written_state, ReviewCompleted(reviewed, written_state.generation)).state
        assert state.written == written_state.written

    def test_duplicate_titles_update_first_match(self, written_state):
        outline = (written_state.outline[0], written_state.outline[1].model_copy(update={"title": "はじめに"}))
        state = replace(written_state, outline=outline)
        reviewed = [ReviewedChapter(title="はじめに", content="推敲済み")]

        state = reduce(state, ReviewCompleted(reviewed, state.generation)).state

        assert state.written["1000-0"].content == "推敲済み"
        assert state.written["1000-1"].content == "現状分析の本文"


class TestSavedChapterTransitions:
    def test_save_appends_and_requests_persist(self, written_state):
        snapshot = _snapshot(written_state, "1000-0")

        result = reduce(written_state, ChapterSaved(snapshot))

        assert result.state.saved == (snapshot,)
        assert result.effects == (PersistSavedChapters((snapshot,)),)

    def test_save_twice_is_a_no_op(self, written_state):
        snapshot = _snapshot(written_state, "1000-0")
        state = reduce(written_state, ChapterSaved(snapshot)).state

        result = reduce(state, ChapterSaved(snapshot))

        assert result.state is state
        assert result.effects == ()

    def test_delete_removes_exactly_one(self, written_state):
        first = _snapshot(written_state, "1000-0")
        second = _snapshot(written_state, "1000-1")
        state = replace(written_state, saved=(first, second))

        result = reduce(state, ChapterDeleted("1000-0"))

        assert result.state.saved == (second,)
        assert result.effects == (PersistSavedChapters((second,)),)

    def test_delete_unknown_is_a_no_op(self, written_state):
        state = replace(written_state, saved=(_snapshot(written_state, "1000-0"),))
        result = reduce(state, ChapterDeleted("missing"))
        assert result.state is state
        assert result.effects == ()

    def test_loaded_replaces_saved(self, written_state):
        snapshot = _snapshot(written_state, "1000-3")
        assert reduce(DraftState(), SavedChaptersLoaded([snapshot])).state.saved == (snapshot,)


class TestErrorSlot:
    def test_error_raised_and_cleared(self):
        state = reduce(DraftState(), ErrorRaised("失敗しました。")).state
        assert state.error == "失敗しました。"
        assert reduce(state, ErrorCleared()).state.error is None

    def test_unknown_action_raises(self):
        with pytest.raises(TypeError):
            reduce(DraftState(), object())
