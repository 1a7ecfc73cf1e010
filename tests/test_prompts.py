"""Tests for reader-level labels, chapter numbering and prompt builders."""

import json

import pytest

from config.exceptions import InvalidParameterError
from models.chapter import ChapterOutline, ChapterPlan, FinalReviewResult, ReviewedChapter, WrittenChapterContent
from prompts.builder import (
    build_chapter_adjustment_prompt,
    build_chapter_write_prompt,
    build_final_review_prompt,
    build_image_prompt,
    build_outline_adjustment_prompt,
    build_outline_prompt,
)
from prompts.labels import (
    chapter_bookends,
    chapter_title_text,
    get_difficulty_description,
    number_to_kanji,
)
from prompts.persona import WRITING_STYLE_SUMMARY
from prompts.schemas import CHAPTER_CONTENT_SCHEMA, CHAPTER_PLAN_SCHEMA, FINAL_REVIEW_SCHEMA, OUTLINE_SCHEMA

TITLES = ["はじめに", "現状分析", "戦略", "実践", "おわりに"]


def _plan(title="戦略"):
    return ChapterPlan(
        title=title,
        overview="概要",
        purpose="目的",
        sections=[{"title": "節", "summary": "節の概要"}],
    )


class TestDifficultyDescription:
    def test_each_level_maps_to_distinct_description(self):
        descriptions = [get_difficulty_description(level) for level in range(1, 6)]
        assert len(set(descriptions)) == 5

    def test_level_three_is_business_person(self):
        assert "ビジネスパーソン" in get_difficulty_description(3)

    @pytest.mark.parametrize("level", [0, 6, -1])
    def test_out_of_range_falls_back(self, level):
        assert get_difficulty_description(level) == "一般的なビジネスオーディエンス"


class TestChapterNumbering:
    def test_number_to_kanji(self):
        assert number_to_kanji(1) == "一"
        assert number_to_kanji(10) == "十"
        assert number_to_kanji(11) == "十一"

    def test_number_to_kanji_beyond_table(self):
        assert number_to_kanji(12) == "12"
        assert number_to_kanji(0) == "0"

    def test_five_chapter_labels(self):
        labels = [chapter_title_text(i, 5, "t") for i in range(1, 6)]
        assert labels == ["序章：t", "第一章：t", "第二章：t", "第三章：t", "終章：t"]

    def test_single_chapter_has_no_label(self):
        assert chapter_title_text(1, 1, "唯一の章") == "唯一の章"


class TestChapterBookends:
    def test_single_chapter_book_has_no_bookends(self):
        assert chapter_bookends("テーマ", "唯一の章", 1, 1, ["唯一の章"]) == ("", "")

    def test_prologue_lists_toc_and_points_to_first_chapter(self):
        intro, outro = chapter_bookends("持続可能な経営", "はじめに", 1, 5, TITLES)
        assert "「持続可能な経営」というテーマで執筆しています" in intro
        assert "## この書籍の目次" in intro
        assert "- 序章：はじめに" in intro
        assert "- 終章：おわりに" in intro
        assert "次章（第一章：現状分析）" in outro

    def test_epilogue_closes_book(self):
        intro, outro = chapter_bookends("持続可能な経営", "おわりに", 5, 5, TITLES)
        assert "本章が最終章となります" in intro
        assert "完結です" in outro
        assert "### 引用・参考文献" in outro

    def test_middle_chapter_names_itself_and_next(self):
        intro, outro = chapter_bookends("持続可能な経営", "戦略", 3, 5, TITLES)
        assert "「戦略」について書きます" in intro
        assert "次章（第三章：実践）" in outro


class TestOutlinePrompt:
    def test_scenario_business_topic(self):
        request = build_outline_prompt("持続可能な経営", 5, 3)
        assert "ビジネスパーソン" in request.instruction
        assert "章の数: 5章" in request.instruction
        assert request.message == "テーマ「持続可能な経営」について、5章構成で書籍の詳細な目次案を作成してください。"
        assert request.schema is OUTLINE_SCHEMA
        assert request.response_model == list[ChapterPlan]

    def test_direction_included_only_when_given(self):
        assert "執筆の方向性" not in build_outline_prompt("テーマ", 5, 3).instruction
        with_direction = build_outline_prompt("テーマ", 5, 3, direction="事例中心")
        assert "執筆の方向性: 「事例中心」" in with_direction.instruction

    @pytest.mark.parametrize("topic", ["", "   "])
    def test_blank_topic_raises(self, topic):
        with pytest.raises(InvalidParameterError) as exc_info:
            build_outline_prompt(topic, 5, 3)
        assert exc_info.value.parameter == "topic"


class TestChapterWritePrompt:
    def test_first_of_five(self):
        request = build_chapter_write_prompt("持続可能な経営", _plan("はじめに"), 1, 5, TITLES)
        assert "この書籍の目次" in request.instruction
        assert "次章（第一章：現状分析）" in request.instruction
        assert request.message == "「はじめに」というタイトルの章を執筆してください。"
        assert request.response_model is WrittenChapterContent

    def test_last_of_five(self):
        request = build_chapter_write_prompt("持続可能な経営", _plan("おわりに"), 5, 5, TITLES)
        assert "本章が最終章となります" in request.instruction
        assert "引用・参考文献" in request.instruction

    def test_middle_of_five(self):
        request = build_chapter_write_prompt("持続可能な経営", _plan("戦略"), 3, 5, TITLES)
        assert "「戦略」について書きます" in request.instruction
        assert "次章（第三章：実践）" in request.instruction

    def test_single_chapter_has_no_toc(self):
        request = build_chapter_write_prompt("持続可能な経営", _plan("唯一"), 1, 1, ["唯一"])
        assert "この書籍の目次" not in request.instruction

    def test_outline_id_is_not_sent(self):
        outline = ChapterOutline(id="1700000000000-2", **_plan().model_dump())
        request = build_chapter_write_prompt("テーマ", outline, 3, 5, TITLES)
        assert "1700000000000-2" not in request.instruction
        assert '"overview": "概要"' in request.instruction

    def test_rules_present(self):
        request = build_chapter_write_prompt("テーマ", _plan(), 3, 5, TITLES)
        assert "2,000文字から5,000文字" in request.instruction
        assert "絵文字は一切使用しないでください" in request.instruction
        assert request.schema is CHAPTER_CONTENT_SCHEMA


class TestAdjustmentPrompts:
    def test_outline_adjustment_embeds_current_and_instruction(self):
        request = build_outline_adjustment_prompt(_plan("戦略"), "もっと具体的に")
        assert '"title": "戦略"' in request.instruction
        assert "「もっと具体的に」" in request.instruction
        assert request.schema is CHAPTER_PLAN_SCHEMA
        assert request.response_model is ChapterPlan

    def test_chapter_adjustment_embeds_original(self):
        original = WrittenChapterContent(content="元の本文", intent="元の意図")
        request = build_chapter_adjustment_prompt(original, "短くしてください")
        assert "「元の本文」" in request.instruction
        assert "「元の意図」" in request.instruction
        assert "「短くしてください」" in request.instruction
        assert request.message == "章を修正してください。"


class TestFinalReviewPrompt:
    def test_manuscript_serialized_in_order(self):
        chapters = [ReviewedChapter(title=t, content=f"{t}本文") for t in TITLES]
        request = build_final_review_prompt(chapters)
        prefix = "以下の書籍原稿を推敲してください：\n"
        assert request.message.startswith(prefix)
        payload = json.loads(request.message[len(prefix):])
        assert [c["title"] for c in payload] == TITLES
        assert request.schema is FINAL_REVIEW_SCHEMA
        assert request.response_model is FinalReviewResult


class TestPersona:
    def test_persona_in_every_text_prompt(self):
        original = WrittenChapterContent(content="本文", intent="意図")
        requests = [
            build_outline_prompt("テーマ", 5, 3),
            build_outline_adjustment_prompt(_plan(), "指示"),
            build_chapter_write_prompt("テーマ", _plan(), 2, 5, TITLES),
            build_chapter_adjustment_prompt(original, "指示"),
            build_final_review_prompt([ReviewedChapter(title="t", content="c")]),
        ]
        for request in requests:
            assert WRITING_STYLE_SUMMARY in request.instruction

    def test_custom_persona_replaces_default(self):
        request = build_outline_prompt("テーマ", 5, 3, persona="別の著者")
        assert "別の著者" in request.instruction
        assert WRITING_STYLE_SUMMARY not in request.instruction


class TestImagePrompt:
    @pytest.mark.parametrize("tone, marker", [
        ("line-art", "line art"),
        ("watercolor", "watercolor"),
        ("creative", "abstractly"),
    ])
    def test_tone_selects_style(self, tone, marker):
        prompt = build_image_prompt("章の本文", tone)
        assert marker in prompt
        assert '"章の本文"' in prompt

    def test_unknown_tone_raises(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            build_image_prompt("本文", "oil")
        assert exc_info.value.parameter == "tone"
