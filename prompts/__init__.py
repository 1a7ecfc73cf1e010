"""Prompt builders, persona text, and response schemas."""

from prompts.builder import (
    PromptRequest,
    build_outline_prompt,
    build_outline_adjustment_prompt,
    build_chapter_write_prompt,
    build_chapter_adjustment_prompt,
    build_final_review_prompt,
    build_image_prompt,
)
from prompts.labels import chapter_title_text, get_difficulty_description, number_to_kanji
from prompts.persona import WRITING_STYLE_SUMMARY

__all__ = [
    "PromptRequest",
    "build_outline_prompt",
    "build_outline_adjustment_prompt",
    "build_chapter_write_prompt",
    "build_chapter_adjustment_prompt",
    "build_final_review_prompt",
    "build_image_prompt",
    "chapter_title_text",
    "get_difficulty_description",
    "number_to_kanji",
    "WRITING_STYLE_SUMMARY",
]
