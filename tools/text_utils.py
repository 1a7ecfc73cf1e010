"""Text utilities: character counting and manuscript export."""

import re
from typing import Mapping, Sequence

from models.chapter import ChapterOutline, WrittenChapterContent

CHAPTER_SEPARATOR = "\n\n---\n\n"


def count_total_chars(text: str) -> int:
    """Count all non-whitespace characters including punctuation."""
    return len(re.sub(r"\s", "", text))


def is_within_length(text: str, min_chars: int, max_chars: int) -> bool:
    return min_chars <= count_total_chars(text) <= max_chars


def render_chapter(outline: ChapterOutline, written: WrittenChapterContent | None) -> str:
    """Render one chapter as Markdown; unwritten chapters fall back to their overview."""
    text = f"## {outline.title}\n\n"
    if written is not None:
        return text + written.content
    return text + f"### 章の概要\n\n{outline.overview}"


def build_manuscript(
    outline: Sequence[ChapterOutline],
    written: Mapping[str, WrittenChapterContent],
) -> str:
    """Concatenate every chapter into one clipboard-ready Markdown document."""
    return CHAPTER_SEPARATOR.join(render_chapter(o, written.get(o.id)) for o in outline)
