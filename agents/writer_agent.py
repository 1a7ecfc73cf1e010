"""Writer Agent: chapter prose from an outline entry, and instructed rewrites."""

import logging
from typing import Optional, Sequence

from agents.base_agent import BaseAgent
from models.chapter import ChapterPlan, WrittenChapterContent
from prompts.builder import build_chapter_adjustment_prompt, build_chapter_write_prompt
from tools.text_utils import count_total_chars, is_within_length

logger = logging.getLogger(__name__)


class WriterAgent(BaseAgent):
    """Writes and adjusts chapter content in the book's persona."""

    def _check_length(self, label: str, content: WrittenChapterContent):
        # The length range is a prompt contract only; deviations are reported, not rejected
        if not is_within_length(content.content, self.settings.chapter_min_chars, self.settings.chapter_max_chars):
            logger.warning(
                "%s: %d chars outside [%d, %d]",
                label,
                count_total_chars(content.content),
                self.settings.chapter_min_chars,
                self.settings.chapter_max_chars,
            )

    async def write_chapter(
        self,
        topic: str,
        chapter: ChapterPlan,
        chapter_number: int,
        total_chapters: int,
        all_titles: Sequence[str],
        thinking_mode: Optional[bool] = None,
    ) -> WrittenChapterContent:
        """Write a single chapter.

        Args:
            topic: Book topic, restated in the chapter introduction.
            chapter: The chapter's outline.
            chapter_number: 1-based position in the book.
            total_chapters: Number of chapters in the outline.
            all_titles: Every chapter title in order, for the table of contents.
            thinking_mode: Request the thinking budget. Defaults to settings.

        Returns:
            The written content and its intent.
        """
        request = build_chapter_write_prompt(
            topic, chapter, chapter_number, total_chapters, all_titles, self.persona,
        )
        thinking = self.settings.thinking_mode if thinking_mode is None else thinking_mode

        logger.info("Writing chapter %d/%d: '%s'", chapter_number, total_chapters, chapter.title)
        content = await self._request(request, thinking=thinking)
        self._check_length(f"Chapter {chapter_number}", content)
        return content

    async def adjust_chapter(self, original: WrittenChapterContent, instruction: str) -> WrittenChapterContent:
        request = build_chapter_adjustment_prompt(original, instruction, self.persona)
        logger.info("Adjusting chapter content (%d chars)", len(original.content))
        content = await self._request(request, thinking=True)
        self._check_length("Adjusted chapter", content)
        return content
