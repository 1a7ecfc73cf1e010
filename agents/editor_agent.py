"""Editor Agent: whole-book copy-edit pass."""

import logging
from typing import Sequence

from agents.base_agent import BaseAgent
from models.chapter import ReviewedChapter
from prompts.builder import build_final_review_prompt

logger = logging.getLogger(__name__)


class EditorAgent(BaseAgent):
    """Unifies wording, terminology and flow across all chapters in one call."""

    async def final_review(self, chapters: Sequence[ReviewedChapter]) -> list[ReviewedChapter]:
        """Submit every chapter at once and return the revised chapters.

        The result is all-or-nothing: any failure raises and nothing is returned.
        """
        request = build_final_review_prompt(chapters, self.persona)
        logger.info("Final review of %d chapters", len(chapters))
        result = await self._request(request, thinking=True)
        if len(result.chapters) != len(chapters):
            logger.warning("Final review returned %d of %d chapters", len(result.chapters), len(chapters))
        return list(result.chapters)
