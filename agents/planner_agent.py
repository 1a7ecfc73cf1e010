"""Planner Agent: generates and adjusts the book's chapter outline."""

import logging
from typing import Optional

from agents.base_agent import BaseAgent
from config.exceptions import ResponseFormatError
from models.chapter import ChapterPlan
from prompts.builder import build_outline_adjustment_prompt, build_outline_prompt

logger = logging.getLogger(__name__)


class PlannerAgent(BaseAgent):
    """Produces the table of contents and rewrites single outline entries."""

    async def generate_outline(
        self,
        topic: str,
        num_chapters: int,
        difficulty: int,
        direction: Optional[str] = None,
        thinking_mode: Optional[bool] = None,
    ) -> list[ChapterPlan]:
        """Generate the chapter outline for a new book.

        Args:
            topic: Book topic. Must not be blank.
            num_chapters: Requested chapter count (callers keep it in 3-12).
            difficulty: Reader level 1-5.
            direction: Optional writing direction.
            thinking_mode: Request the thinking budget. Defaults to settings.

        Returns:
            Chapter plans in model order. The length may differ from
            ``num_chapters``.

        Raises:
            InvalidParameterError: Blank topic.
            ResponseFormatError: Malformed or empty outline.
        """
        request = build_outline_prompt(topic, num_chapters, difficulty, self.persona, direction)
        thinking = self.settings.thinking_mode if thinking_mode is None else thinking_mode

        logger.info("Generating %d-chapter outline for '%s'", num_chapters, topic)
        plans = await self._request(request, thinking=thinking)
        if not plans:
            raise ResponseFormatError("Model returned an empty outline")

        if len(plans) != num_chapters:
            logger.warning("Requested %d chapters, model returned %d", num_chapters, len(plans))
        return plans

    async def adjust_outline(self, current: ChapterPlan, instruction: str) -> ChapterPlan:
        """Rewrite one outline entry according to a free-text instruction."""
        request = build_outline_adjustment_prompt(current, instruction, self.persona)
        logger.info("Adjusting outline entry '%s'", current.title)
        return await self._request(request, thinking=True)
