"""Illustrator Agent: cover images for chapters."""

import logging

from agents.base_agent import BaseAgent
from models.enums import ImageTone
from prompts.builder import build_image_prompt

logger = logging.getLogger(__name__)


class IllustratorAgent(BaseAgent):

    async def generate_cover(self, content: str, tone: ImageTone | str) -> str:
        """Generate one 16:9 cover for the chapter text; returns a data URI."""
        prompt = build_image_prompt(content, tone)
        logger.info("Generating %s cover image", ImageTone(tone).value)
        return await self.llm.generate_image(prompt)
