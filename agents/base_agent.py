"""Base agent class with the shared request/validate step."""

import logging
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from config.exceptions import ResponseFormatError
from config.settings import Settings
from prompts.builder import PromptRequest
from prompts.persona import WRITING_STYLE_SUMMARY
from tools.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


class BaseAgent:
    """Base class for all agents calling the model."""

    def __init__(
        self,
        llm_client: Optional[GeminiClient] = None,
        settings: Optional[Settings] = None,
        persona: str = WRITING_STYLE_SUMMARY,
    ):
        self.settings = settings or Settings()
        self.llm = llm_client or GeminiClient(self.settings)
        self.persona = persona

    async def _request(self, request: PromptRequest, thinking: bool) -> Any:
        """Call the model and validate the parsed JSON against the request's response model.

        Raises:
            ResponseFormatError: If the payload does not have the expected shape.
        """
        data = await self.llm.generate_json(request, thinking=thinking)
        try:
            return TypeAdapter(request.response_model).validate_python(data)
        except ValidationError as e:
            logger.warning("%s: response failed schema validation: %s", type(self).__name__, e)
            raise ResponseFormatError(
                f"Response does not match the expected schema: {e.error_count()} error(s)",
                raw_response=str(data),
            ) from e
