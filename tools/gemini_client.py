"""Gemini API wrapper for structured text and image generation."""

import base64
import logging
import os
from typing import Any, Optional

from google import genai
from google.genai import types

from config.exceptions import ConfigurationError, LLMError, ResponseFormatError
from config.settings import Settings
from prompts.builder import PromptRequest
from tools.llm_client import parse_json_response

logger = logging.getLogger(__name__)

_API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


class GeminiClient:
    """Thin async wrapper around ``google.genai``.

    A fresh SDK client is built for every call so the API key is resolved at
    call time. No retries: one failed attempt is terminal for the action.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.total_calls = 0

    def _api_key(self) -> str:
        key = self.settings.gemini_api_key
        if not key:
            for name in _API_KEY_ENV_VARS:
                key = os.environ.get(name)
                if key:
                    break
        if not key:
            raise ConfigurationError("API key is not configured (set GEMINI_API_KEY or API_KEY)")
        return key

    def _client(self) -> genai.Client:
        return genai.Client(api_key=self._api_key())

    async def generate_json(self, request: PromptRequest, thinking: bool = False) -> Any:
        """Send a structured-output request and return the parsed JSON value.

        Args:
            request: Built prompt (instruction, message, schema).
            thinking: Attach the thinking budget to the request.

        Returns:
            The decoded top-level JSON value (object or array).

        Raises:
            ConfigurationError: No API key; raised before any network call.
            LLMError: The API call failed.
            ResponseFormatError: The response body is not valid JSON.
        """
        client = self._client()
        config_kwargs = {
            "system_instruction": request.instruction,
            "response_mime_type": "application/json",
            "response_schema": request.schema,
        }
        if thinking:
            config_kwargs["thinking_config"] = types.ThinkingConfig(
                thinking_budget=self.settings.thinking_budget,
            )

        model = self.settings.llm_model_text
        self.total_calls += 1
        logger.debug("Gemini call: model=%s, thinking=%s, message=%d chars", model, thinking, len(request.message))

        try:
            response = await client.aio.models.generate_content(
                model=model,
                contents=request.message,
                config=types.GenerateContentConfig(**config_kwargs),
            )
        except Exception as e:
            raise LLMError(f"Gemini request failed: {e}", {"model": model}) from e

        text = response.text or ""
        logger.debug("Gemini result: %d chars", len(text))
        try:
            return parse_json_response(text)
        except ValueError as e:
            raise ResponseFormatError(str(e), raw_response=text) from e

    async def generate_image(self, prompt: str) -> str:
        """Generate one 16:9 JPEG and return it as a base64 data URI."""
        client = self._client()
        model = self.settings.llm_model_image
        self.total_calls += 1
        logger.debug("Imagen call: model=%s, prompt=%d chars", model, len(prompt))

        try:
            response = await client.aio.models.generate_images(
                model=model,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=1,
                    output_mime_type="image/jpeg",
                    aspect_ratio="16:9",
                ),
            )
        except Exception as e:
            raise LLMError(f"Image generation failed: {e}", {"model": model}) from e

        images = response.generated_images or []
        if not images or images[0].image is None or not images[0].image.image_bytes:
            raise ResponseFormatError("Image generation returned no image")

        encoded = base64.b64encode(images[0].image.image_bytes).decode("ascii")
        return f"data:image/jpeg;base64,{encoded}"

    def get_usage_summary(self) -> dict:
        """Return call count statistics."""
        return {"total_calls": self.total_calls}
