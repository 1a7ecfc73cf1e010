"""Custom exception hierarchy for the book drafting workflow."""

from typing import Optional


class BookDraftError(Exception):
    """Base exception for all bookdraft errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(BookDraftError):
    """Required configuration (the API key) is missing."""

    def __init__(self, message: str = "API key is not configured", setting: str = "gemini_api_key"):
        super().__init__(message, {"setting": setting})
        self.setting = setting


# ---- Input Errors ----

class InvalidParameterError(BookDraftError):
    """A required input is blank or refers to something that does not exist."""

    def __init__(self, parameter: str, message: str = ""):
        msg = message or f"Invalid parameter: {parameter}"
        super().__init__(msg, {"parameter": parameter})
        self.parameter = parameter


class PreconditionError(BookDraftError):
    """The draft is not in a state that allows the requested action."""


# ---- LLM Errors ----

class LLMError(BookDraftError):
    """Base exception for Gemini API errors."""


class ResponseFormatError(LLMError):
    """Model output was not valid JSON or did not match the expected schema."""

    def __init__(self, message: str = "Malformed model response", raw_response: str = ""):
        details = {"raw_response": raw_response[:200]} if raw_response else {}
        super().__init__(message, details)
        self.raw_response = raw_response


# ---- Storage Errors ----

class DatabaseError(BookDraftError):
    """Local storage operation failed."""
