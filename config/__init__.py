"""Configuration package: settings, logging, and exceptions."""

from config.exceptions import (
    BookDraftError,
    ConfigurationError,
    InvalidParameterError,
    PreconditionError,
    LLMError,
    ResponseFormatError,
    DatabaseError,
)
from config.logging_config import setup_logging
from config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "BookDraftError",
    "ConfigurationError",
    "InvalidParameterError",
    "PreconditionError",
    "LLMError",
    "ResponseFormatError",
    "DatabaseError",
]
