"""Configuration settings loaded from environment and .env file."""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, loaded from environment variables and .env.

    The API key is read lazily by the Gemini client on every call, so a
    missing key surfaces per action rather than at startup.
    """

    # Credential
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "GEMINI_API_KEY", "API_KEY"),
    )

    # Models
    llm_model_text: str = "gemini-2.5-pro"
    llm_model_image: str = "imagen-4.0-generate-001"
    thinking_budget: int = 32768
    thinking_mode: bool = True

    # Storage
    storage_path: Path = Path("./data/bookdraft.db")
    storage_key: str = "savedBookChapters"

    # Chapter length contract (requested from the model, only logged locally)
    chapter_min_chars: int = 2000
    chapter_max_chars: int = 5000

    # Logging
    log_dir: Path = Path("./data/logs")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("thinking_budget", "chapter_min_chars", "chapter_max_chars")
    @classmethod
    def validate_non_negative(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @field_validator("storage_path", "log_dir")
    @classmethod
    def create_parent_dir(cls, v: Path) -> Path:
        v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @model_validator(mode="after")
    def validate_length_contract(self) -> "Settings":
        if self.chapter_min_chars >= self.chapter_max_chars:
            raise ValueError(
                f"chapter_min_chars ({self.chapter_min_chars}) must be below "
                f"chapter_max_chars ({self.chapter_max_chars})"
            )
        return self


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
