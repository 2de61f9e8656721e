"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Centralized runtime configuration for the API and providers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_title: str = "Caption Summarizer"

    transcript_language: str = "ja"

    gemini_summary_model: str = "gemini-2.5-flash"
    llm_timeout_seconds: int = 120

    session_cookie_name: str = "caption_session"
    max_page_sessions: int = 256

    gemini_api_key: str | None = Field(default=None)
    google_api_key: str | None = Field(default=None)

    @property
    def llm_timeout_milliseconds(self) -> int:
        """google-genai HttpOptions.timeout expects milliseconds."""
        return self.llm_timeout_seconds * 1000

    @property
    def server_api_key(self) -> str | None:
        return self.gemini_api_key or self.google_api_key

    @property
    def has_gemini(self) -> bool:
        return bool(self.server_api_key)

    def to_public_config(self) -> dict[str, str | int | bool]:
        """Return safe config values for API responses and diagnostics."""
        return {
            "api_title": self.api_title,
            "transcript_language": self.transcript_language,
            "gemini_summary_model": self.gemini_summary_model,
            "llm_timeout_seconds": self.llm_timeout_seconds,
            "gemini_configured": self.has_gemini,
        }


def _clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    settings = AppSettings()
    for field_name in ("gemini_api_key", "google_api_key"):
        current_value = getattr(settings, field_name)
        setattr(settings, field_name, _clean_optional(current_value))

    return settings
