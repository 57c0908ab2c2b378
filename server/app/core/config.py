"""
SummaNote - Configuration
Environment variables and settings
"""

import os
from pathlib import Path
from typing import List


def _load_dotenv_files() -> None:
    """Load .env files (best-effort) for local development."""

    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return

    server_dir = Path(__file__).resolve().parents[2]
    load_dotenv(server_dir / ".env", override=False)
    load_dotenv(server_dir / ".env.local", override=False)


_load_dotenv_files()


def get_env(key: str, default: str = "") -> str:
    """Get environment variable with default value."""
    return os.environ.get(key, default)


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    return int(os.environ.get(key, str(default)))


def get_env_float(key: str, default: float) -> float:
    """Get environment variable as float."""
    return float(os.environ.get(key, str(default)))


def get_env_list(key: str, default: str = "") -> List[str]:
    """Get environment variable as list (comma-separated)."""
    val = os.environ.get(key, default)
    if not val:
        return []
    return [item.strip() for item in val.split(",") if item.strip()]


class Settings:
    """Application settings from environment variables."""

    # General
    SUMMANOTE_ENV: str = get_env("SUMMANOTE_ENV", "dev")
    LOG_LEVEL: str = get_env("LOG_LEVEL", "")
    SUMMANOTE_CORS_ORIGINS: List[str] = get_env_list(
        "SUMMANOTE_CORS_ORIGINS", "http://localhost:3000"
    )

    # OpenAI (chat completions)
    OPENAI_API_KEY: str = get_env("OPENAI_API_KEY", "")
    OPENAI_BASE_URL: str = get_env("OPENAI_BASE_URL", "https://api.openai.com/v1")
    SUMMARY_MODEL: str = get_env("SUMMARY_MODEL", "gpt-4o-mini")
    NOTES_MODEL: str = get_env("NOTES_MODEL", "gpt-4o-mini")
    SUMMARY_MAX_TOKENS: int = get_env_int("SUMMARY_MAX_TOKENS", 1200)
    NOTES_MAX_TOKENS: int = get_env_int("NOTES_MAX_TOKENS", 2000)
    COMPLETION_TEMPERATURE: float = get_env_float("COMPLETION_TEMPERATURE", 0.2)

    # Article scraper
    SCRAPER_TIMEOUT_SECONDS: float = get_env_float("SCRAPER_TIMEOUT_SECONDS", 10.0)
    SCRAPER_MAX_CHARS: int = get_env_int("SCRAPER_MAX_CHARS", 12000)
    SCRAPER_MIN_CHARS: int = get_env_int("SCRAPER_MIN_CHARS", 100)

    # Notes input/output limits
    NOTES_MIN_INPUT_CHARS: int = get_env_int("NOTES_MIN_INPUT_CHARS", 20)
    NOTES_MAX_INPUT_CHARS: int = get_env_int("NOTES_MAX_INPUT_CHARS", 10000)
    NOTES_MIN_OUTPUT_CHARS: int = get_env_int("NOTES_MIN_OUTPUT_CHARS", 100)

    # Rate limiting (fixed window, per client)
    RATE_LIMIT_WINDOW_SECONDS: int = get_env_int("RATE_LIMIT_WINDOW_SECONDS", 60)
    SUMMARIZE_RATE_LIMIT: int = get_env_int("SUMMARIZE_RATE_LIMIT", 5)
    NOTES_RATE_LIMIT: int = get_env_int("NOTES_RATE_LIMIT", 10)


settings = Settings()
