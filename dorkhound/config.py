"""Runtime configuration for dorkhound.

Architectural role:
    Centralizes environment-driven settings for the markup parser, the HTTP
    layer of search engines, and CLI logging.

Resolution order:
    1. Defaults (this file).
    2. `.env` file in the working directory, loaded via `python-dotenv`.
    3. Process environment variables (`DORKHOUND_*`), which win over `.env`.

Relevant environment variables:
    - `DORKHOUND_USER_AGENT`
    - `DORKHOUND_TIMEOUT_SECONDS`
    - `DORKHOUND_RETRY_ATTEMPTS`
    - `DORKHOUND_BACKOFF_SECONDS`
    - `DORKHOUND_MARKUP_PARSER`
    - `DORKHOUND_LOG_LEVEL`

Failure behavior:
    Malformed numeric values raise `ValueError` when settings are loaded; they
    are not silently replaced by defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; rv:91.0) Gecko/20100101 Firefox/91.0"
DEFAULT_MARKUP_PARSER = "html5lib"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings.

    Attributes:
        user_agent: Default `User-Agent` for engine requests.
        timeout_seconds: Default HTTP timeout.
        retry_attempts: Attempts for transient HTTP statuses (429/5xx).
        backoff_seconds: Base delay of the exponential retry backoff.
        markup_parser: bs4 tree builder name (`html5lib`, `html.parser`, `lxml`).
        log_level: Root log level name used by the CLI.
    """

    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 20.0
    retry_attempts: int = 1
    backoff_seconds: float = 0.5
    markup_parser: str = DEFAULT_MARKUP_PARSER
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the current environment."""
        return cls(
            user_agent=os.getenv("DORKHOUND_USER_AGENT", DEFAULT_USER_AGENT).strip(),
            timeout_seconds=float(os.getenv("DORKHOUND_TIMEOUT_SECONDS", "20")),
            retry_attempts=int(os.getenv("DORKHOUND_RETRY_ATTEMPTS", "1")),
            backoff_seconds=float(os.getenv("DORKHOUND_BACKOFF_SECONDS", "0.5")),
            markup_parser=os.getenv("DORKHOUND_MARKUP_PARSER", DEFAULT_MARKUP_PARSER).strip(),
            log_level=os.getenv("DORKHOUND_LOG_LEVEL", "WARNING").strip().upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached instance so the next `get_settings()` re-reads the environment."""
    global _settings
    _settings = None
