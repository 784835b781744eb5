"""Runtime settings, read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_API_URL = "https://codeforces.com/api/problemset.problems"
DEFAULT_PROBLEM_URL_BASE = "https://codeforces.com/problemset/problem"


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    api_url: str = DEFAULT_API_URL
    problem_url_base: str = DEFAULT_PROBLEM_URL_BASE
    statement_delay: float = 0.3  # seconds between statement requests
    http_timeout: float | None = None  # None keeps the transport default
    impersonate: str = "chrome"
    log_level: str = "INFO"


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    load_dotenv()

    return Settings(
        api_url=os.getenv("CF_API_URL", DEFAULT_API_URL),
        problem_url_base=os.getenv("CF_PROBLEM_URL_BASE", DEFAULT_PROBLEM_URL_BASE).rstrip("/"),
        statement_delay=float(os.getenv("CF_STATEMENT_DELAY", "0.3")),
        http_timeout=_optional_float(os.getenv("CF_HTTP_TIMEOUT")),
        impersonate=os.getenv("CF_IMPERSONATE", "chrome"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
