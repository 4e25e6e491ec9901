from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

ADZUNA_DEFAULT_BASE_URL = "https://api.adzuna.com/v1/api/jobs"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "y", "on"}


def _get_env_number(name: str, default: float, cast=float):
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name)
    items = [item.strip() for item in (raw or "").split(",") if item.strip()]
    return tuple(items or default)


@dataclass(frozen=True)
class JobBoardSettings:
    app_id: str | None
    api_key: str | None
    base_url: str
    results_per_page: int
    timeout_s: float
    max_attempts: int
    demo_listings: bool

    @property
    def configured(self) -> bool:
        return bool(self.app_id and self.api_key)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    chat_auth_mode: str
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    job_board: JobBoardSettings
    stream_token_delay_ms: int
    chat_history_window: int
    profile_context_max_chars: int
    profile_max_chars: int


settings = Settings(
    api_key=_get_env("API_KEY"),
    chat_auth_mode=(_get_env("CHAT_AUTH_MODE") or "public").lower(),
    rate_limit=_get_env("RATE_LIMIT", "60/minute"),
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=(_get_env("LOG_LEVEL") or "INFO").upper(),
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173"],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    job_board=JobBoardSettings(
        app_id=_get_env("ADZUNA_APP_ID"),
        api_key=_get_env("ADZUNA_API_KEY"),
        base_url=_get_env("ADZUNA_BASE_URL", ADZUNA_DEFAULT_BASE_URL),
        results_per_page=_get_env_number("ADZUNA_RESULTS_PER_PAGE", 20, int),
        timeout_s=_get_env_number("ADZUNA_TIMEOUT_S", 20.0),
        max_attempts=_get_env_number("ADZUNA_MAX_ATTEMPTS", 2, int),
        demo_listings=_get_env_bool("DEMO_JOBS_ENABLED", False),
    ),
    stream_token_delay_ms=_get_env_number("STREAM_TOKEN_DELAY_MS", 20, int),
    chat_history_window=_get_env_number("CHAT_HISTORY_WINDOW", 10, int),
    profile_context_max_chars=_get_env_number("PROFILE_CONTEXT_MAX_CHARS", 50000, int),
    profile_max_chars=_get_env_number("PROFILE_MAX_CHARS", 500000, int),
)

if settings.chat_auth_mode not in {"public", "protected"}:
    raise RuntimeError("CHAT_AUTH_MODE must be either 'public' or 'protected'.")

if settings.chat_auth_mode == "protected" and not settings.api_key:
    raise RuntimeError("CHAT_AUTH_MODE=protected requires API_KEY to be set.")
