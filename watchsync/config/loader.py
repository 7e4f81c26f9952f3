"""
Environment-driven settings loader.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from watchsync.config.models import (
    CLASS_MATCH_MODES,
    DEFAULT_USER_AGENT,
    ListingMarkup,
    WatchSyncSettings,
)


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    for filename in (".env", ".env.local"):
        env_path = Path.cwd() / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped if stripped else default


def _get_choice_env(name: str, choices: tuple[str, ...], default: str) -> str:
    value = _get_str_env(name, default).lower()
    return value if value in choices else default


@lru_cache(maxsize=1)
def get_watch_sync_settings() -> WatchSyncSettings:
    """
    Return cached settings from environment variables.

    WATCHSYNC_MAX_FETCH_ATTEMPTS <= 0 keeps the page retry loop unbounded.
    """

    load_env_files()
    max_attempts = _get_int_env("WATCHSYNC_MAX_FETCH_ATTEMPTS", 0)
    return WatchSyncSettings(
        user_agent=_get_str_env("WATCHSYNC_USER_AGENT", DEFAULT_USER_AGENT),
        cookie=_get_str_env("WATCHSYNC_COOKIE", ""),
        timeout_seconds=max(1.0, _get_float_env("WATCHSYNC_TIMEOUT_SECONDS", 30.0)),
        page_delay_seconds=max(0.0, _get_float_env("WATCHSYNC_PAGE_DELAY_SECONDS", 5.0)),
        replay_delay_seconds=max(0.0, _get_float_env("WATCHSYNC_REPLAY_DELAY_SECONDS", 1.0)),
        max_fetch_attempts=max_attempts if max_attempts > 0 else None,
        markup=ListingMarkup(
            class_match=_get_choice_env("WATCHSYNC_CLASS_MATCH", CLASS_MATCH_MODES, "token"),
        ),
    )
