"""
config.py
Environment settings, loaded from a project-root .env with python-dotenv.

Callers use the accessors below instead of reading os.environ directly.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent


def load_config() -> None:
    """Load .env from the project root. Existing environment variables win."""
    load_dotenv(PROJECT_ROOT / ".env", override=False)


def get_optional(key: str, default: str = "") -> str:
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Integer env var; missing or invalid values give the default."""
    raw = get_optional(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def db_file() -> Path:
    """SQLite file holding the member snapshot. Default gym.db next to the app."""
    return Path(get_optional("GYM_DB_FILE", str(PROJECT_ROOT / "gym.db")))


def snapshot_key() -> str:
    return get_optional("GYM_SNAPSHOT_KEY", "members_snapshot")


def advisor_api_key() -> str:
    """Optional: without a key the advisor answers with its fallback message."""
    return get_optional("ADVISOR_API_KEY", "")


def advisor_base_url() -> str:
    return get_optional("ADVISOR_BASE_URL", "https://api.openai.com/v1/chat/completions")


def advisor_model() -> str:
    return get_optional("ADVISOR_MODEL", "gpt-4o-mini")


def advisor_timeout() -> int:
    return get_optional_int("ADVISOR_TIMEOUT", 30)


def advisor_max_retries() -> int:
    return max(1, get_optional_int("ADVISOR_MAX_RETRIES", 2))


def log_level() -> str:
    return get_optional("LOG_LEVEL", "INFO").upper()
