"""Shared utility functions for the anomaly dashboard package."""
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path("secrets/dashboard.env")


def get_config_value(key: str, default: str = "") -> str:
    """Resolve a dashboard setting such as ``ANOMALY_SEED`` or ``LOG_LEVEL``.

    Values in ``.streamlit/secrets.toml`` take precedence over the process
    environment; ``default`` is returned when neither defines the key.
    """
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    return os.getenv(key, default)


def load_env_file(path: Path) -> None:
    """Export ``KEY=value`` lines from ``path`` without overriding variables already set."""
    if not path.exists():
        return

    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                if not key or key in os.environ:
                    continue
                os.environ[key] = value.strip().strip('"').strip("'")
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)


def load_dashboard_env() -> None:
    """Load the optional local env file named by ``ANOMALY_DASHBOARD_ENV_FILE``."""

    env_path = Path(os.getenv("ANOMALY_DASHBOARD_ENV_FILE", DEFAULT_ENV_FILE))
    load_env_file(env_path)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp (``Z`` suffix allowed) into an aware UTC datetime."""

    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(text))
