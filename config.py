"""
Sales Tracker configuration.

Settings come from environment variables. The Streamlit entrypoint loads a
.env file first for local development (no-op when absent).

Invalid values fail closed with RuntimeError naming the variable.
"""

import logging
import math
import os
from typing import Any, Dict, List

from models.enums import (
    DEFAULT_DAILY_TARGET,
    DEFAULT_GOAL_EVENT_SECONDS,
    DEFAULT_STORE_TARGET,
    DEFAULT_TEAM,
)

DEFAULT_PREFERENCES_PATH = "~/.sales_tracker/preferences.json"
DEFAULT_CURRENCY = "Kč"

# Goal banner lifetime cap (one hour)
MAX_GOAL_EVENT_SECONDS = 3600

# Top-level packages whose module loggers get the console handler
APP_LOGGERS = ("services", "views", "components", "sales_tracker")

_LOG_FORMAT = '%(asctime)s [%(name)s] %(message)s'


def _positive_number(var: str, default: float, maximum: float = None) -> float:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{var} must be a number, got {raw!r}")
    if not math.isfinite(value) or value <= 0:
        raise RuntimeError(f"{var} must be a positive finite number, got {raw!r}")
    if maximum is not None and value > maximum:
        raise RuntimeError(f"{var} must be at most {maximum}, got {raw!r}")
    return int(value) if value.is_integer() else value


def _team() -> List[str]:
    raw = os.environ.get("SALES_TRACKER_TEAM", "")
    if not raw.strip():
        return list(DEFAULT_TEAM)
    names = [n.strip() for n in raw.split(",") if n.strip()]
    if not names:
        raise RuntimeError("SALES_TRACKER_TEAM is set but contains no names")
    return names


def get_settings() -> Dict[str, Any]:
    """
    Read settings from the environment.

    Keys: team, daily_target, store_target, goal_event_seconds,
    preferences_path, currency, log_level.

    Raises:
        RuntimeError: If a numeric variable is invalid or the team is empty
    """
    log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"LOG_LEVEL is not a valid logging level: {log_level!r}")

    return {
        "team": _team(),
        "daily_target": _positive_number("SALES_TRACKER_DAILY_TARGET", DEFAULT_DAILY_TARGET),
        "store_target": _positive_number("SALES_TRACKER_STORE_TARGET", DEFAULT_STORE_TARGET),
        "goal_event_seconds": _positive_number(
            "SALES_TRACKER_GOAL_EVENT_SECONDS", DEFAULT_GOAL_EVENT_SECONDS, maximum=MAX_GOAL_EVENT_SECONDS
        ),
        "preferences_path": os.environ.get(
            "SALES_TRACKER_PREFERENCES_PATH", DEFAULT_PREFERENCES_PATH
        ).strip() or DEFAULT_PREFERENCES_PATH,
        "currency": os.environ.get("SALES_TRACKER_CURRENCY", DEFAULT_CURRENCY).strip(),
        "log_level": log_level,
    }


def configure_logging(level: str = "INFO") -> None:
    """
    Attach one console handler per app logger.
    Safe to call on every Streamlit rerun (handlers are not duplicated).
    """
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_LOG_FORMAT))
            logger.addHandler(handler)
