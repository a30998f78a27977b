"""
Preferences Service
===================
Persists the dark-mode display preference across sessions.

Stored as a small JSON document: {"theme": "dark"}.
Unrelated to the sales ledger; losing the file only resets the theme.
"""

import json
import logging
from pathlib import Path
from typing import Union

from models.enums import ThemeMode

_logger = logging.getLogger(__name__)


def load_dark_mode(path: Union[str, Path]) -> bool:
    """
    Read the saved preference. Missing or unreadable files fall back to light.
    """
    path = Path(path).expanduser()
    if not path.exists():
        return False
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        _logger.warning(f"Ignoring unreadable preferences at {path}: {e}")
        return False
    if not isinstance(data, dict):
        _logger.warning(f"Ignoring malformed preferences at {path}")
        return False
    return data.get("theme") == ThemeMode.DARK.value


def save_dark_mode(path: Union[str, Path], is_dark: bool) -> None:
    """Write the preference, creating the parent directory if needed."""
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    theme = ThemeMode.from_dark_flag(is_dark)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"theme": theme.value}, f)
    _logger.info(f"Theme preference saved: {theme.value}")
