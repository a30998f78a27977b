"""
Controlled vocabulary for the Sales Tracker.
Locked values for toggles and validation.
"""

from enum import Enum


class ThemeMode(str, Enum):
    """Display theme options for the dashboard."""
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_dark_flag(cls, is_dark: bool) -> "ThemeMode":
        return cls.DARK if is_dark else cls.LIGHT


# Fixed roster used when SALES_TRACKER_TEAM is not configured
DEFAULT_TEAM = [
    "Petr Michal", "Aleš Mörtl", "Daniel Rusín", "Michael Arnošt Beneš",
    "Jakub Škarda", "Terezie Beránková", "Vítek Hakr", "Josef Studený",
    "Barbora Grillová", "Eliška Hanáková", "No Name", "No Name",
]

DEFAULT_DAILY_TARGET = 1000
DEFAULT_STORE_TARGET = 5000

# Seconds a goal-achieved event stays on screen
DEFAULT_GOAL_EVENT_SECONDS = 5
