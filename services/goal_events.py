"""
Goal Event Display Policy
=========================
Decides which goal-achieved event is on screen.

The ledger only records timestamped occurrences. This tracker applies the
dashboard's policy on top of them:
- at most one event is shown at a time
- an event is active for a fixed lifetime, then clears itself
- a newer event supersedes the current one (latest timer wins)
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from models.enums import DEFAULT_GOAL_EVENT_SECONDS
from models.ledger import GoalEvent
from services.ledger_service import as_utc

_logger = logging.getLogger(__name__)


class GoalEventTracker:
    """Holds the latest goal event and reports whether it is still active."""

    def __init__(self, lifetime_seconds: float = DEFAULT_GOAL_EVENT_SECONDS):
        if lifetime_seconds <= 0:
            raise ValueError(f"lifetime_seconds must be positive, got {lifetime_seconds}")
        self.lifetime = timedelta(seconds=lifetime_seconds)
        self._latest: Optional[GoalEvent] = None

    @property
    def latest(self) -> Optional[GoalEvent]:
        return self._latest

    def record(self, event: Optional[GoalEvent]) -> None:
        """Show a new event, replacing whatever was active. None is ignored."""
        if event is None:
            return
        if self._latest is not None and self._latest is not event:
            _logger.info(
                f"Goal event for {self._latest.consultant_id} superseded by {event.consultant_id}"
            )
        self._latest = event

    def expires_at(self) -> Optional[datetime]:
        if self._latest is None:
            return None
        return self._latest.occurred_at + self.lifetime

    def active(self, now: Optional[datetime] = None) -> Optional[GoalEvent]:
        """
        Return the event on screen at `now`, clearing it once expired.
        """
        if self._latest is None:
            return None
        now = as_utc(now)
        if now >= self.expires_at():
            _logger.debug(f"Goal event for {self._latest.consultant_id} expired")
            self._latest = None
            return None
        return self._latest

    def is_active_for(self, consultant_id: str, now: Optional[datetime] = None) -> bool:
        event = self.active(now)
        return event is not None and event.consultant_id == consultant_id

    def clear(self) -> None:
        self._latest = None
