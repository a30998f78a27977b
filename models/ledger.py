"""
Sales Ledger Model
==================
In-memory snapshot of today's numbers for one session.

Plain data only. All queries and commands live in services.ledger_service
so this module stays free of business rules.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Segment:
    """Catalog entry. Excluded segments are recorded but never totalled."""
    name: str
    exclude_from_total: bool = False


@dataclass
class Consultant:
    id: str
    name: str
    daily_target: float
    entries: Dict[str, float] = field(default_factory=dict)
    # Opaque display reference set by the avatar store, never interpreted here
    avatar: Optional[str] = None


@dataclass(frozen=True)
class GoalEvent:
    """One upward crossing of a consultant's daily target."""
    consultant_id: str
    consultant_name: str
    total: float
    target: float
    occurred_at: datetime


@dataclass
class Ledger:
    """
    Session state owned by the caller.

    consultants is ordered by selection history: the most recently
    selected consultant sits at index 0.
    """
    consultants: List[Consultant]
    store_target: float
    active_consultant_id: Optional[str] = None
    goal_events: List[GoalEvent] = field(default_factory=list)
