"""
Ledger Service — Sales Aggregation and Target Tracking
======================================================
Queries and commands over a caller-owned Ledger.

There is exactly ONE total formula (total_of). Store totals, goal
detection, the export and the UI all go through it. Do not sum entries
anywhere else.

Commands validate every precondition before mutating, so a failed
command leaves the ledger unchanged.
"""

import logging
import math
import numbers
from datetime import datetime, timezone
from typing import Any, List, Optional

from models.enums import DEFAULT_DAILY_TARGET, DEFAULT_STORE_TARGET, DEFAULT_TEAM
from models.ledger import Consultant, GoalEvent, Ledger
from services.segments import SEGMENTS, empty_entries, is_known_segment

_logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------
class LedgerError(Exception):
    """Base class for rejected ledger commands and queries."""
    pass


class UnknownConsultant(LedgerError):
    """Raised when a consultant id is not in the ledger."""
    pass


class UnknownSegment(LedgerError):
    """Raised when a segment name is outside the fixed catalog."""
    pass


class InvalidTarget(LedgerError):
    """Raised when a target is non-positive or non-numeric where positivity is required."""
    pass


# -----------------------------------------------------------------------------
# INPUT NORMALIZATION (forgiving boundary)
# -----------------------------------------------------------------------------
def coerce_amount(value: Any) -> float:
    """
    Normalize raw input to a non-negative finite number.

    Numeric strings are parsed and Decimal/other numeric types are converted
    to float; ints are kept as ints. None, blanks, booleans, unparseable text,
    NaN, infinities, values too large for a float and negatives all become 0.
    """
    raw = value
    if value is None or isinstance(value, bool):
        value = 0
    elif isinstance(value, str):
        value = value.strip()
        try:
            value = float(value) if value else 0
        except ValueError:
            value = 0
    elif not isinstance(value, int):
        try:
            value = float(value)
        except (TypeError, ValueError, OverflowError):
            value = 0
    if not _is_finite(value) or value < 0:
        value = 0
    if value != raw:
        _logger.debug(f"Normalized input {raw!r} -> {value!r}")
    return value


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range
        _logger.warning(f"Amount out of range: {value.bit_length()}-bit integer")
        return False


def as_utc(moment: Optional[datetime] = None) -> datetime:
    """
    Timezone-aware UTC timestamp. None means now; naive values are read
    as local time.
    """
    if moment is None:
        return datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc)


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return _is_finite(value) and value > 0


# -----------------------------------------------------------------------------
# LIFECYCLE
# -----------------------------------------------------------------------------
def create_ledger(
    names: Optional[List[str]] = None,
    daily_target: float = DEFAULT_DAILY_TARGET,
    store_target: float = DEFAULT_STORE_TARGET,
) -> Ledger:
    """
    Build the session ledger with a fixed roster.

    Every consultant starts with the same daily target and all entries
    at 0. Ids are positional (consultant-0, consultant-1, ...) and never
    change, so duplicate names are fine.
    """
    if not _is_positive_number(daily_target):
        raise InvalidTarget(f"Daily target must be positive, got {daily_target!r}")
    if not _is_positive_number(store_target):
        raise InvalidTarget(f"Store target must be positive, got {store_target!r}")

    roster = DEFAULT_TEAM if names is None else names
    consultants = [
        Consultant(
            id=f"consultant-{index}",
            name=name,
            daily_target=daily_target,
            entries=empty_entries(),
        )
        for index, name in enumerate(roster)
    ]
    _logger.info(
        f"Ledger created: {len(consultants)} consultants, "
        f"daily_target={daily_target}, store_target={store_target}"
    )
    return Ledger(consultants=consultants, store_target=store_target)


# -----------------------------------------------------------------------------
# QUERIES
# -----------------------------------------------------------------------------
def find_consultant(ledger: Ledger, consultant_id: str) -> Consultant:
    """Look up a consultant by id. Raises UnknownConsultant."""
    for consultant in ledger.consultants:
        if consultant.id == consultant_id:
            return consultant
    raise UnknownConsultant(f"Unknown consultant: {consultant_id}")


def active_consultant(ledger: Ledger) -> Optional[Consultant]:
    """Return the active consultant, or None when nobody is selected."""
    if ledger.active_consultant_id is None:
        return None
    return find_consultant(ledger, ledger.active_consultant_id)


def total_of(consultant: Consultant) -> float:
    """Sum of entries over every segment not excluded from totals."""
    return sum(
        consultant.entries.get(segment.name, 0)
        for segment in SEGMENTS
        if not segment.exclude_from_total
    )


def store_total(ledger: Ledger) -> float:
    """Sum of consultant totals. Independent of roster order."""
    return sum(total_of(c) for c in ledger.consultants)


def progress(current: float, target: float) -> float:
    """
    Percentage of target reached, clamped at 100.

    Over-achievement is never reported numerically; use is_goal_met().

    Raises:
        InvalidTarget: If target is not a positive number
    """
    if not _is_positive_number(target):
        raise InvalidTarget(f"Target must be positive, got {target!r}")
    return min(current / target * 100, 100)


def is_goal_met(consultant: Consultant) -> bool:
    """Over-target flag for display (total at or above daily target)."""
    return total_of(consultant) >= consultant.daily_target


def consultant_progress(consultant: Consultant) -> Optional[float]:
    """Progress toward the daily target, or None when the target is 0."""
    try:
        return progress(total_of(consultant), consultant.daily_target)
    except InvalidTarget:
        return None


def store_progress(ledger: Ledger) -> Optional[float]:
    """Progress toward the store target, or None when the target is 0."""
    try:
        return progress(store_total(ledger), ledger.store_target)
    except InvalidTarget:
        return None


# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------
def set_entry(
    ledger: Ledger,
    consultant_id: str,
    segment_name: str,
    amount: Any,
    now: Optional[datetime] = None,
) -> Optional[GoalEvent]:
    """
    Replace one segment entry and report a goal crossing.

    The entry is SET, not incremented. Invalid or negative amounts are
    stored as 0.

    A GoalEvent is emitted only on the upward transition
    (before < target <= after). Edits that stay above target emit nothing;
    dropping below and crossing again emits a new event.

    The event timestamp is always tz-aware UTC; a naive `now` is read as
    local time.

    Returns:
        The emitted GoalEvent (also appended to ledger.goal_events), or None

    Raises:
        UnknownConsultant: consultant_id not in ledger
        UnknownSegment: segment_name not in catalog
    """
    consultant = find_consultant(ledger, consultant_id)
    if not is_known_segment(segment_name):
        _logger.warning(f"Rejected entry for unknown segment: {segment_name!r}")
        raise UnknownSegment(f"Unknown segment: {segment_name}")

    value = coerce_amount(amount)

    total_before = total_of(consultant)
    consultant.entries[segment_name] = value
    total_after = total_of(consultant)

    _logger.info(
        f"Entry set: {consultant_id} {segment_name}={value} "
        f"(total {total_before} -> {total_after})"
    )

    if total_before < consultant.daily_target <= total_after:
        event = GoalEvent(
            consultant_id=consultant.id,
            consultant_name=consultant.name,
            total=total_after,
            target=consultant.daily_target,
            occurred_at=as_utc(now),
        )
        ledger.goal_events.append(event)
        _logger.info(f"Goal achieved: {consultant.name} ({total_after} >= {consultant.daily_target})")
        return event

    return None


def set_consultant_target(ledger: Ledger, consultant_id: str, new_target: Any) -> float:
    """
    Replace a consultant's daily target. Never emits a goal event.

    Returns the stored (normalized) target.
    """
    consultant = find_consultant(ledger, consultant_id)
    value = coerce_amount(new_target)
    consultant.daily_target = value
    _logger.info(f"Daily target set: {consultant_id}={value}")
    return value


def set_store_target(ledger: Ledger, new_target: Any) -> float:
    """Replace the store target. Returns the stored (normalized) target."""
    value = coerce_amount(new_target)
    ledger.store_target = value
    _logger.info(f"Store target set: {value}")
    return value


def set_avatar(ledger: Ledger, consultant_id: str, reference: Optional[str]) -> None:
    """Attach an opaque avatar reference. Contents are not inspected."""
    consultant = find_consultant(ledger, consultant_id)
    consultant.avatar = reference
    _logger.info(f"Avatar updated: {consultant_id}")


# -----------------------------------------------------------------------------
# SELECTION
# -----------------------------------------------------------------------------
def move_to_front(consultants: List[Consultant], consultant_id: str) -> List[Consultant]:
    """
    Stable partition: the matching consultant first, the rest in prior order.
    Returns a new list; an unknown id returns the order unchanged.
    """
    selected = [c for c in consultants if c.id == consultant_id]
    others = [c for c in consultants if c.id != consultant_id]
    return selected + others


def select_consultant(ledger: Ledger, consultant_id: str) -> Consultant:
    """Mark a consultant active and move them to the front of the roster."""
    consultant = find_consultant(ledger, consultant_id)
    ledger.active_consultant_id = consultant_id
    ledger.consultants = move_to_front(ledger.consultants, consultant_id)
    _logger.info(f"Consultant selected: {consultant_id}")
    return consultant


def deselect(ledger: Ledger) -> None:
    """Clear the active marker. Roster order is left as it is (sticky)."""
    ledger.active_consultant_id = None
    _logger.info("Consultant deselected")
