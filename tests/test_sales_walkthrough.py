"""
End-to-end walkthrough of a consultant's day.
"""
import pytest

from services.goal_events import GoalEventTracker
from services.ledger_service import (
    create_ledger,
    progress,
    select_consultant,
    set_consultant_target,
    set_entry,
    store_progress,
    store_total,
    total_of,
)


def test_consultant_day():
    ledger = create_ledger(["Anna", "Boris"])
    tracker = GoalEventTracker(5)
    a = ledger.consultants[0]

    select_consultant(ledger, a.id)

    event = set_entry(ledger, a.id, "Air Bank", 600)
    tracker.record(event)
    assert total_of(a) == 600
    assert event is None

    event = set_entry(ledger, a.id, "Postpaid", 500)
    tracker.record(event)
    assert total_of(a) == 1100
    assert event is not None and event.consultant_id == a.id
    assert tracker.active(event.occurred_at) is event

    set_consultant_target(ledger, a.id, 1500)
    assert len(ledger.goal_events) == 1, "Target edits must not fire goal events"
    assert progress(total_of(a), a.daily_target) == pytest.approx(73.3, abs=0.05)

    set_entry(ledger, a.id, "TV", -5)
    assert a.entries["TV"] == 0

    assert store_total(ledger) == 1100
    assert store_progress(ledger) == pytest.approx(22.0)
