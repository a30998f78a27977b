"""
Single Total Formula Guardrail
==============================
Totals must be computed ONLY by services.ledger_service.total_of.
UI and export code may read entries for display but must never sum them.
"""
import re
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent

CONSUMERS = [
    "views/tracker.py",
    "services/export_service.py",
    "components/kpi_card.py",
]

FORBIDDEN_PATTERNS = [
    r"sum\([^)]*entries",
    r"entries\.values\(\)",
    r"exclude_from_total",
]


@pytest.mark.parametrize("rel_path", CONSUMERS)
def test_consumers_do_not_recompute_totals(rel_path):
    source = (PROJECT_ROOT / rel_path).read_text(encoding="utf-8")
    active = "\n".join(l for l in source.splitlines() if not l.strip().startswith("#"))
    for pattern in FORBIDDEN_PATTERNS:
        match = re.search(pattern, active)
        assert match is None, f"{rel_path} recomputes totals ({match.group(0)}); use total_of()"


@pytest.mark.parametrize("rel_path", ["views/tracker.py", "services/export_service.py"])
def test_consumers_use_total_of(rel_path):
    source = (PROJECT_ROOT / rel_path).read_text(encoding="utf-8")
    assert "total_of(" in source, f"{rel_path} must display totals via total_of()"


def test_exclusion_flag_read_only_in_ledger_service():
    """Only the total formula and the catalog may look at exclude_from_total."""
    allowed = {"services/ledger_service.py", "services/segments.py", "models/ledger.py"}
    offenders = []
    paths = list(PROJECT_ROOT.glob("*.py"))
    for package in ("models", "services", "components", "views"):
        paths.extend((PROJECT_ROOT / package).glob("*.py"))
    for path in paths:
        rel = path.relative_to(PROJECT_ROOT).as_posix()
        if rel in allowed:
            continue
        if "exclude_from_total" in path.read_text(encoding="utf-8"):
            offenders.append(rel)
    assert not offenders, f"exclude_from_total used outside the total formula: {offenders}"
