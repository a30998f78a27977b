"""
Export Service Tests
====================
Snapshot rows come from the ledger's own total and progress functions.
"""
import io
from datetime import datetime

import pandas as pd

from services.export_service import (
    SNAPSHOT_COLUMNS,
    build_snapshot_frame,
    export_filename,
    to_csv_bytes,
)
from services.ledger_service import select_consultant, set_consultant_target, set_entry


def test_one_row_per_consultant_in_roster_order(ledger):
    select_consultant(ledger, "consultant-2")
    df = build_snapshot_frame(ledger)
    assert list(df.columns) == SNAPSHOT_COLUMNS
    assert df["Consultant"].tolist() == [c.name for c in ledger.consultants]


def test_total_excludes_ico(ledger):
    c = ledger.consultants[0]
    set_entry(ledger, c.id, "Air Bank", 600)
    set_entry(ledger, c.id, "Postpaid", 500)
    set_entry(ledger, c.id, "ICO", 300)
    row = build_snapshot_frame(ledger).iloc[0]
    assert row["ICO"] == 300
    assert row["Total"] == 1100
    assert row["Progress %"] == 100
    assert bool(row["Goal Met"]) is True


def test_progress_rounded_and_missing_for_zero_target(ledger):
    a, b, _ = ledger.consultants
    set_entry(ledger, a.id, "TV", 1100)
    set_consultant_target(ledger, a.id, 1500)
    set_consultant_target(ledger, b.id, 0)
    df = build_snapshot_frame(ledger)
    assert df.loc[0, "Progress %"] == 73.3
    assert pd.isna(df.loc[1, "Progress %"])


def test_csv_bytes_parse_back(ledger):
    set_entry(ledger, ledger.consultants[0].id, "HW", 250)
    data = to_csv_bytes(build_snapshot_frame(ledger))
    parsed = pd.read_csv(io.BytesIO(data))
    assert parsed["HW"].tolist()[0] == 250
    assert len(parsed) == len(ledger.consultants)


def test_export_filename():
    assert export_filename(datetime(2026, 10, 18, 14, 5)) == "sales_snapshot_2026-10-18.csv"
