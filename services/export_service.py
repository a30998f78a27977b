"""
Export service: snapshot of the performance table for download.
Used by the tracker header's Export button.
"""

import logging
from datetime import datetime
from typing import Optional

import pandas as pd

from models.ledger import Ledger
from services.ledger_service import consultant_progress, is_goal_met, total_of
from services.segments import SEGMENT_NAMES

_logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = ["Consultant"] + SEGMENT_NAMES + ["Total", "Target", "Progress %", "Goal Met"]


def build_snapshot_frame(ledger: Ledger) -> pd.DataFrame:
    """
    One row per consultant, in current roster order.
    Progress is rounded to one decimal; None when the target is 0.
    """
    rows = []
    for consultant in ledger.consultants:
        pct = consultant_progress(consultant)
        row = {"Consultant": consultant.name}
        for name in SEGMENT_NAMES:
            row[name] = consultant.entries.get(name, 0)
        row["Total"] = total_of(consultant)
        row["Target"] = consultant.daily_target
        row["Progress %"] = round(pct, 1) if pct is not None else None
        row["Goal Met"] = is_goal_met(consultant)
        rows.append(row)

    df = pd.DataFrame(rows, columns=SNAPSHOT_COLUMNS)
    _logger.info(f"Snapshot built: {len(df)} rows")
    return df


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    """Encode a snapshot as UTF-8 CSV for st.download_button."""
    return df.to_csv(index=False).encode("utf-8")


def export_filename(now: Optional[datetime] = None) -> str:
    """File name for the download, stamped with today's date."""
    now = now or datetime.now()
    return f"sales_snapshot_{now:%Y-%m-%d}.csv"
