"""
KPI card component for the store summary row.
Stateless render-only.
"""

import streamlit as st

from components.formatters import format_amount, format_progress
from models.ledger import Ledger
from services.ledger_service import is_goal_met, store_progress, store_total


def build_store_metrics(ledger: Ledger, currency: str = "Kč") -> list:
    """
    Metric dicts for the store summary row.

    Keys per metric: label, value, help (optional).
    """
    at_goal = sum(1 for c in ledger.consultants if is_goal_met(c))
    return [
        {"label": "Store Total", "value": format_amount(store_total(ledger), currency)},
        {"label": "Store Target", "value": format_amount(ledger.store_target, currency)},
        {
            "label": "Store Progress",
            "value": format_progress(store_progress(ledger)),
            "help": "Capped at 100%. ICO sales are not counted.",
        },
        {"label": "At Goal", "value": f"{at_goal} / {len(ledger.consultants)}"},
    ]


def render_kpi_row(metrics: list) -> None:
    """
    Render a row of KPI cards.

    Args:
        metrics: List of dicts with keys: label, value, help (optional)
    """
    cols = st.columns(len(metrics))

    for col, metric in zip(cols, metrics):
        col.metric(
            label=metric["label"],
            value=metric["value"],
            help=metric.get("help"),
        )
