"""
Pytest configuration: project root on sys.path and shared ledger fixtures.
"""
import os
import sys
from datetime import datetime, timezone

import pytest

# Add project root to path so models/services/components import
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from services.ledger_service import create_ledger  # noqa: E402


@pytest.fixture
def ledger():
    """Three consultants, default targets (1000 each, store 5000)."""
    return create_ledger(["Anna Adamová", "Boris Beneš", "Cyril Černý"])


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 18, 9, 30, 0, tzinfo=timezone.utc)
