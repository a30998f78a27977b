"""
Sales Tracker
=============
Single entrypoint for the Streamlit application.
This is the only file Streamlit runs.

Configuration comes from SALES_TRACKER_* environment variables (see config.py).
"""

import logging
import time

import streamlit as st
from dotenv import load_dotenv

# Load .env file for local development (no-op if .env absent)
load_dotenv()

from config import configure_logging, get_settings
from views import tracker

_logger = logging.getLogger("sales_tracker")


# Page config (only place this is called)
st.set_page_config(
    page_title="Sales Tracker",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="collapsed"
)


# =============================================================================
# CONFIGURATION GATE
# =============================================================================
try:
    settings = get_settings()
except RuntimeError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

configure_logging(settings["log_level"])


# =============================================================================
# APP
# =============================================================================
_rerun_start = time.time()
try:
    tracker.render(settings)
finally:
    # Always log timing, even on error
    total_ms = (time.time() - _rerun_start) * 1000
    _logger.info(f"RERUN TIMING: tracker={total_ms:.0f}ms")
