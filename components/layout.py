"""
Layout components for the tracker page.
Render-only; the flash helper also clears the queued message it shows.
"""

import streamlit as st

FLASH_KEY = "flash_error"


def section_header(title: str, caption: str = None) -> None:
    """Render section header with optional caption."""
    st.subheader(title)
    if caption:
        st.caption(caption)


def empty_roster_state() -> None:
    """Shown when the configured team is empty."""
    st.info("No consultants configured. Set SALES_TRACKER_TEAM and restart.")


def render_flash_error() -> None:
    """
    Show the error queued by a widget callback, then clear it so the
    next rerun does not repeat it.
    """
    message = st.session_state.get(FLASH_KEY)
    if not message:
        return
    st.error(message)
    st.session_state[FLASH_KEY] = None
