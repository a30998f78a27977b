"""
Global Styles Module
====================
Centralized CSS for the tracker, in light and dark variants.
"""

import streamlit as st

_LIGHT = {
    "background": "linear-gradient(135deg, #eff6ff 0%, #ffffff 50%, #faf5ff 100%)",
    "text": "#111827",
    "muted": "#6b7280",
    "card": "#ffffff",
    "goal_row": "#ecfdf5",
    "badge_bg": "#dbeafe",
    "badge_text": "#1e40af",
}

_DARK = {
    "background": "#111827",
    "text": "#f9fafb",
    "muted": "#9ca3af",
    "card": "#1f2937",
    "goal_row": "rgba(6, 78, 59, 0.25)",
    "badge_bg": "#1e3a8a",
    "badge_text": "#bfdbfe",
}


def theme_palette(dark_mode: bool) -> dict:
    """Colour tokens for the active theme."""
    return _DARK if dark_mode else _LIGHT


def inject_global_styles(dark_mode: bool = False):
    """
    Inject global CSS for the tracker.

    Call once per rerun, immediately after st.set_page_config().
    """
    p = theme_palette(dark_mode)
    st.markdown(f"""
<style>
    .stApp {{
        background: {p["background"]};
        color: {p["text"]};
    }}

    /* Hide Streamlit's default header bar */
    .stApp > header {{
        display: none !important;
    }}

    .stMainBlockContainer {{
        padding-top: 2rem !important;
    }}

    .st-store-card {{
        background: linear-gradient(90deg, #3b82f6 0%, #9333ea 100%);
        color: #ffffff;
        border-radius: 12px;
        padding: 16px 20px;
        margin-bottom: 12px;
    }}

    .st-clock {{
        font-family: monospace;
        font-size: 1.1rem;
        background: {p["card"]};
        color: {p["text"]};
        padding: 6px 12px;
        border-radius: 8px;
        display: inline-block;
    }}

    .st-avatar {{
        width: 40px;
        height: 40px;
        border-radius: 50%;
        object-fit: cover;
        display: inline-flex;
        align-items: center;
        justify-content: center;
        background: {p["badge_bg"]};
        color: {p["badge_text"]};
        font-weight: 600;
        vertical-align: middle;
        margin-right: 8px;
    }}

    .st-you-badge {{
        font-size: 0.75rem;
        background: {p["badge_bg"]};
        color: {p["badge_text"]};
        padding: 2px 8px;
        border-radius: 9999px;
        margin-left: 6px;
    }}

    .st-goal-met {{
        background: {p["goal_row"]};
        border-radius: 6px;
        padding: 2px 6px;
    }}

    .st-muted {{
        color: {p["muted"]};
        font-size: 0.875rem;
    }}

    .st-goal-banner {{
        text-align: center;
        padding: 16px;
        border-radius: 12px;
        background: {p["goal_row"]};
        margin-bottom: 12px;
    }}
    .st-goal-banner .st-goal-title {{
        font-size: 1.5rem;
        font-weight: 700;
        color: #16a34a;
    }}
</style>
""", unsafe_allow_html=True)
