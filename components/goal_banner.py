"""
Goal banner and avatar components.
Stateless render-only.
"""

import html

import streamlit as st

from models.ledger import Consultant, GoalEvent
from services.avatar_service import initials


def avatar_html(consultant: Consultant) -> str:
    """Avatar image, or initials when no avatar has been uploaded."""
    name = html.escape(consultant.name)
    if consultant.avatar:
        src = html.escape(consultant.avatar, quote=True)
        return f'<img class="st-avatar" src="{src}" alt="{name}"/>'
    return f'<span class="st-avatar">{html.escape(initials(consultant.name))}</span>'


def render_goal_banner(event: GoalEvent) -> None:
    """Render the congratulations banner for an active goal event."""
    name = html.escape(event.consultant_name)
    st.markdown(
        f"""
<div class="st-goal-banner">
    <div style="font-size: 2rem;">🎉✨🌟</div>
    <div class="st-goal-title">Congratulations!!</div>
    <div>{name}: goal achieved!</div>
</div>
""",
        unsafe_allow_html=True,
    )
