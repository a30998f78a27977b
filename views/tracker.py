"""
Tracker View
============
Single-page sales tracker: store progress, team selection and the
per-segment performance table.

Rendering only. Every number shown comes from services.ledger_service;
widget callbacks call its commands and never compute totals themselves.
"""

import logging
from datetime import datetime

import streamlit as st

from components.formatters import format_amount, format_clock, format_progress
from components.goal_banner import avatar_html, render_goal_banner
from components.kpi_card import build_store_metrics, render_kpi_row
from components.layout import FLASH_KEY, empty_roster_state, render_flash_error, section_header
from components.styles import inject_global_styles
from services.avatar_service import AVATAR_EXTENSIONS, UnsupportedAvatarType, store_avatar
from services.export_service import build_snapshot_frame, export_filename, to_csv_bytes
from services.goal_events import GoalEventTracker
from services.ledger_service import (
    LedgerError,
    consultant_progress,
    create_ledger,
    deselect,
    is_goal_met,
    select_consultant,
    set_consultant_target,
    set_entry,
    set_store_target,
    store_progress,
    store_total,
    total_of,
)
from services.preferences_service import load_dark_mode, save_dark_mode
from services.segments import SEGMENT_NAMES, get_segment_label

_logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================

def init_session(settings: dict) -> None:
    """Create the session's ledger, goal tracker and theme flag once."""
    if "ledger" not in st.session_state:
        st.session_state.ledger = create_ledger(
            settings["team"],
            daily_target=settings["daily_target"],
            store_target=settings["store_target"],
        )
    if "goal_tracker" not in st.session_state:
        st.session_state.goal_tracker = GoalEventTracker(settings["goal_event_seconds"])
    if "dark_mode" not in st.session_state:
        st.session_state.dark_mode = load_dark_mode(settings["preferences_path"])
    if FLASH_KEY not in st.session_state:
        st.session_state[FLASH_KEY] = None


def _flash(message: str) -> None:
    """Queue an error for the message area of the next render."""
    st.session_state[FLASH_KEY] = message


# =============================================================================
# CALLBACKS (run before the rerun that follows a widget change)
# =============================================================================

def _on_select(consultant_id: str) -> None:
    try:
        select_consultant(st.session_state.ledger, consultant_id)
    except LedgerError as e:
        _flash(str(e))


def _on_change_user() -> None:
    deselect(st.session_state.ledger)


def _on_entry_change(consultant_id: str, segment_name: str, widget_key: str) -> None:
    try:
        event = set_entry(
            st.session_state.ledger,
            consultant_id,
            segment_name,
            st.session_state.get(widget_key),
        )
    except LedgerError as e:
        _flash(str(e))
        return
    st.session_state.goal_tracker.record(event)


def _on_target_change(consultant_id: str, widget_key: str) -> None:
    try:
        set_consultant_target(st.session_state.ledger, consultant_id, st.session_state.get(widget_key))
    except LedgerError as e:
        _flash(str(e))


def _on_store_target_change() -> None:
    set_store_target(st.session_state.ledger, st.session_state.get("store_target_input"))


def _on_avatar_upload(consultant_id: str, widget_key: str) -> None:
    uploaded = st.session_state.get(widget_key)
    if uploaded is None:
        return
    try:
        store_avatar(st.session_state.ledger, consultant_id, uploaded.getvalue(), uploaded.type)
    except (UnsupportedAvatarType, LedgerError) as e:
        _flash(str(e))


def _on_theme_toggle(preferences_path: str) -> None:
    is_dark = bool(st.session_state.get("dark_mode_toggle"))
    st.session_state.dark_mode = is_dark
    try:
        save_dark_mode(preferences_path, is_dark)
    except OSError as e:
        _logger.warning(f"Theme preference not saved: {e}")
        _flash(f"Theme preference not saved: {e}")


def _seed_widget(key: str, value) -> None:
    """Initialise a widget's state from the ledger if it is not mounted yet."""
    if key not in st.session_state:
        st.session_state[key] = float(value)


# =============================================================================
# FRAGMENTS (rerun on their own timer)
# =============================================================================

@st.fragment(run_every="1s")
def _render_clock() -> None:
    st.markdown(f'<span class="st-clock">🕒 {format_clock(datetime.now())}</span>', unsafe_allow_html=True)


@st.fragment(run_every="1s")
def _render_active_goal() -> None:
    event = st.session_state.goal_tracker.active()
    if event is not None:
        render_goal_banner(event)


# =============================================================================
# SECTIONS
# =============================================================================

def _render_header(settings: dict) -> None:
    ledger = st.session_state.ledger
    title_col, clock_col, theme_col, export_col = st.columns([3, 2, 1, 1])

    with title_col:
        st.title("📈 Sales Tracker")
        if ledger.active_consultant_id:
            st.button("👤 Change User", on_click=_on_change_user)

    with clock_col:
        _render_clock()

    with theme_col:
        st.toggle(
            "Dark mode",
            value=st.session_state.dark_mode,
            key="dark_mode_toggle",
            on_change=_on_theme_toggle,
            args=(settings["preferences_path"],),
        )

    with export_col:
        st.download_button(
            "⬇️ Export",
            data=to_csv_bytes(build_snapshot_frame(ledger)),
            file_name=export_filename(),
            mime="text/csv",
        )


def _render_store_progress(currency: str) -> None:
    ledger = st.session_state.ledger
    pct = store_progress(ledger)

    st.markdown(
        f"""
<div class="st-store-card">
    <div style="display:flex; justify-content:space-between; font-weight:600;">
        <span>🎯 Store Progress</span>
        <span>{format_amount(store_total(ledger), currency)} · {format_progress(pct)}</span>
    </div>
</div>
""",
        unsafe_allow_html=True,
    )
    st.progress((pct or 0) / 100)

    _seed_widget("store_target_input", ledger.store_target)
    st.number_input(
        f"Store target ({currency})",
        min_value=0.0,
        step=500.0,
        format="%.0f",
        key="store_target_input",
        on_change=_on_store_target_change,
    )

    render_kpi_row(build_store_metrics(ledger, currency))


def _render_team_selection(currency: str) -> None:
    ledger = st.session_state.ledger
    section_header("👥 Select Your Name")

    if not ledger.consultants:
        empty_roster_state()
        return

    cols = st.columns(4)
    for index, consultant in enumerate(ledger.consultants):
        with cols[index % 4]:
            st.markdown(avatar_html(consultant), unsafe_allow_html=True)
            st.button(
                f"{consultant.name} · {format_amount(total_of(consultant), currency)}",
                key=f"select_{consultant.id}",
                on_click=_on_select,
                args=(consultant.id,),
                use_container_width=True,
            )


def _render_performance_table(currency: str) -> None:
    ledger = st.session_state.ledger
    section_header("Sales Performance Table", "ICO is recorded but not counted in totals.")

    _render_active_goal()

    widths = [2.4] + [1] * len(SEGMENT_NAMES) + [1.2, 1.6]
    header = st.columns(widths)
    header[0].markdown("**Consultant**")
    for col, name in zip(header[1:], SEGMENT_NAMES):
        col.markdown(f"**{get_segment_label(name)}**")
    header[-2].markdown("**Total**")
    header[-1].markdown("**Progress / Target**")

    for index, consultant in enumerate(ledger.consultants):
        cells = st.columns(widths)
        is_you = index == 0 and consultant.id == ledger.active_consultant_id

        with cells[0]:
            badge = '<span class="st-you-badge">You</span>' if is_you else ""
            st.markdown(f"{avatar_html(consultant)}**{consultant.name}**{badge}", unsafe_allow_html=True)
            upload_key = f"avatar_{consultant.id}"
            with st.popover("Upload photo"):
                st.file_uploader(
                    "PNG or JPEG",
                    type=AVATAR_EXTENSIONS,
                    key=upload_key,
                    on_change=_on_avatar_upload,
                    args=(consultant.id, upload_key),
                )

        for col, name in zip(cells[1:], SEGMENT_NAMES):
            key = f"entry_{consultant.id}_{name}"
            _seed_widget(key, consultant.entries[name])
            col.number_input(
                name,
                min_value=0.0,
                step=100.0,
                format="%.0f",
                key=key,
                on_change=_on_entry_change,
                args=(consultant.id, name, key),
                label_visibility="collapsed",
            )

        total_text = format_amount(total_of(consultant), currency)
        if is_goal_met(consultant):
            cells[-2].markdown(f'<span class="st-goal-met">✅ **{total_text}**</span>', unsafe_allow_html=True)
        else:
            cells[-2].markdown(f"**{total_text}**")

        with cells[-1]:
            pct = consultant_progress(consultant)
            st.progress((pct or 0) / 100, text=format_progress(pct))
            target_key = f"target_{consultant.id}"
            _seed_widget(target_key, consultant.daily_target)
            st.number_input(
                "Daily target",
                min_value=0.0,
                step=100.0,
                format="%.0f",
                key=target_key,
                on_change=_on_target_change,
                args=(consultant.id, target_key),
                label_visibility="collapsed",
            )


# =============================================================================
# PAGE
# =============================================================================

def render(settings: dict) -> None:
    """Render the whole tracker page for this rerun."""
    init_session(settings)
    inject_global_styles(st.session_state.dark_mode)
    currency = settings["currency"]

    _render_header(settings)

    message_container = st.container()
    with message_container:
        render_flash_error()

    _render_store_progress(currency)
    st.divider()

    if st.session_state.ledger.active_consultant_id:
        _render_performance_table(currency)
    else:
        _render_team_selection(currency)
