"""
ui/components.py

Shared Streamlit building blocks for the academy pages: navigation,
the launch countdown, the member sidebar and cached fixture content.
"""

from __future__ import annotations

import logging

import streamlit as st

from execution.access.access_gate import nav_items, normalize_path
from execution.app_state import AppState
from execution.course.course_registry import COURSE_ID
from execution.course.load_academy_content import load_academy_content
from execution.launch.countdown import format_time_left, time_left_until_launch
from ui.theme import badge_html

# Query parameter carrying the current route.
PATH_PARAM = "path"


# ---------------------------------------------------------------------------
# Cached course data loader: file I/O runs once per process.
# ---------------------------------------------------------------------------
@st.cache_data
def cached_academy_content() -> dict:
    return load_academy_content(COURSE_ID)


def current_path() -> str:
    """Return the normalized route from the URL query string."""
    return normalize_path(st.query_params.get(PATH_PARAM, "/"))


def navigate(path: str) -> None:
    """Switch to *path* and start a fresh script run."""
    st.query_params[PATH_PARAM] = normalize_path(path)
    st.rerun()


# ---------------------------------------------------------------------------
# Countdown: the fragment re-runs every second while it is on screen.
# Streamlit drops the schedule once a run no longer renders it.
# ---------------------------------------------------------------------------
@st.fragment(run_every=1)
def render_countdown() -> None:
    try:
        time_left = time_left_until_launch()
    except ValueError:
        logging.exception("Invalid launch date configuration")
        st.error("Launch date is misconfigured.")
        return

    cols = st.columns(4)
    for col, (label, value) in zip(cols, format_time_left(time_left)):
        col.metric(label, value)


# ---------------------------------------------------------------------------
# Member sidebar
# ---------------------------------------------------------------------------
def render_sidebar(state: AppState, active_path: str) -> None:
    """Render navigation, the member card and the logout button."""
    user = state.user
    with st.sidebar:
        st.markdown("### DEALER GROWTH")
        for label, path in nav_items(user):
            if st.button(
                label,
                key=f"nav_{path}",
                use_container_width=True,
                type="primary" if active_path.startswith(path) else "secondary",
            ):
                navigate(path)

        st.divider()
        if user is not None:
            variant = "success" if user["tier"] == "PAID" else "neutral"
            st.markdown(f"**{user['name']}**")
            st.caption(user["dealershipName"])
            st.markdown(badge_html(user["tier"], variant), unsafe_allow_html=True)

        if st.button("Sign Out", key="nav_logout", use_container_width=True):
            try:
                state.logout()
            except Exception:
                logging.exception("Unexpected error signing out")
                st.error("An unexpected error occurred. See console for details.")
            else:
                navigate("/")
