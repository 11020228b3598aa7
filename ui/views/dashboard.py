"""
ui/views/dashboard.py

Member dashboard: greeting, launch countdown, tier, progress summary,
the academy roadmap and shortcuts to the other member pages.
"""

import streamlit as st

from execution.access.access_gate import (
    COURSES_PATH,
    RESOURCES_PATH,
    SETTINGS_PATH,
    TEMPLATES_PATH,
    is_module_free,
)
from execution.app_state import AppState
from ui.components import navigate, render_countdown
from ui.theme import badge

EM_DASH = "—"

_ROADMAP_SIZE = 4

_SHORTCUTS: list[tuple[str, str]] = [
    ("Templates Vault", TEMPLATES_PATH),
    ("Resources", RESOURCES_PATH),
    ("Account Settings", SETTINGS_PATH),
]


def render(state: AppState) -> None:
    user = state.user
    course = state.course
    first_name = user["name"].split(" ")[0]

    head_left, head_right = st.columns([3, 1])
    with head_left:
        st.title(f"Welcome, {first_name}")
        st.caption(
            "Courses launch on March 1st 2026. Your first two modules are ready for preview."
        )
    with head_right:
        if st.button("View Academy", use_container_width=True, key="dash_view_academy"):
            navigate(COURSES_PATH)

    launch_col, promo_col = st.columns([2, 1])
    with launch_col.container(border=True):
        badge("Awaiting Launch", "warning")
        st.subheader("Official Release in:")
        render_countdown()
        tier_col, progress_col = st.columns(2)
        tier_col.metric("Member Tier", user["tier"])
        progress_col.metric("Completion", f"{course.completion_pct():.0f} %")
        st.progress(course.completion_pct() / 100.0)

        last_id = course.progress.get("lastAccessedLessonId")
        last_lesson = course.find_lesson(last_id) if last_id else None
        st.write(f"**Last opened:** {last_lesson['title'] if last_lesson else EM_DASH}")
        st.info(
            "Registered users can view the curriculum today, "
            "but lessons will unlock on **1st March 2026**."
        )

    with promo_col.container(border=True):
        badge("Launch Promo", "success")
        st.subheader("First 25 Promotion")
        st.write(
            "The first 25 dealers who registered will receive a personal email with "
            "their **Lifetime Free Access** code on launch day."
        )
        st.success("You are registered")

    road_col, soon_col = st.columns([2, 1])
    with road_col:
        st.subheader("Academy Roadmap")
        cols = st.columns(2)
        for idx, module in enumerate(course.modules[:_ROADMAP_SIZE]):
            with cols[idx % 2].container(border=True):
                st.caption(f"MODULE {idx + 1:02d}")
                st.markdown(f"**{module['title']}**")
                st.write(module["description"])
                if is_module_free(idx):
                    badge("Free Access", "success")

    with soon_col:
        st.subheader("Coming Soon")
        for label, path in _SHORTCUTS:
            if st.button(f"{label} ›", key=f"dash_{path}", use_container_width=True):
                navigate(path)
