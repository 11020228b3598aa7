"""
ui/views/courses.py

Full curriculum listing. Modules past the free ones render behind a lock
overlay for FREE members; the rows come from build_course_listing().
"""

import html
import logging
import sqlite3

import streamlit as st

from execution.access.access_gate import SETTINGS_PATH, build_course_listing
from execution.app_state import AppState
from ui.components import navigate
from ui.theme import badge, badge_html


def _checkbox_key(lesson_id: str) -> str:
    return f"done_{lesson_id}"


def _sync_checkbox(state: AppState, lesson_id: str) -> None:
    st.session_state[_checkbox_key(lesson_id)] = state.course.is_lesson_complete(lesson_id)


def locked_lessons_html(lessons: list[dict]) -> str:
    """Return the greyed-out lesson list shown behind the lock overlay."""
    titles = "".join(
        f"<div>🔒 {html.escape(lesson['title'])}</div>" for lesson in lessons
    )
    return f"<div class='dga-locked'>{titles}</div>"


def _toggle_lesson(state: AppState, lesson_id: str) -> None:
    """Checkbox callback: flip completion and remember the lesson.

    On failure the checkbox falls back to the recorded completion state.
    """
    try:
        state.course.toggle_lesson_complete(lesson_id)
        state.course.set_last_accessed(lesson_id)
    except ValueError:
        logging.exception("ValueError toggling %s", lesson_id)
        st.error("Cannot record completion: unrecognised lesson.")
        _sync_checkbox(state, lesson_id)
    except sqlite3.OperationalError:
        st.error("Could not save progress. Check that tmp/app.db is accessible.")
        _sync_checkbox(state, lesson_id)


def _render_open_lesson(state: AppState, lesson_id: str) -> None:
    lesson = state.course.find_lesson(lesson_id)
    if lesson is None:
        st.warning(f"Lesson '{lesson_id}' not found in catalog.")
        return

    with st.expander(lesson["title"]):
        st.write(lesson["content"])
        if lesson.get("actionSteps"):
            st.markdown("**Action steps**")
            for step in lesson["actionSteps"]:
                st.markdown(f"- {step}")
        # The widget mirrors recorded progress on every run.
        _sync_checkbox(state, lesson_id)
        st.checkbox(
            "Mark complete",
            key=_checkbox_key(lesson_id),
            on_change=_toggle_lesson,
            args=(state, lesson_id),
        )


def render(state: AppState) -> None:
    badge("Release Date: 1st March 2026", "warning")
    st.title("Full Curriculum")
    st.caption(
        "The first two modules are free for all members. "
        "Modules 3-10 require an Academy Pro subscription."
    )

    rows = build_course_listing(state.course.modules, state.auth.tier)

    for row in rows:
        with st.container(border=True):
            left, right = st.columns([1, 2])

            with left:
                st.markdown(f"## {row['number']:02d}")
                st.subheader(row["title"])
                pills = [badge_html(f"{row['lesson_count']} LESSONS", "neutral")]
                if row["is_free"]:
                    pills.append(badge_html("FREE ACCESS", "success"))
                if row["is_locked"]:
                    pills.append(badge_html("PRO ONLY", "danger"))
                st.markdown(" ".join(pills), unsafe_allow_html=True)
                st.write(row["description"])

            with right:
                if row["is_locked"]:
                    st.markdown(locked_lessons_html(row["lessons"]), unsafe_allow_html=True)
                    if st.button(
                        "Upgrade to Unlock",
                        type="primary",
                        key=f"unlock_{row['module_id']}",
                    ):
                        navigate(SETTINGS_PATH)
                else:
                    for lesson in row["lessons"]:
                        _render_open_lesson(state, lesson["id"])
