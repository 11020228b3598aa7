"""
ui/views/admin.py

Course management: ADMIN only (the router redirects everyone else).

Lists the module catalog and exposes a catalog replacement tool that
delegates to CourseProvider.update_modules(). Replacing the catalog is
destructive, so the button stays disabled until the confirm box is ticked.
"""

import json
import logging
import sqlite3

import streamlit as st

from execution.app_state import AppState
from ui.components import cached_academy_content
from ui.theme import badge


def _replace_catalog(state: AppState, new_modules: object) -> None:
    try:
        state.course.update_modules(new_modules)
        st.success(f"Catalog replaced ({len(state.course.modules)} modules).")
    except ValueError as exc:
        st.error(str(exc))
    except sqlite3.OperationalError:
        st.error("Database unavailable. Check that tmp/app.db is accessible.")
    except Exception:
        logging.exception("Unexpected error replacing catalog")
        st.error("An unexpected error occurred. See console for details.")


def render(state: AppState) -> None:
    badge("ADMINISTRATION", "warning")
    st.title("Course Management")
    st.caption("Admin panel remains active for curriculum prep.")

    for idx, module in enumerate(state.course.modules):
        with st.container(border=True):
            num_col, title_col = st.columns([1, 8])
            num_col.markdown(f"### {idx + 1}")
            title_col.markdown(f"**{module['title']}**")
            title_col.caption(f"{len(module.get('lessons', []))} LESSONS")

    # ===========================================================================
    # Replace catalog
    # ===========================================================================
    st.divider()
    st.header("Replace Catalog")
    st.caption(
        "Paste a JSON list of modules. Module ids and lesson ids must be unique. "
        "Existing progress for removed lessons no longer counts toward completion."
    )

    raw = st.text_area(
        "Modules JSON",
        value=json.dumps(state.course.modules, indent=2, ensure_ascii=False),
        height=300,
        key="admin_modules_json",
    )
    confirm = st.checkbox("I confirm this replaces the whole catalog", key="admin_confirm")

    col_apply, col_reset = st.columns(2)
    with col_apply:
        if st.button("Apply Catalog", key="btn_apply_catalog", disabled=not confirm):
            try:
                new_modules = json.loads(raw)
            except ValueError as exc:
                st.error(f"Invalid JSON: {exc}")
            else:
                _replace_catalog(state, new_modules)
    with col_reset:
        if st.button("Restore Default Catalog", key="btn_reset_catalog", disabled=not confirm):
            _replace_catalog(state, cached_academy_content()["modules"])
