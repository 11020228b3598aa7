"""
ui/views/templates_vault.py

Template vault: category filter plus free-text search over the marketing
templates fixture. Copy buttons stay disabled until launch.
"""

import streamlit as st

from execution.app_state import AppState
from execution.templates.template_vault import ALL_CATEGORIES, FILTER_OPTIONS, filter_templates
from ui.components import cached_academy_content
from ui.theme import badge, badge_html


def render(state: AppState) -> None:
    badge("Coming 1st March 2026", "info")
    st.title("Templates Vault")
    st.caption(
        "The full vault will be copy-ready on launch day. "
        "Pro members get unlimited access to all assets."
    )

    filter_col, search_col = st.columns([3, 2])
    with filter_col:
        category = st.radio(
            "Category",
            options=list(FILTER_OPTIONS),
            index=FILTER_OPTIONS.index(ALL_CATEGORIES),
            horizontal=True,
            key="template_category",
            label_visibility="collapsed",
        )
    with search_col:
        search = st.text_input(
            "Search",
            placeholder="Search templates...",
            key="template_search",
            label_visibility="collapsed",
        )

    templates = filter_templates(cached_academy_content()["templates"], category, search)
    if not templates:
        st.info("No templates match your filters.")
        return

    cols = st.columns(3)
    for idx, template in enumerate(templates):
        with cols[idx % 3].container(border=True):
            pills = [badge_html(template["category"], "neutral")]
            if template.get("isPaidOnly"):
                pills.append(badge_html("PRO", "danger"))
            st.markdown(" ".join(pills), unsafe_allow_html=True)
            st.subheader(template["title"])
            st.code(template["content"], language=None, wrap_lines=True)
            st.button(
                "Unlock on 1st March",
                key=f"tpl_{template['id']}",
                disabled=True,
                use_container_width=True,
            )
