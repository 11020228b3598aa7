"""
ui/views/resources.py

Resources vault preview. Downloads activate at launch.
"""

import streamlit as st

from execution.app_state import AppState
from ui.components import cached_academy_content
from ui.theme import badge, badge_html


def render(state: AppState) -> None:
    badge("Toolkit Preview", "info")
    st.title("Resources Vault")
    st.caption("Downloadable assets will be active on 1st March 2026.")

    resources = cached_academy_content()["resources"]
    cols = st.columns(2)
    for idx, resource in enumerate(resources):
        with cols[idx % 2].container(border=True):
            st.markdown(badge_html(resource["format"], "neutral"), unsafe_allow_html=True)
            st.subheader(resource["title"])
            st.write(resource["description"])
            st.button(
                "Awaiting Launch",
                key=f"res_{idx}",
                disabled=True,
                use_container_width=True,
            )
