"""
ui/views/settings.py

Member settings: tier status with the upgrade action, and the read-only
dealership profile.
"""

import logging
import sqlite3
from datetime import datetime

import streamlit as st

from execution.app_state import AppState
from execution.auth.auth_provider import TIER_FREE, TIER_PAID
from ui.theme import badge_html

EM_DASH = "—"


def _member_since(created_at: str) -> str:
    """Format an ISO timestamp as a calendar date; em dash if unparseable."""
    try:
        return datetime.fromisoformat(created_at).strftime("%d/%m/%Y")
    except (TypeError, ValueError):
        return EM_DASH


def render(state: AppState) -> None:
    user = state.user

    st.title("Member Settings")
    st.caption("Your account details and pre-registration status.")

    with st.container(border=True):
        head_left, head_right = st.columns([3, 1])
        with head_left:
            st.subheader("Your Status")
            st.caption(f"Academy Member Since {_member_since(user['createdAt'])}")
        with head_right:
            is_paid = user["tier"] == TIER_PAID
            st.markdown(
                badge_html(
                    "PRO MEMBER" if is_paid else "FREE MEMBER",
                    "success" if is_paid else "neutral",
                ),
                unsafe_allow_html=True,
            )

        st.markdown(f"**{'⚡' if user['tier'] == TIER_PAID else '🔒'} {user['tier']} PLAN**")
        if user["tier"] == TIER_FREE:
            st.write(
                "Upgrade to Academy Pro to unlock Modules 3-10, the full Templates Vault, "
                "and our AI library."
            )
            if st.button("Upgrade Now", type="primary", key="settings_upgrade"):
                try:
                    state.auth.update_tier(TIER_PAID)
                except sqlite3.OperationalError:
                    st.error("Could not save your plan. Check that tmp/app.db is accessible.")
                except Exception:
                    logging.exception("Unexpected error upgrading tier")
                    st.error("An unexpected error occurred. See console for details.")
                else:
                    st.rerun()
        else:
            st.write(
                "You have full access to the Academy. "
                "Your first billing cycle starts March 1st 2026."
            )

    with st.container(border=True):
        st.subheader("Dealership Profile")
        name_col, contact_col = st.columns(2)
        name_col.text_input("Dealership Name", value=user["dealershipName"], disabled=True)
        contact_col.text_input("Primary Contact", value=user["name"], disabled=True)
        email_col, country_col = st.columns(2)
        email_col.text_input("Email", value=user["email"], disabled=True)
        country_col.text_input("Country", value=user["country"], disabled=True)
