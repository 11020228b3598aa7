"""
ui/views/auth_forms.py

Login and signup forms. Both are mocked: any password is accepted.
A rejected call surfaces as one generic error, never a specific reason.
"""

import logging
import sqlite3

import streamlit as st

from execution.access.access_gate import DASHBOARD_PATH, LOGIN_PATH, SIGNUP_PATH
from execution.app_state import AppState
from execution.auth.auth_provider import AuthenticationError
from ui.components import navigate

AUTH_FAILED_MESSAGE = "Authentication failed. Check your details."


def _render_form(state: AppState, mode: str) -> None:
    is_login = mode == "login"

    st.title("Member Login" if is_login else "Secure Your Place")
    st.caption(
        "Log in to manage your pre-registration."
        if is_login else
        "The first 2 modules are fully free for all pre-registered users."
    )

    with st.form(f"{mode}_form"):
        name = ""
        dealership = ""
        if not is_login:
            name = st.text_input("Full Name", placeholder="e.g. David Smith")
            dealership = st.text_input("Dealership Name", placeholder="e.g. Prestige Motors UK")
        email = st.text_input("Email Address", placeholder="name@dealership.co.uk")
        password = st.text_input("Password", type="password", placeholder="••••••••")
        submitted = st.form_submit_button(
            "Login Now" if is_login else "Join the Academy",
            use_container_width=True,
        )

    if submitted:
        authenticated = False
        with st.spinner("Signing in…"):
            try:
                if is_login:
                    state.auth.login(email, password)
                else:
                    state.auth.signup({
                        "email": email,
                        "name": name,
                        "dealershipName": dealership,
                    })
                authenticated = True
            except AuthenticationError:
                st.error(AUTH_FAILED_MESSAGE)
            except sqlite3.OperationalError:
                st.error("Could not save your session. Check that tmp/app.db is accessible.")
            except Exception:
                logging.exception("Unexpected error during %s", mode)
                st.error(AUTH_FAILED_MESSAGE)
        if authenticated:
            navigate(DASHBOARD_PATH)

    if is_login:
        st.markdown("New here?")
        if st.button("Pre-register free", key="to_signup"):
            navigate(SIGNUP_PATH)
    else:
        st.markdown("Already a member?")
        if st.button("Sign in here", key="to_login"):
            navigate(LOGIN_PATH)


def render_login(state: AppState) -> None:
    _render_form(state, "login")


def render_signup(state: AppState) -> None:
    _render_form(state, "signup")
