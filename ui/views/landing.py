"""
ui/views/landing.py

Public landing page: hero, launch countdown, expert block, curriculum
preview and pricing. Members never see it (the router sends them to
/dashboard).
"""

import streamlit as st

from execution.access.access_gate import LOGIN_PATH, SIGNUP_PATH, is_module_free
from execution.app_state import AppState
from ui.components import cached_academy_content, navigate, render_countdown
from ui.theme import badge, badge_html

# (name, price, period, blurb, features, cta label)
_PLANS: list[tuple[str, str, str, str, list[str], str]] = [
    (
        "Free Starter", "£0", "",
        "Perfect for seeing how we work.",
        [
            "First 2 Modules Fully Free",
            "Introductory Templates",
            "Access to Resources Vault (Limited)",
            "No Credit Card Needed",
        ],
        "Get Started Free",
    ),
    (
        "Academy Pro", "£12", "/mo",
        "Full access to everything we offer.",
        [
            "All 10 Core Modules",
            "Full Templates Vault",
            "AI Library & Prompts",
            "Unlimited Resources Downloads",
            "Monthly Strategy Updates",
        ],
        "Choose Monthly",
    ),
    (
        "Academy Annual", "£99", "/year",
        "The most committed dealers win.",
        [
            "Everything in Monthly Plan",
            "30% Discount over Monthly",
            "Lock in Launch Pricing Forever",
            "Priority Support Access",
        ],
        "Choose Yearly",
    ),
]


def _render_hero() -> None:
    badge("Next Cohort Launching Soon", "info")
    st.title("Sell More Cars Without *Guru Hype*.")
    st.markdown(
        "The first marketing academy built specifically for UK independent dealers. "
        "Practical, step-by-step training that works in the real world."
    )
    col_signup, col_login = st.columns([1, 1])
    with col_signup:
        if st.button("Pre-Register Free", type="primary", use_container_width=True, key="hero_signup"):
            navigate(SIGNUP_PATH)
    with col_login:
        if st.button("Login", use_container_width=True, key="hero_login"):
            navigate(LOGIN_PATH)

    st.caption("Launch Countdown to 1st March 2026")
    render_countdown()


def _render_expert(expert: dict) -> None:
    col_img, col_text = st.columns([1, 2])
    with col_img:
        if expert.get("imageUrl"):
            st.image(expert["imageUrl"], use_container_width=True)
        st.metric("Dealership Exp.", f"{expert.get('automotiveYears', 0)} yrs")
    with col_text:
        badge("Expert Authority", "warning")
        st.header("Not built by gurus. Built by a Practitioner.")
        st.markdown(
            f"Every course module and strategy in this academy is handwritten by "
            f"**{expert['name']}**."
        )
        st.markdown(f"> {expert['quote']}")
        m_col, a_col = st.columns(2)
        m_col.metric("Marketing", f"{expert.get('marketingYears', 0)} yrs")
        m_col.caption("Global marketing expertise applied to the automotive world.")
        a_col.metric("Automotive", f"{expert.get('automotiveYears', 0)} yrs")
        a_col.caption("Living and breathing the forecourt day-to-day.")
        if expert.get("roles"):
            st.markdown(" ".join(badge_html(r, "neutral") for r in expert["roles"]), unsafe_allow_html=True)


def _render_curriculum(modules: list[dict]) -> None:
    badge("The Full Journey", "info")
    st.header(f"The {len(modules)}-Module Blueprint")
    st.markdown(
        "Vastly different from generic marketing. These are forecourt-proven systems. "
        "The first two are free."
    )
    cols = st.columns(2)
    for idx, module in enumerate(modules):
        with cols[idx % 2].container(border=True):
            st.caption(f"MODULE {idx + 1:02d}")
            st.subheader(module["title"])
            st.write(module["description"])
            if is_module_free(idx):
                badge("Free Access", "success")


def _render_pricing() -> None:
    st.header("Choose Your Plan")
    st.markdown("Scale your dealership with practical, dealer-led education.")
    cols = st.columns(len(_PLANS))
    for idx, (col, plan) in enumerate(zip(cols, _PLANS)):
        name, price, period, blurb, features, cta = plan
        with col.container(border=True):
            if name == "Academy Annual":
                badge("Best Value — Save 30%", "success")
            st.subheader(name)
            st.markdown(f"## {price} {period}")
            st.caption(blurb)
            for feature in features:
                st.markdown(f"✓ {feature}")
            if st.button(cta, key=f"plan_{idx}", use_container_width=True):
                navigate(SIGNUP_PATH)


def render(state: AppState) -> None:
    content = cached_academy_content()

    _render_hero()
    st.divider()
    _render_expert(content["expert"])
    st.divider()
    _render_curriculum(state.course.modules)
    st.divider()
    _render_pricing()
    st.divider()
    st.caption(
        "© 2024 Dealer Growth Academy. Built for Independent Car Dealers. "
        "The leading education platform for UK independent car dealers who want "
        "to scale through smarter marketing."
    )
