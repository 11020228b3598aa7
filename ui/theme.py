"""
ui/theme.py

Dealer Growth Academy shared theme helper.
Call apply_academy_theme() immediately after st.set_page_config() to inject
brand styling and render the consistent header bar.

Brand tokens:
    accent blue:   #2563EB
    accent green:  #10B981
    near black:    #09090B
    panel zinc:    #18181B
    border zinc:   #27272A
    muted zinc:    #A1A1AA
"""

from __future__ import annotations

import html

import streamlit as st

# ---------------------------------------------------------------------------
# Brand tokens
# ---------------------------------------------------------------------------
_ACCENT_BLUE  = "#2563EB"
_ACCENT_GREEN = "#10B981"
_NEAR_BLACK   = "#09090B"
_PANEL_ZINC   = "#18181B"
_BORDER_ZINC  = "#27272A"
_MUTED_ZINC   = "#A1A1AA"

# Badge colour per variant: (text, background).
_BADGE_COLOURS: dict[str, tuple[str, str]] = {
    "success": ("#22C55E", "rgba(34, 197, 94, 0.10)"),
    "warning": ("#F59E0B", "rgba(245, 158, 11, 0.10)"),
    "info":    ("#3B82F6", "rgba(59, 130, 246, 0.10)"),
    "neutral": ("#71717A", "rgba(113, 113, 122, 0.10)"),
    "danger":  ("#EF4444", "rgba(239, 68, 68, 0.10)"),
}

# ---------------------------------------------------------------------------
# CSS: injected once per page render.
# Double braces {{ }} produce literal CSS braces in the f-string.
# ---------------------------------------------------------------------------
_CSS = f"""
<style>
.block-container {{
    padding-top: 0.75rem !important;
    padding-bottom: 2rem !important;
}}

#MainMenu {{ visibility: hidden; }}
footer {{ visibility: hidden; }}

section[data-testid="stSidebar"] > div:first-child {{
    background-color: {_NEAR_BLACK};
    border-right: 1px solid {_BORDER_ZINC};
}}

.stButton > button[kind="primary"],
.stFormSubmitButton > button {{
    background-color: {_ACCENT_BLUE} !important;
    color: white !important;
    border: none !important;
    border-radius: 10px !important;
    font-weight: 700 !important;
}}
.stButton > button[kind="primary"]:hover {{
    background-color: #1D4ED8 !important;
}}

.dga-badge {{
    display: inline-block;
    font-size: 0.65rem;
    font-weight: 800;
    letter-spacing: 0.08em;
    text-transform: uppercase;
    border-radius: 999px;
    padding: 0.15rem 0.6rem;
    margin-right: 0.35rem;
}}

.dga-locked {{
    filter: grayscale(1);
    opacity: 0.6;
}}

hr {{
    border: none !important;
    border-top: 1px solid {_BORDER_ZINC} !important;
    margin: 1rem 0 !important;
}}
</style>
"""


def badge_html(text: str, variant: str = "info") -> str:
    """Return an inline HTML pill for *text* (escaped) in the given colour variant."""
    fg, bg = _BADGE_COLOURS.get(variant, _BADGE_COLOURS["info"])
    return (
        f"<span class='dga-badge' style='color:{fg}; background:{bg}; "
        f"border:1px solid {fg}33;'>{html.escape(str(text))}</span>"
    )


def badge(text: str, variant: str = "info") -> None:
    """Render a single badge pill."""
    st.markdown(badge_html(text, variant), unsafe_allow_html=True)


def apply_academy_theme(subtitle: str | None = None) -> None:
    """Inject academy brand CSS and render the shared sticky top bar.

    Must be called immediately after st.set_page_config().
    """
    st.markdown(_CSS, unsafe_allow_html=True)

    subtitle_html = (
        f"<div style='color:{_MUTED_ZINC}; font-size:0.85rem; margin-top:0.15rem;'>{subtitle}</div>"
        if subtitle else
        ""
    )

    st.markdown(
        f"""
        <div style="
            position: sticky;
            top: 0;
            z-index: 999;
            background: {_PANEL_ZINC};
            border-bottom: 3px solid {_ACCENT_BLUE};
            padding: 0.65rem 1.25rem;
            margin: -0.75rem -1rem 1.0rem -1rem;
            display: flex;
            align-items: center;
            gap: 1rem;
        ">
            <div style="display:flex; flex-direction:column; line-height:1.1;">
                <div style="
                    font-size:1.15rem;
                    font-weight:800;
                    text-transform:uppercase;
                    background: linear-gradient(90deg, #60A5FA, {_ACCENT_GREEN});
                    -webkit-background-clip: text;
                    color: transparent;
                ">
                    Dealer Growth Academy
                </div>
                {subtitle_html}
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )
