"""
ui/app.py

Dealer Growth Academy: single-page entry point.

The current route lives in the `path` query parameter. Every run resolves
it through the access gate (following redirects) before rendering, so
anonymous visitors land on /login and non-admins never see /admin.

Run from the repository root:
    streamlit run ui/app.py
"""

import logging
import sqlite3
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure repo root is on sys.path so execution.* imports work regardless of
# where Streamlit is launched from.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.access.access_gate import (  # noqa: E402
    ADMIN_PATH,
    COURSES_PATH,
    DASHBOARD_PATH,
    HOME_PATH,
    LOGIN_PATH,
    MEMBER_PATHS,
    RESOURCES_PATH,
    SETTINGS_PATH,
    SIGNUP_PATH,
    TEMPLATES_PATH,
    follow_redirects,
)
from execution.app_state import AppState                       # noqa: E402
from execution.db.sqlite import get_db_path                    # noqa: E402
from ui.components import PATH_PARAM, current_path, render_sidebar  # noqa: E402
from ui.theme import apply_academy_theme                       # noqa: E402
from ui.views import (                                         # noqa: E402
    admin,
    auth_forms,
    courses,
    dashboard,
    landing,
    resources,
    settings,
    templates_vault,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DB_PATH = get_db_path()

_VIEWS = {
    HOME_PATH: landing.render,
    LOGIN_PATH: auth_forms.render_login,
    SIGNUP_PATH: auth_forms.render_signup,
    DASHBOARD_PATH: dashboard.render,
    COURSES_PATH: courses.render,
    TEMPLATES_PATH: templates_vault.render,
    RESOURCES_PATH: resources.render,
    SETTINGS_PATH: settings.render,
    ADMIN_PATH: admin.render,
}

_AUTHENTICATED_PATHS = MEMBER_PATHS | {ADMIN_PATH}

# ---------------------------------------------------------------------------
# Page config: must be the first Streamlit call in the file.
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Dealer Growth Academy",
    page_icon="🚗",
    layout="wide",
)
apply_academy_theme("Marketing training for UK independent dealers")

# ---------------------------------------------------------------------------
# Session state initialisation: providers are built once per session.
# ---------------------------------------------------------------------------
if "app_state" not in st.session_state:
    try:
        st.session_state["app_state"] = AppState.load(DB_PATH)
    except sqlite3.OperationalError:
        st.error(f"Database unavailable. Check that {DB_PATH} is accessible.")
        st.stop()
    except Exception:
        logging.exception("Unexpected error loading academy state")
        st.error("An unexpected error occurred. See console for details.")
        st.stop()

state: AppState = st.session_state["app_state"]

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
target = follow_redirects(current_path(), state.user)
if st.query_params.get(PATH_PARAM) != target:
    st.query_params[PATH_PARAM] = target

if target in _AUTHENTICATED_PATHS:
    render_sidebar(state, target)

_VIEWS[target](state)
