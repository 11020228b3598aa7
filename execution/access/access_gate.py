"""
execution/access/access_gate.py

Access Gate: maps (path, current user) to a render or redirect decision,
and decides which course-listing modules render behind a lock overlay.

Pure functions only. No database access, no Streamlit imports.

The lock overlay is a rendering decision, not an access-control boundary:
lesson data is still present in the catalog for every tier.
"""

from execution.auth.auth_provider import TIER_ADMIN, TIER_FREE
from execution.course.course_registry import FREE_MODULE_COUNT

# ---------------------------------------------------------------------------
# Route table
# ---------------------------------------------------------------------------
HOME_PATH = "/"
LOGIN_PATH = "/login"
SIGNUP_PATH = "/signup"
DASHBOARD_PATH = "/dashboard"
COURSES_PATH = "/courses"
TEMPLATES_PATH = "/templates"
RESOURCES_PATH = "/resources"
SETTINGS_PATH = "/settings"
ADMIN_PATH = "/admin"

PUBLIC_PATHS: frozenset[str] = frozenset({HOME_PATH, LOGIN_PATH, SIGNUP_PATH})
MEMBER_PATHS: frozenset[str] = frozenset({
    DASHBOARD_PATH,
    COURSES_PATH,
    TEMPLATES_PATH,
    RESOURCES_PATH,
    SETTINGS_PATH,
})
ADMIN_PATHS: frozenset[str] = frozenset({ADMIN_PATH})
ALL_PATHS: frozenset[str] = PUBLIC_PATHS | MEMBER_PATHS | ADMIN_PATHS

# Sidebar entries for authenticated members, in display order.
_MEMBER_NAV: tuple[tuple[str, str], ...] = (
    ("Dashboard", DASHBOARD_PATH),
    ("Academy", COURSES_PATH),
    ("Templates", TEMPLATES_PATH),
    ("Resources", RESOURCES_PATH),
    ("Settings", SETTINGS_PATH),
)

# Longest redirect chain is /admin -> /dashboard -> /login.
_MAX_REDIRECTS = 5


def normalize_path(path: str | None) -> str:
    """Return *path* with surrounding whitespace and trailing slashes removed.

    A missing leading slash is added; an empty path becomes "/".
    """
    path = (path or "").strip().rstrip("/")
    if not path:
        return HOME_PATH
    if not path.startswith("/"):
        path = "/" + path
    return path


def _render(path: str) -> dict:
    return {"action": "render", "path": path}


def _redirect(path: str) -> dict:
    return {"action": "redirect", "path": path}


def resolve_route(path: str | None, user: dict | None) -> dict:
    """Decide what to do with one navigation request.

    Args:
        path: Requested path (normalized internally).
        user: Current user dict, or None when Anonymous.

    Returns:
        dict with keys:
            action (str) "render" or "redirect"
            path   (str) the page to render, or the redirect target
    """
    path = normalize_path(path)

    if path not in ALL_PATHS:
        return _redirect(HOME_PATH)

    if path == HOME_PATH and user is not None:
        return _redirect(DASHBOARD_PATH)

    if path in MEMBER_PATHS and user is None:
        return _redirect(LOGIN_PATH)

    if path in ADMIN_PATHS and (user is None or user.get("tier") != TIER_ADMIN):
        return _redirect(DASHBOARD_PATH)

    return _render(path)


def follow_redirects(path: str | None, user: dict | None) -> str:
    """Apply resolve_route() until it renders and return the final path.

    Raises:
        RuntimeError: If the redirect chain does not settle.
    """
    decision = resolve_route(path, user)
    for _ in range(_MAX_REDIRECTS):
        if decision["action"] == "render":
            return decision["path"]
        decision = resolve_route(decision["path"], user)
    raise RuntimeError(f"Redirect loop while resolving {path!r}")


def nav_items(user: dict | None) -> list[tuple[str, str]]:
    """Return (label, path) sidebar entries visible to *user*."""
    if user is None:
        return []
    items = list(_MEMBER_NAV)
    if user.get("tier") == TIER_ADMIN:
        items.append(("Admin Panel", ADMIN_PATH))
    return items


# ---------------------------------------------------------------------------
# Course listing gate
# ---------------------------------------------------------------------------

def is_module_free(module_index: int) -> bool:
    """Return True if the module at *module_index* (0-based) is open to all tiers."""
    return module_index < FREE_MODULE_COUNT


def is_module_locked(module_index: int, tier: str | None) -> bool:
    """Return True if the module renders with a lock overlay for *tier*.

    Only FREE members see locks, and only past the free modules. The
    per-lesson 'isFree' flag is deliberately not consulted.
    """
    return not is_module_free(module_index) and tier == TIER_FREE


def build_course_listing(modules: list[dict], tier: str | None) -> list[dict]:
    """Build the per-module rows shown on the course listing page.

    Args:
        modules: Ordered module catalog.
        tier:    Tier of the viewing member.

    Returns:
        list of dicts, one per module, with keys:
            number        (int)        1-based display position
            module_id     (str)
            title         (str)
            description   (str)
            lesson_count  (int)
            is_free       (bool)       within the free modules
            is_locked     (bool)       rendered behind the lock overlay
            lessons       (list[dict]) {"id", "title"} per lesson
    """
    rows = []
    for idx, module in enumerate(modules):
        lessons = module.get("lessons", [])
        rows.append({
            "number": idx + 1,
            "module_id": module["id"],
            "title": module["title"],
            "description": module.get("description", ""),
            "lesson_count": len(lessons),
            "is_free": is_module_free(idx),
            "is_locked": is_module_locked(idx, tier),
            "lessons": [{"id": l["id"], "title": l["title"]} for l in lessons],
        })
    return rows
