"""
execution/course/load_academy_content.py

Loads and validates the academy fixture files for a given course_id:
modules.json, templates.json, resources.json and expert.json.

No database access. No randomness. Pure file I/O + validation.
"""

from __future__ import annotations

import json
from pathlib import Path

from execution.course.course_registry import TEMPLATE_CATEGORIES

# ---------------------------------------------------------------------------
# Supported course IDs.  Add new entries here as courses are onboarded.
# ---------------------------------------------------------------------------
_SUPPORTED_COURSES: frozenset[str] = frozenset({"DEALER_GROWTH_ACADEMY"})

# Repo root: execution/course/ -> execution/ -> repo root
_REPO_ROOT: Path = Path(__file__).resolve().parents[2]

_MODULE_STR_FIELDS: tuple[str, ...] = ("id", "title", "description")
_LESSON_STR_FIELDS: tuple[str, ...] = ("id", "title", "slug", "content")
_TEMPLATE_STR_FIELDS: tuple[str, ...] = ("id", "title", "category", "content")
_RESOURCE_STR_FIELDS: tuple[str, ...] = ("title", "description", "format")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_academy_content(course_id: str) -> dict:
    """Load and validate every fixture file for the given course_id.

    Args:
        course_id: Identifier for the course (e.g. "DEALER_GROWTH_ACADEMY").

    Returns:
        dict with keys:
            modules   (list[dict])  ordered module catalog
            templates (list[dict])  marketing templates
            resources (list[dict])  downloadable resource cards
            expert    (dict)        landing-page expert profile

    Raises:
        ValueError: If course_id is unsupported or a file fails validation.
        FileNotFoundError: If one of the fixture files does not exist.
    """
    if course_id not in _SUPPORTED_COURSES:
        raise ValueError(
            f"Unsupported course_id: {course_id!r}. "
            f"Supported courses: {sorted(_SUPPORTED_COURSES)}"
        )

    content_dir = _REPO_ROOT / "course_content" / course_id

    modules_raw = _read_json(content_dir / "modules.json", course_id)
    templates_raw = _read_json(content_dir / "templates.json", course_id)
    resources_raw = _read_json(content_dir / "resources.json", course_id)
    expert_raw = _read_json(content_dir / "expert.json", course_id)

    return {
        "modules": validate_modules(
            _top_level_list(modules_raw, "modules", course_id), course_id
        ),
        "templates": _validate_templates(
            _top_level_list(templates_raw, "templates", course_id), course_id
        ),
        "resources": _validate_resources(
            _top_level_list(resources_raw, "resources", course_id), course_id
        ),
        "expert": _validate_expert(expert_raw, course_id),
    }


def validate_modules(raw: object, course_id: str = "custom") -> list[dict]:
    """Validate a module catalog and return it unchanged.

    Module ids must be unique within the catalog and lesson ids must be
    unique across all modules.

    Args:
        raw:       Candidate catalog (list of module dicts).
        course_id: Used in error messages for context only.

    Returns:
        The validated list of module dicts.

    Raises:
        ValueError: If the structure does not conform to the expected schema.
    """
    if not isinstance(raw, list):
        raise ValueError(
            f"[{course_id}] modules must be a list, got {type(raw).__name__}"
        )

    seen_modules: set[str] = set()
    seen_lessons: set[str] = set()
    for m_idx, module in enumerate(raw):
        where = f"modules[{m_idx}]"
        _require_dict(module, where, course_id)
        _require_str_fields(module, _MODULE_STR_FIELDS, where, course_id)

        if module["id"] in seen_modules:
            raise ValueError(f"[{course_id}] duplicate module id {module['id']!r}")
        seen_modules.add(module["id"])

        lessons = module.get("lessons")
        if not isinstance(lessons, list):
            raise ValueError(
                f"[{course_id}] module {module['id']!r}: 'lessons' must be a list, "
                f"got {type(lessons).__name__}"
            )

        for l_idx, lesson in enumerate(lessons):
            l_where = f"module {module['id']!r} lessons[{l_idx}]"
            _require_dict(lesson, l_where, course_id)
            _require_str_fields(lesson, _LESSON_STR_FIELDS, l_where, course_id)

            if lesson["id"] in seen_lessons:
                raise ValueError(f"[{course_id}] duplicate lesson id {lesson['id']!r}")
            seen_lessons.add(lesson["id"])

            if not isinstance(lesson.get("isFree", False), bool):
                raise ValueError(f"[{course_id}] {l_where}: 'isFree' must be a bool")
            _validate_list_of_str(lesson, "actionSteps", l_where, course_id)

    return raw


# ---------------------------------------------------------------------------
# Internal helpers (importable for unit tests)
# ---------------------------------------------------------------------------

def _read_json(path: Path, course_id: str) -> object:
    """Read and parse one fixture file."""
    if not path.exists():
        raise FileNotFoundError(f"{path.name} not found for course {course_id!r}: {path}")
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def _top_level_list(raw: object, key: str, course_id: str) -> list:
    """Return raw[key] after checking raw is a dict holding a list there."""
    if not isinstance(raw, dict):
        raise ValueError(
            f"[{course_id}] {key}.json top-level must be a dict, got {type(raw).__name__}"
        )
    value = raw.get(key)
    if value is None:
        raise ValueError(f"[{course_id}] {key}.json missing required top-level key {key!r}")
    if not isinstance(value, list):
        raise ValueError(f"[{course_id}] {key!r} must be a list, got {type(value).__name__}")
    return value


def _validate_templates(raw: list, course_id: str) -> list[dict]:
    """Validate template dicts: required fields, closed category set, unique ids."""
    seen: set[str] = set()
    for idx, template in enumerate(raw):
        where = f"templates[{idx}]"
        _require_dict(template, where, course_id)
        _require_str_fields(template, _TEMPLATE_STR_FIELDS, where, course_id)
        if template["category"] not in TEMPLATE_CATEGORIES:
            raise ValueError(
                f"[{course_id}] {where}: unknown category {template['category']!r}"
            )
        if not isinstance(template.get("isPaidOnly", False), bool):
            raise ValueError(f"[{course_id}] {where}: 'isPaidOnly' must be a bool")
        if template["id"] in seen:
            raise ValueError(f"[{course_id}] duplicate template id {template['id']!r}")
        seen.add(template["id"])
    return raw


def _validate_resources(raw: list, course_id: str) -> list[dict]:
    for idx, resource in enumerate(raw):
        where = f"resources[{idx}]"
        _require_dict(resource, where, course_id)
        _require_str_fields(resource, _RESOURCE_STR_FIELDS, where, course_id)
    return raw


def _validate_expert(raw: object, course_id: str) -> dict:
    _require_dict(raw, "expert", course_id)
    _require_str_fields(raw, ("name", "quote"), "expert", course_id)
    _validate_list_of_str(raw, "roles", "expert", course_id)
    return raw


def _require_dict(value: object, where: str, course_id: str) -> None:
    """Raise ValueError if value is not a dict."""
    if not isinstance(value, dict):
        raise ValueError(
            f"[{course_id}] {where} must be a dict, got {type(value).__name__}"
        )


def _require_str_fields(
    item: dict, fields: tuple[str, ...], where: str, course_id: str
) -> None:
    """Raise ValueError if any of *fields* is missing or not a non-empty string."""
    for field in fields:
        value = item.get(field)
        if not isinstance(value, str) or not value:
            raise ValueError(
                f"[{course_id}] {where} missing or invalid {field!r} "
                f"(must be a non-empty string)"
            )


def _validate_list_of_str(item: dict, field: str, where: str, course_id: str) -> None:
    """Raise ValueError if field is present but not a list of strings."""
    value = item.get(field)
    if value is None:
        return
    if not isinstance(value, list):
        raise ValueError(
            f"[{course_id}] {where}: '{field}' must be a list, got {type(value).__name__}"
        )
    for i, entry in enumerate(value):
        if not isinstance(entry, str):
            raise ValueError(
                f"[{course_id}] {where}: '{field}[{i}]' must be a string, "
                f"got {type(entry).__name__}"
            )
