"""
execution/course/course_registry.py

Canonical constants for the Dealer Growth Academy course.

No database access. Pure constants and helpers only.
"""

COURSE_ID: str = "DEALER_GROWTH_ACADEMY"

# Modules at positions below this index are open to every member tier.
FREE_MODULE_COUNT: int = 2

# Closed set of template categories, in display order.
TEMPLATE_CATEGORIES: tuple[str, ...] = (
    "Facebook",
    "Ad Copy",
    "WhatsApp",
    "AI Prompts",
    "Reviews",
)


def lesson_ids(modules: list[dict]) -> set[str]:
    """Return every lesson id found in *modules*.

    Args:
        modules: Module dicts, each carrying a 'lessons' list.

    Returns:
        Set of lesson id strings across all modules.
    """
    return {
        lesson["id"]
        for module in modules
        for lesson in module.get("lessons", [])
    }


def is_valid_lesson_id(lesson_id: str, modules: list[dict]) -> bool:
    """Return True if lesson_id belongs to a lesson in *modules*."""
    return lesson_id in lesson_ids(modules)
