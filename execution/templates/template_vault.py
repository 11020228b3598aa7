"""
execution/templates/template_vault.py

Category and free-text filtering for the marketing template vault.
No database access.
"""

from execution.course.course_registry import TEMPLATE_CATEGORIES

ALL_CATEGORIES = "All"

# Filter options as shown above the vault, "All" first.
FILTER_OPTIONS: tuple[str, ...] = (ALL_CATEGORIES, *TEMPLATE_CATEGORIES)


def filter_templates(
    templates: list[dict],
    category: str = ALL_CATEGORIES,
    search: str = "",
) -> list[dict]:
    """Return the templates matching *category* and *search*, in original order.

    A template matches when the category filter is "All" or equals its
    category, and the lower-cased search text occurs in its title or its
    category. An empty search matches everything.

    Args:
        templates: Template dicts with 'title' and 'category' keys.
        category:  One of FILTER_OPTIONS.
        search:    Free text typed into the search box.

    Raises:
        ValueError: If category is not one of FILTER_OPTIONS.
    """
    if category not in FILTER_OPTIONS:
        raise ValueError(f"Invalid template category: {category!r}")

    needle = (search or "").lower()
    return [
        t for t in templates
        if (category == ALL_CATEGORIES or t["category"] == category)
        and (needle in t["title"].lower() or needle in t["category"].lower())
    ]
