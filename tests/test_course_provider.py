"""
tests/test_course_provider.py

Unit tests for execution/course/course_provider.py.

Covers:
    - default catalog comes from the course fixtures
    - toggle adds then removes; double toggle restores the original set
    - unknown lesson ids raise ValueError and change nothing
    - last accessed lesson, reset, completion percentage
    - update_modules replaces and persists the catalog; invalid catalogs rejected
    - providers rebuilt from the store see the same catalog and progress
    - malformed snapshots fall back to defaults
    - progress for lessons missing from the catalog is discarded

Uses an isolated database (tmp/test_course_provider.db).
"""

import os
import sys
import unittest
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap: repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.course.course_provider import CourseProvider  # noqa: E402
from execution.store import state_store                       # noqa: E402

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_course_provider.db")


def _lesson(lesson_id: str) -> dict:
    return {
        "id": lesson_id,
        "title": f"Lesson {lesson_id}",
        "slug": f"slug-{lesson_id}",
        "content": "Body text.",
        "isFree": False,
        "actionSteps": ["Do the thing"],
    }


SMALL_CATALOG = [
    {"id": "m1", "title": "One", "description": "First", "lessons": [_lesson("l1"), _lesson("l2")]},
    {"id": "m2", "title": "Two", "description": "Second", "lessons": [_lesson("l3")]},
    {"id": "m3", "title": "Three", "description": "Third", "lessons": [_lesson("l4")]},
]


class TestCourseProviderBase(unittest.TestCase):

    def setUp(self):
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)
        self.course = CourseProvider(db_path=TEST_DB_PATH, default_modules=SMALL_CATALOG)

    def tearDown(self):
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)


class TestDefaults(TestCourseProviderBase):

    def test_fixture_catalog_is_default(self):
        course = CourseProvider(db_path=TEST_DB_PATH)
        self.assertEqual(len(course.modules), 10)
        self.assertEqual(course.modules[0]["id"], "m1")
        self.assertEqual(course.progress, {"completedLessonIds": []})

    def test_default_modules_are_copied(self):
        self.course.modules[0]["title"] = "Changed"
        self.assertEqual(SMALL_CATALOG[0]["title"], "One")


class TestToggleLessonComplete(TestCourseProviderBase):

    def test_toggle_adds_then_removes(self):
        self.assertTrue(self.course.toggle_lesson_complete("l1"))
        self.assertEqual(self.course.progress["completedLessonIds"], ["l1"])

        self.assertFalse(self.course.toggle_lesson_complete("l1"))
        self.assertEqual(self.course.progress["completedLessonIds"], [])

    def test_double_toggle_restores_original_set(self):
        self.course.toggle_lesson_complete("l2")
        self.course.toggle_lesson_complete("l4")
        before = set(self.course.progress["completedLessonIds"])

        for lesson_id in ("l1", "l2", "l3"):
            with self.subTest(lesson_id=lesson_id):
                self.course.toggle_lesson_complete(lesson_id)
                self.course.toggle_lesson_complete(lesson_id)
                self.assertEqual(set(self.course.progress["completedLessonIds"]), before)

    def test_unknown_lesson_raises_and_changes_nothing(self):
        self.course.toggle_lesson_complete("l1")

        with self.assertRaises(ValueError) as ctx:
            self.course.toggle_lesson_complete("nope")

        self.assertIn("nope", str(ctx.exception))
        self.assertEqual(self.course.progress["completedLessonIds"], ["l1"])

    def test_toggle_keeps_last_accessed(self):
        self.course.set_last_accessed("l3")
        self.course.toggle_lesson_complete("l1")
        self.assertEqual(self.course.progress["lastAccessedLessonId"], "l3")


class TestProgressHelpers(TestCourseProviderBase):

    def test_set_last_accessed_validates_lesson(self):
        with self.assertRaises(ValueError):
            self.course.set_last_accessed("missing")
        self.assertNotIn("lastAccessedLessonId", self.course.progress)

    def test_reset_progress_clears_everything(self):
        self.course.toggle_lesson_complete("l1")
        self.course.set_last_accessed("l1")

        self.course.reset_progress()

        self.assertEqual(self.course.progress, {"completedLessonIds": []})

    def test_completion_pct(self):
        self.assertEqual(self.course.completion_pct(), 0.0)
        self.course.toggle_lesson_complete("l1")
        self.assertAlmostEqual(self.course.completion_pct(), 25.0)
        for lesson_id in ("l2", "l3", "l4"):
            self.course.toggle_lesson_complete(lesson_id)
        self.assertAlmostEqual(self.course.completion_pct(), 100.0)

    def test_completion_pct_empty_catalog(self):
        self.course.update_modules([])
        self.assertEqual(self.course.completion_pct(), 0.0)

    def test_find_lesson(self):
        self.assertEqual(self.course.find_lesson("l3")["title"], "Lesson l3")
        self.assertIsNone(self.course.find_lesson("missing"))


class TestUpdateModules(TestCourseProviderBase):

    def test_update_modules_replaces_catalog(self):
        new_catalog = [SMALL_CATALOG[2]]
        self.course.update_modules(new_catalog)

        self.assertEqual([m["id"] for m in self.course.modules], ["m3"])
        with self.assertRaises(ValueError):
            self.course.toggle_lesson_complete("l1")

    def test_update_modules_rejects_duplicate_lesson_ids(self):
        broken = [
            {"id": "a", "title": "A", "description": "d", "lessons": [_lesson("x")]},
            {"id": "b", "title": "B", "description": "d", "lessons": [_lesson("x")]},
        ]
        with self.assertRaises(ValueError):
            self.course.update_modules(broken)
        self.assertEqual(len(self.course.modules), 3)

    def test_update_modules_drops_progress_for_removed_lessons(self):
        """Completed and last accessed ids outside the new catalog are discarded."""
        self.course.toggle_lesson_complete("l4")
        self.course.set_last_accessed("l4")

        self.course.update_modules(SMALL_CATALOG[:2])

        self.assertEqual(self.course.progress, {"completedLessonIds": []})
        reloaded = CourseProvider(db_path=TEST_DB_PATH, default_modules=SMALL_CATALOG)
        self.assertEqual(reloaded.progress, {"completedLessonIds": []})

    def test_update_modules_keeps_progress_for_surviving_lessons(self):
        self.course.toggle_lesson_complete("l1")
        self.course.toggle_lesson_complete("l4")
        self.course.set_last_accessed("l1")

        self.course.update_modules(SMALL_CATALOG[:2])

        self.assertEqual(self.course.progress, {
            "completedLessonIds": ["l1"],
            "lastAccessedLessonId": "l1",
        })
        self.assertAlmostEqual(self.course.completion_pct(), 100.0 / 3)

    def test_update_modules_rejects_non_list(self):
        with self.assertRaises(ValueError):
            self.course.update_modules({"modules": []})


class TestPersistence(TestCourseProviderBase):

    def test_progress_survives_reconstruction(self):
        self.course.toggle_lesson_complete("l1")
        self.course.toggle_lesson_complete("l3")
        self.course.set_last_accessed("l3")

        reloaded = CourseProvider(db_path=TEST_DB_PATH, default_modules=SMALL_CATALOG)

        self.assertEqual(reloaded.progress, {
            "completedLessonIds": ["l1", "l3"],
            "lastAccessedLessonId": "l3",
        })

    def test_updated_catalog_survives_reconstruction(self):
        self.course.update_modules(SMALL_CATALOG[:1])

        reloaded = CourseProvider(db_path=TEST_DB_PATH, default_modules=SMALL_CATALOG)

        self.assertEqual([m["id"] for m in reloaded.modules], ["m1"])

    def test_malformed_snapshots_fall_back_to_defaults(self):
        state_store.save(state_store.MODULES_KEY, [{"id": 7}], db_path=TEST_DB_PATH)
        state_store.save(
            state_store.PROGRESS_KEY, {"completedLessonIds": "l1"}, db_path=TEST_DB_PATH
        )

        reloaded = CourseProvider(db_path=TEST_DB_PATH, default_modules=SMALL_CATALOG)

        self.assertEqual([m["id"] for m in reloaded.modules], ["m1", "m2", "m3"])
        self.assertEqual(reloaded.progress, {"completedLessonIds": []})

    def test_duplicate_stored_ids_collapse(self):
        state_store.save(
            state_store.PROGRESS_KEY,
            {"completedLessonIds": ["l1", "l2", "l1"]},
            db_path=TEST_DB_PATH,
        )
        reloaded = CourseProvider(db_path=TEST_DB_PATH, default_modules=SMALL_CATALOG)
        self.assertEqual(reloaded.progress["completedLessonIds"], ["l1", "l2"])

    def test_stored_ids_outside_catalog_are_dropped_on_load(self):
        state_store.save(
            state_store.PROGRESS_KEY,
            {"completedLessonIds": ["l1", "gone"], "lastAccessedLessonId": "gone"},
            db_path=TEST_DB_PATH,
        )
        reloaded = CourseProvider(db_path=TEST_DB_PATH, default_modules=SMALL_CATALOG)
        self.assertEqual(reloaded.progress, {"completedLessonIds": ["l1"]})


if __name__ == "__main__":
    unittest.main()
