"""
execution/course/course_provider.py

Course Provider: owns the module catalog and the member's lesson progress.

The catalog is rehydrated from the persisted store when a valid snapshot
exists, otherwise it comes from the course fixtures. Progress starts empty.
Both are written back to the store on every change.
"""

import copy
import logging

from execution.course.course_registry import COURSE_ID, is_valid_lesson_id, lesson_ids
from execution.course.load_academy_content import load_academy_content, validate_modules
from execution.store import state_store

logger = logging.getLogger(__name__)


def empty_progress() -> dict:
    """Return a fresh progress record with nothing completed."""
    return {"completedLessonIds": []}


def _prune_progress(progress: dict, modules: list[dict]) -> dict:
    """Return *progress* restricted to lessons present in *modules*.

    Duplicate completed ids collapse to their first occurrence, and a last
    accessed lesson that is no longer in the catalog is dropped.
    """
    known = lesson_ids(modules)
    pruned = {
        "completedLessonIds": [
            i for i in dict.fromkeys(progress["completedLessonIds"]) if i in known
        ],
    }
    last = progress.get("lastAccessedLessonId")
    if last in known:
        pruned["lastAccessedLessonId"] = last
    return pruned


def _is_valid_progress(value: object) -> bool:
    if not isinstance(value, dict):
        return False
    completed = value.get("completedLessonIds")
    if not isinstance(completed, list) or not all(isinstance(i, str) for i in completed):
        return False
    last = value.get("lastAccessedLessonId")
    return last is None or isinstance(last, str)


class CourseProvider:
    """Module catalog plus the set of completed lesson ids.

    Args:
        db_path:         Path to the SQLite file; defaults to tmp/app.db.
        default_modules: Catalog used when no valid snapshot is stored.
                         Defaults to the course fixture catalog.
    """

    def __init__(
        self,
        db_path: str | None = None,
        default_modules: list[dict] | None = None,
    ) -> None:
        self.db_path = db_path
        self.modules = self._load_modules(default_modules)
        self.progress = self._load_progress()

    def _load_modules(self, default_modules: list[dict] | None) -> list[dict]:
        saved = state_store.load(state_store.MODULES_KEY, db_path=self.db_path)
        if saved is not None:
            try:
                return validate_modules(saved, "stored")
            except ValueError:
                logger.warning("Ignoring malformed module snapshot", exc_info=True)

        if default_modules is None:
            default_modules = load_academy_content(COURSE_ID)["modules"]
        return copy.deepcopy(default_modules)

    def _load_progress(self) -> dict:
        saved = state_store.load(state_store.PROGRESS_KEY, db_path=self.db_path)
        if saved is None:
            return empty_progress()
        if not _is_valid_progress(saved):
            logger.warning("Ignoring malformed progress snapshot")
            return empty_progress()
        return _prune_progress(saved, self.modules)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_lesson(self, lesson_id: str) -> dict | None:
        """Return the lesson dict with *lesson_id*, or None."""
        for module in self.modules:
            for lesson in module.get("lessons", []):
                if lesson["id"] == lesson_id:
                    return lesson
        return None

    def is_lesson_complete(self, lesson_id: str) -> bool:
        return lesson_id in self.progress["completedLessonIds"]

    def completion_pct(self) -> float:
        """Percentage of catalog lessons marked complete (0.0 for an empty catalog)."""
        total = sum(len(module.get("lessons", [])) for module in self.modules)
        if total == 0:
            return 0.0
        done = sum(
            1
            for module in self.modules
            for lesson in module.get("lessons", [])
            if self.is_lesson_complete(lesson["id"])
        )
        return (done / total) * 100.0

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def toggle_lesson_complete(self, lesson_id: str) -> bool:
        """Flip completion of *lesson_id* and return the new state.

        Raises:
            ValueError: If lesson_id is not a lesson in the current catalog.
        """
        if not is_valid_lesson_id(lesson_id, self.modules):
            raise ValueError(f"Invalid lesson_id: {lesson_id!r}")

        completed = self.progress["completedLessonIds"]
        if lesson_id in completed:
            completed = [i for i in completed if i != lesson_id]
            is_done = False
        else:
            completed = [*completed, lesson_id]
            is_done = True

        self._set_progress({**self.progress, "completedLessonIds": completed})
        return is_done

    def set_last_accessed(self, lesson_id: str) -> None:
        """Record *lesson_id* as the most recently opened lesson.

        Raises:
            ValueError: If lesson_id is not a lesson in the current catalog.
        """
        if not is_valid_lesson_id(lesson_id, self.modules):
            raise ValueError(f"Invalid lesson_id: {lesson_id!r}")
        self._set_progress({**self.progress, "lastAccessedLessonId": lesson_id})

    def reset_progress(self) -> None:
        """Forget every completed lesson and the last accessed lesson."""
        self._set_progress(empty_progress())

    def update_modules(self, new_modules: list[dict]) -> None:
        """Replace the whole catalog.

        Progress for lessons that are not in the new catalog is discarded.

        Raises:
            ValueError: If new_modules fails catalog validation.
        """
        validate_modules(new_modules, "update")
        self.modules = copy.deepcopy(new_modules)
        state_store.save(state_store.MODULES_KEY, self.modules, db_path=self.db_path)
        logger.info("Module catalog replaced (%d modules)", len(self.modules))

        pruned = _prune_progress(self.progress, self.modules)
        if pruned != self.progress:
            self._set_progress(pruned)

    def _set_progress(self, progress: dict) -> None:
        self.progress = progress
        state_store.save(state_store.PROGRESS_KEY, progress, db_path=self.db_path)
