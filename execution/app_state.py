"""
execution/app_state.py

Explicit per-session context bundling the Auth and Course providers.

Built once when a session starts (rehydrating both providers from the
persisted store) and handed to every page. Logging out goes through here
so the user and their progress are cleared together.
"""

from dataclasses import dataclass

from execution.auth.auth_provider import AuthProvider
from execution.course.course_provider import CourseProvider


@dataclass
class AppState:
    """The two independently persisted pieces of academy state."""

    auth: AuthProvider
    course: CourseProvider

    @classmethod
    def load(cls, db_path: str | None = None) -> "AppState":
        """Rebuild both providers from the store at *db_path*."""
        return cls(
            auth=AuthProvider(db_path=db_path),
            course=CourseProvider(db_path=db_path),
        )

    @property
    def user(self) -> dict | None:
        return self.auth.current_user

    def logout(self) -> None:
        """Clear the current user, then reset their progress."""
        self.auth.logout()
        self.course.reset_progress()
