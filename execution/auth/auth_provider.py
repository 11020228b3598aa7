"""
execution/auth/auth_provider.py

Auth Provider: owns the current user identity (or its absence).

Authentication is mocked: login builds a user from the email alone and never
checks the password. The "email contains admin" rule is a stand-in for a
real authorization check and must not be read as security logic.

Every mutation is written to the persisted state store before returning.
"""

import logging
from datetime import datetime, timezone

from execution.store import state_store

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Tiers
# ---------------------------------------------------------------------------
TIER_FREE = "FREE"
TIER_PAID = "PAID"
TIER_ADMIN = "ADMIN"
VALID_TIERS: frozenset[str] = frozenset({TIER_FREE, TIER_PAID, TIER_ADMIN})

DEFAULT_COUNTRY = "United Kingdom"

# Fixed identity handed out by the mocked login.
_MOCK_LOGIN_ID = "u1"
_MOCK_LOGIN_NAME = "John Dealer"
_MOCK_LOGIN_DEALERSHIP = "Premier Motors"

_SIGNUP_DEFAULT_NAME = "User"
_SIGNUP_DEFAULT_DEALERSHIP = "Independent Dealer"

_USER_FIELDS: tuple[str, ...] = (
    "id", "email", "name", "dealershipName", "country", "tier", "createdAt",
)


class AuthenticationError(Exception):
    """Raised when the (mocked) authentication call rejects the request."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _is_valid_user(value: object) -> bool:
    """Return True if *value* looks like a complete persisted user record."""
    if not isinstance(value, dict):
        return False
    if any(not isinstance(value.get(field), str) for field in _USER_FIELDS):
        return False
    return value["tier"] in VALID_TIERS


class AuthProvider:
    """Current-user state machine: Anonymous (None) or Authenticated (dict).

    Construct once per session and pass it to whatever needs it. The
    persisted user snapshot is read on construction; a missing or malformed
    snapshot leaves the provider Anonymous.

    Args:
        db_path: Path to the SQLite file; defaults to tmp/app.db.
    """

    def __init__(self, db_path: str | None = None) -> None:
        self.db_path = db_path
        saved = state_store.load(state_store.USER_KEY, db_path=db_path)
        if saved is not None and not _is_valid_user(saved):
            logger.warning("Ignoring malformed user snapshot")
            saved = None
        self.current_user: dict | None = saved

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def tier(self) -> str | None:
        """Tier of the current user, or None when Anonymous."""
        if self.current_user is None:
            return None
        return self.current_user["tier"]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def login(self, email: str, password: str, now: datetime | None = None) -> dict:
        """Sign in with a mocked identity derived from *email*.

        The password is accepted as-is. The tier is ADMIN when the email
        contains "admin", FREE otherwise.

        Args:
            email:    Email address typed into the login form.
            password: Ignored by the mock.
            now:      Creation timestamp override; defaults to current UTC.

        Returns:
            The new current user dict.

        Raises:
            AuthenticationError: If email is blank.
        """
        email = (email or "").strip()
        if not email:
            raise AuthenticationError("Email is required.")

        created_at = now if now is not None else _utc_now()
        user = {
            "id": _MOCK_LOGIN_ID,
            "email": email,
            "name": _MOCK_LOGIN_NAME,
            "dealershipName": _MOCK_LOGIN_DEALERSHIP,
            "country": DEFAULT_COUNTRY,
            "tier": TIER_ADMIN if "admin" in email else TIER_FREE,
            "createdAt": created_at.isoformat(),
        }
        self._set_user(user)
        logger.info("User %s logged in with tier %s", email, user["tier"])
        return user

    def signup(self, data: dict, now: datetime | None = None) -> dict:
        """Register a new FREE-tier member from partial form data.

        Missing or blank fields fall back to defaults: name "User",
        dealershipName "Independent Dealer", country "United Kingdom".

        Args:
            data: Partial user fields (email, name, dealershipName, country).
            now:  Creation timestamp override; defaults to current UTC.

        Returns:
            The new current user dict.

        Raises:
            AuthenticationError: If no email is supplied.
        """
        email = (data.get("email") or "").strip()
        if not email:
            raise AuthenticationError("Email is required.")

        created_at = now if now is not None else _utc_now()
        user = {
            "id": f"u{int(created_at.timestamp() * 1000)}",
            "email": email,
            "name": (data.get("name") or "").strip() or _SIGNUP_DEFAULT_NAME,
            "dealershipName": (
                (data.get("dealershipName") or "").strip() or _SIGNUP_DEFAULT_DEALERSHIP
            ),
            "country": (data.get("country") or "").strip() or DEFAULT_COUNTRY,
            "tier": TIER_FREE,
            "createdAt": created_at.isoformat(),
        }
        self._set_user(user)
        logger.info("User %s signed up", email)
        return user

    def logout(self) -> None:
        """Clear the current user."""
        if self.current_user is not None:
            logger.info("User %s logged out", self.current_user["email"])
        self._set_user(None)

    def update_tier(self, tier: str) -> None:
        """Replace the tier of the current user. No-op when Anonymous.

        Raises:
            ValueError: If tier is not FREE, PAID or ADMIN.
        """
        if tier not in VALID_TIERS:
            raise ValueError(f"Invalid tier: {tier!r}")
        if self.current_user is None:
            return
        self._set_user({**self.current_user, "tier": tier})

    def _set_user(self, user: dict | None) -> None:
        self.current_user = user
        state_store.save(state_store.USER_KEY, user, db_path=self.db_path)

