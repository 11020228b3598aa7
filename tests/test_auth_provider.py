"""
tests/test_auth_provider.py

Unit tests for execution/auth/auth_provider.py.

Covers:
    - login tier rule (email containing "admin" -> ADMIN, otherwise FREE)
    - login ignores the password
    - signup defaults and FREE tier
    - blank email raises AuthenticationError and leaves state untouched
    - update_tier changes only the tier; no-op when Anonymous; invalid tiers rejected
    - logout clears the user
    - persistence: a new provider on the same store sees the same user
    - malformed snapshots load as Anonymous

Uses an isolated database (tmp/test_auth_provider.db).
All fixture data uses deterministic, hard-coded values.
"""

import os
import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap: repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.auth.auth_provider import (  # noqa: E402
    AuthenticationError,
    AuthProvider,
    TIER_ADMIN,
    TIER_FREE,
    TIER_PAID,
)
from execution.store import state_store      # noqa: E402

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_auth_provider.db")
NOW = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


class TestAuthProviderBase(unittest.TestCase):

    def setUp(self):
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)
        self.auth = AuthProvider(db_path=TEST_DB_PATH)

    def tearDown(self):
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)


class TestLogin(TestAuthProviderBase):

    def test_fresh_store_is_anonymous(self):
        self.assertIsNone(self.auth.current_user)
        self.assertFalse(self.auth.is_authenticated)
        self.assertIsNone(self.auth.tier)

    def test_admin_emails_get_admin_tier(self):
        for email in ("admin@dealer.co.uk", "siteadmin@x.com", "me@admin.org", "admin"):
            with self.subTest(email=email):
                user = self.auth.login(email, "irrelevant")
                self.assertEqual(user["tier"], TIER_ADMIN)

    def test_other_emails_get_free_tier(self):
        for email in ("dealer@motors.co.uk", "ADMIN@caps.com", "adm.in@x.com"):
            with self.subTest(email=email):
                user = self.auth.login(email, "irrelevant")
                self.assertEqual(user["tier"], TIER_FREE)

    def test_login_builds_mock_identity_from_email(self):
        user = self.auth.login("dealer@motors.co.uk", "pw", now=NOW)

        self.assertEqual(user, {
            "id": "u1",
            "email": "dealer@motors.co.uk",
            "name": "John Dealer",
            "dealershipName": "Premier Motors",
            "country": "United Kingdom",
            "tier": TIER_FREE,
            "createdAt": NOW.isoformat(),
        })
        self.assertIs(self.auth.current_user, user)
        self.assertTrue(self.auth.is_authenticated)

    def test_password_is_not_checked(self):
        first = self.auth.login("dealer@motors.co.uk", "", now=NOW)
        second = self.auth.login("dealer@motors.co.uk", "anything else", now=NOW)
        self.assertEqual(first, second)

    def test_blank_email_raises_and_keeps_state(self):
        self.auth.login("dealer@motors.co.uk", "pw")
        before = dict(self.auth.current_user)

        with self.assertRaises(AuthenticationError):
            self.auth.login("   ", "pw")

        self.assertEqual(self.auth.current_user, before)


class TestSignup(TestAuthProviderBase):

    def test_signup_uses_supplied_fields(self):
        user = self.auth.signup(
            {"email": "a@b.com", "name": "A B", "dealershipName": "X"}, now=NOW
        )

        self.assertEqual(user["email"], "a@b.com")
        self.assertEqual(user["name"], "A B")
        self.assertEqual(user["dealershipName"], "X")
        self.assertEqual(user["country"], "United Kingdom")
        self.assertEqual(user["tier"], TIER_FREE)
        self.assertEqual(user["createdAt"], NOW.isoformat())
        self.assertEqual(user["id"], f"u{int(NOW.timestamp() * 1000)}")

    def test_signup_defaults_for_missing_fields(self):
        user = self.auth.signup({"email": "a@b.com", "name": "", "dealershipName": None})

        self.assertEqual(user["name"], "User")
        self.assertEqual(user["dealershipName"], "Independent Dealer")

    def test_signup_is_always_free_even_for_admin_email(self):
        user = self.auth.signup({"email": "admin@b.com", "tier": TIER_ADMIN})
        self.assertEqual(user["tier"], TIER_FREE)

    def test_signup_without_email_raises(self):
        with self.assertRaises(AuthenticationError):
            self.auth.signup({"name": "No Email"})
        self.assertIsNone(self.auth.current_user)


class TestUpdateTierAndLogout(TestAuthProviderBase):

    def test_update_tier_changes_only_tier(self):
        self.auth.signup({"email": "a@b.com", "name": "A B", "dealershipName": "X"}, now=NOW)
        before = dict(self.auth.current_user)

        self.auth.update_tier(TIER_PAID)

        after = self.auth.current_user
        self.assertEqual(after["tier"], TIER_PAID)
        self.assertEqual(
            {k: v for k, v in after.items() if k != "tier"},
            {k: v for k, v in before.items() if k != "tier"},
        )

    def test_update_tier_when_anonymous_is_noop(self):
        self.auth.update_tier(TIER_PAID)
        self.assertIsNone(self.auth.current_user)
        self.assertIsNone(state_store.load(state_store.USER_KEY, db_path=TEST_DB_PATH))

    def test_update_tier_rejects_unknown_tier(self):
        self.auth.login("dealer@motors.co.uk", "pw")
        with self.assertRaises(ValueError):
            self.auth.update_tier("GOLD")
        self.assertEqual(self.auth.tier, TIER_FREE)

    def test_logout_clears_user(self):
        self.auth.login("dealer@motors.co.uk", "pw")
        self.auth.logout()

        self.assertIsNone(self.auth.current_user)
        self.assertIsNone(state_store.load(state_store.USER_KEY, db_path=TEST_DB_PATH))

    def test_logout_when_anonymous_is_safe(self):
        self.auth.logout()
        self.assertIsNone(self.auth.current_user)


class TestPersistence(TestAuthProviderBase):

    def test_signup_survives_reconstruction(self):
        user = self.auth.signup({"email": "a@b.com", "name": "A B", "dealershipName": "X"})

        reloaded = AuthProvider(db_path=TEST_DB_PATH)

        self.assertTrue(reloaded.is_authenticated)
        self.assertEqual(reloaded.current_user, user)

    def test_tier_update_survives_reconstruction(self):
        self.auth.login("dealer@motors.co.uk", "pw")
        self.auth.update_tier(TIER_PAID)

        self.assertEqual(AuthProvider(db_path=TEST_DB_PATH).tier, TIER_PAID)

    def test_logout_survives_reconstruction(self):
        self.auth.login("dealer@motors.co.uk", "pw")
        self.auth.logout()

        self.assertFalse(AuthProvider(db_path=TEST_DB_PATH).is_authenticated)

    def test_malformed_snapshot_loads_as_anonymous(self):
        for snapshot in ("not a dict", {"id": "u1"}, {
            "id": "u1", "email": "e", "name": "n", "dealershipName": "d",
            "country": "c", "tier": "GOLD", "createdAt": "t",
        }):
            with self.subTest(snapshot=snapshot):
                state_store.save(state_store.USER_KEY, snapshot, db_path=TEST_DB_PATH)
                self.assertIsNone(AuthProvider(db_path=TEST_DB_PATH).current_user)


if __name__ == "__main__":
    unittest.main()
