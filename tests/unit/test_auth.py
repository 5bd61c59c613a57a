"""Unit tests for password hashing and the session store."""

from app.auth.security import hash_password, verify_password
from app.auth.session import SessionStore


class TestPasswords:
    def test_hash_is_salted(self):
        first = hash_password("hunter22")
        second = hash_password("hunter22")

        assert first != second
        assert first != "hunter22"

    def test_verify(self):
        hashed = hash_password("hunter22")

        assert verify_password("hunter22", hashed)
        assert not verify_password("hunter23", hashed)


class TestSessionStore:
    def test_empty_session_is_logged_out(self):
        store = SessionStore({})

        assert store.user_id is None
        assert not store.is_logged_in

    def test_login_sets_user(self):
        session = {}
        store = SessionStore(session)

        store.login("user-1")

        assert store.user_id == "user-1"
        assert session == {"is_logged_in": True, "user_id": "user-1"}

    def test_user_id_requires_logged_in_flag(self):
        store = SessionStore({"user_id": "user-1"})

        assert store.user_id is None

    def test_logout_clears_session(self):
        session = {"is_logged_in": True, "user_id": "user-1", "other": "value"}
        store = SessionStore(session)

        store.logout()

        assert session == {}
        assert not store.is_logged_in
