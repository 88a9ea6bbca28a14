"""Tests for the admin login placeholder."""

import pytest

from catalog_admin.application.auth import AuthHandler
from catalog_admin.domain.exceptions import AuthenticationError, ValidationError
from catalog_admin.domain.model.identity import AdminUser
from tests.fakes import FakeSessionRepository


class TestLogin:

    def test_any_email_with_long_password_accepted(self):
        handler = AuthHandler(FakeSessionRepository())
        user = handler.login("admin@example.com", "secret1")
        assert user == AdminUser("admin@example.com")
        assert handler.current_user() == user

    def test_short_password_rejected(self):
        handler = AuthHandler(FakeSessionRepository())
        with pytest.raises(ValidationError, match="at least 6 characters"):
            handler.login("admin@example.com", "12345")
        assert handler.current_user() is None

    def test_missing_email_rejected(self):
        handler = AuthHandler(FakeSessionRepository())
        with pytest.raises(ValidationError, match="fill in all fields"):
            handler.login("  ", "secret1")

    def test_signup_behaves_like_login(self):
        handler = AuthHandler(FakeSessionRepository())
        assert handler.signup("new@example.com", "secret1").email == "new@example.com"


class TestSession:

    def test_logout_clears_user(self):
        handler = AuthHandler(FakeSessionRepository(AdminUser("a@example.com")))
        handler.logout()
        assert handler.current_user() is None

    def test_require_user_when_logged_out(self):
        handler = AuthHandler(FakeSessionRepository())
        with pytest.raises(AuthenticationError, match="log in first"):
            handler.require_user()

    def test_require_user_returns_identity(self):
        user = AdminUser("a@example.com")
        handler = AuthHandler(FakeSessionRepository(user))
        assert handler.require_user() == user
