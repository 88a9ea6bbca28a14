"""Application service: admin login placeholder.

This is NOT authentication. Any email with a password of at least
``MIN_PASSWORD_LENGTH`` characters is accepted and remembered as the
current admin; no credential is stored or checked. It exists only to
gate the catalog commands behind an explicit identity.
"""

from __future__ import annotations

import logging

from catalog_admin.domain.exceptions import AuthenticationError, ValidationError
from catalog_admin.domain.model.identity import AdminUser
from catalog_admin.domain.repository.session_repository import SessionRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def login(self, email: str, password: str) -> AdminUser:
        return self._start_session(email, password)

    def signup(self, email: str, password: str) -> AdminUser:
        # Same placeholder gate as login: there is no account store.
        return self._start_session(email, password)

    def logout(self) -> None:
        self._session_repo.clear()

    def current_user(self) -> AdminUser | None:
        return self._session_repo.current()

    def require_user(self) -> AdminUser:
        user = self._session_repo.current()
        if user is None:
            raise AuthenticationError("Please log in first")
        return user

    def _start_session(self, email: str, password: str) -> AdminUser:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Please fill in all fields")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        user = AdminUser(email=email)
        self._session_repo.save(user)
        logger.info("Admin session started for %s", email)
        return user
