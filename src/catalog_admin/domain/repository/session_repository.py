"""Abstract repository for the current admin identity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_admin.domain.model.identity import AdminUser


class SessionRepository(ABC):

    @abstractmethod
    def current(self) -> AdminUser | None:
        """Return the logged-in admin, or None."""

    @abstractmethod
    def save(self, user: AdminUser) -> None:
        """Record *user* as the logged-in admin."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the logged-in admin, if any."""
