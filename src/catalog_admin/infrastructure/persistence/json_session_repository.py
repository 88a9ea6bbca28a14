"""JSON-file-backed implementation of SessionRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from catalog_admin.domain.exceptions import StorageError
from catalog_admin.domain.model.identity import AdminUser
from catalog_admin.domain.repository.session_repository import SessionRepository
from catalog_admin.infrastructure.persistence.json_file import dump_json, write_atomic

logger = logging.getLogger(__name__)


class JsonSessionRepository(SessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def current(self) -> AdminUser | None:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable session %s: %s", self._file_path, exc)
            return None
        if not isinstance(raw, dict) or not raw.get("email"):
            return None
        return AdminUser(email=raw["email"])

    def save(self, user: AdminUser) -> None:
        write_atomic(self._file_path, dump_json({"email": user.email}))

    def clear(self) -> None:
        try:
            self._file_path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not remove {self._file_path}: {exc.strerror or exc}") from exc
