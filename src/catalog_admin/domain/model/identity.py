"""The logged-in admin identity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminUser:
    email: str
