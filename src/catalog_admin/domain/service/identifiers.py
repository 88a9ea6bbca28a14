"""Identifier and timestamp sources for new entities."""

from __future__ import annotations

from collections.abc import Callable, Container
from datetime import datetime, timezone
from uuid import uuid4


def generate_id() -> str:
    """Return a random 12-hex-digit id.

    48 random bits: collisions are negligible at catalog scale, and
    callers that need strict uniqueness use ``unique_id``.
    """
    return uuid4().hex[:12]


def unique_id(taken: Container[str], id_generator: Callable[[], str] = generate_id) -> str:
    """Draw ids from *id_generator* until one is not in *taken*."""
    new_id = id_generator()
    while new_id in taken:
        new_id = id_generator()
    return new_id


def utc_now() -> str:
    """Current UTC time as ``2026-10-17T09:30:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
