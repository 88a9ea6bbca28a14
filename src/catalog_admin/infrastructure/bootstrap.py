"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The product store is
built once per process and passed explicitly to whoever needs it.
"""

from __future__ import annotations

from functools import lru_cache

from catalog_admin.application.auth import AuthHandler
from catalog_admin.application.product_store import ProductStore
from catalog_admin.infrastructure.ai.gemini_text_generator import GeminiTextGenerator
from catalog_admin.infrastructure.config import get_settings
from catalog_admin.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog_admin.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)


def product_repository() -> JsonProductRepository:
    settings = get_settings()
    return JsonProductRepository(settings.data_dir / settings.products_file)


def session_repository() -> JsonSessionRepository:
    settings = get_settings()
    return JsonSessionRepository(settings.data_dir / settings.session_file)


@lru_cache
def product_store() -> ProductStore:
    return ProductStore(product_repo=product_repository())


def auth_handler() -> AuthHandler:
    return AuthHandler(session_repo=session_repository())


def text_generator() -> GeminiTextGenerator:
    settings = get_settings()
    return GeminiTextGenerator(
        api_key=settings.gemini_api_key,
        api_url=settings.gemini_api_url,
        timeout=settings.ai_timeout_seconds,
    )
