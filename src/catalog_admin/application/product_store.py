"""Application service: the Product Store.

Holds the authoritative in-memory product collection, loaded once from
the snapshot repository. Every mutation builds the new collection,
persists it as a complete snapshot, and only then replaces the in-memory
list, so memory and storage agree whenever a call returns (or raises).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from catalog_admin.domain.exceptions import ValidationError
from catalog_admin.domain.model.product import Product, ProductVariant
from catalog_admin.domain.repository.product_repository import (
    ProductSnapshotRepository,
)
from catalog_admin.domain.service.identifiers import generate_id, unique_id, utc_now

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {
        "name",
        "brand",
        "category",
        "description",
        "disclaimer",
        "variants",
        "images",
        "published",
    }
)
# Accepted in input but never written by add/update.
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class ProductStore:

    def __init__(
        self,
        product_repo: ProductSnapshotRepository,
        id_generator: Callable[[], str] = generate_id,
        clock: Callable[[], str] = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._id_generator = id_generator
        self._clock = clock
        self._products: list[Product] = list(product_repo.load())

    # --- Queries --------------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        """All products in insertion order."""
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    # --- Mutations ------------------------------------------------------------

    def add(self, data: Mapping[str, Any] | None = None) -> Product:
        """Create a product from *data*, filling id, timestamps and defaults.

        Omitted fields (or fields given as None) get their defaults:
        empty strings, empty variant and image lists, ``published=True``.
        """
        fields = self._editable_fields(data or {})
        now = self._clock()
        published = fields.get("published")

        product = Product(
            id=unique_id({p.id for p in self._products}, self._id_generator),
            name=fields.get("name") or "",
            brand=fields.get("brand") or "",
            category=fields.get("category") or "",
            description=fields.get("description") or "",
            disclaimer=fields.get("disclaimer") or "",
            variants=list(fields.get("variants") or []),
            images=list(fields.get("images") or []),
            published=True if published is None else bool(published),
            created_at=now,
            updated_at=now,
        )

        self._commit([*self._products, product])
        logger.info("Added product %s (%s)", product.id, product.name)
        return product

    def update(self, product_id: str, data: Mapping[str, Any]) -> None:
        """Shallow-merge *data* into the product and refresh ``updated_at``.

        An unknown *product_id* is a silent no-op: nothing is persisted.
        """
        fields = self._editable_fields(data)
        for i, existing in enumerate(self._products):
            if existing.id == product_id:
                break
        else:
            logger.debug("Update skipped, no product %s", product_id)
            return

        for key in ("variants", "images"):
            if key in fields:
                fields[key] = list(fields[key])
        if "published" in fields:
            fields["published"] = bool(fields["published"])

        # A clock that steps backwards must not break updated_at >= created_at.
        updated_at = max(self._clock(), existing.created_at)
        updated = replace(existing, **fields, updated_at=updated_at)

        products = list(self._products)
        products[i] = updated
        self._commit(products)
        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(fields)))

    def delete(self, product_id: str) -> None:
        """Remove the product if present, then persist the snapshot."""
        products = [p for p in self._products if p.id != product_id]
        removed = len(products) < len(self._products)
        self._commit(products)
        if removed:
            logger.info("Deleted product %s", product_id)

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, products: list[Product]) -> None:
        self._product_repo.save(products)
        self._products = products

    @staticmethod
    def _editable_fields(data: Mapping[str, Any]) -> dict[str, Any]:
        unknown = set(data) - EDITABLE_FIELDS - PROTECTED_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown product field(s): {', '.join(sorted(unknown))}"
            )
        fields = {
            key: value
            for key, value in data.items()
            if key in EDITABLE_FIELDS and value is not None
        }
        if "variants" in fields:
            ProductStore._check_variants(fields["variants"])
        return fields

    @staticmethod
    def _check_variants(variants: Any) -> None:
        """Variants must be ProductVariant instances with distinct ids."""
        seen: set[str] = set()
        for variant in variants:
            if not isinstance(variant, ProductVariant):
                raise ValidationError(
                    f"Variants must be ProductVariant, got {type(variant).__name__}"
                )
            if variant.id in seen:
                raise ValidationError(f"Duplicate variant id '{variant.id}'")
            seen.add(variant.id)
