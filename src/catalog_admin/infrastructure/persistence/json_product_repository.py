"""JSON-file-backed implementation of ProductSnapshotRepository.

The file holds one JSON array of products using the camelCase keys of
the catalog's storage format (``createdAt``, ``updatedAt``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from catalog_admin.domain.model.product import Product, ProductVariant
from catalog_admin.domain.repository.product_repository import (
    ProductSnapshotRepository,
)
from catalog_admin.infrastructure.persistence.json_file import dump_json, write_atomic

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductSnapshotRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductSnapshotRepository interface ----------------------------------

    def load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable catalog %s: %s", self._file_path, exc)
            return []

        if not isinstance(raw, list):
            logger.warning("Ignoring catalog %s: expected a JSON array", self._file_path)
            return []
        try:
            return [self._to_domain(item) for item in raw]
        except (KeyError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring malformed catalog %s: %r", self._file_path, exc)
            return []

    def save(self, products: list[Product]) -> None:
        write_atomic(self._file_path, dump_json([self._to_raw(p) for p in products]))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "brand": product.brand,
            "category": product.category,
            "description": product.description,
            "disclaimer": product.disclaimer,
            "variants": [
                {
                    "id": v.id,
                    "size": v.size,
                    "price": v.price,
                    "mrp": v.mrp,
                    "stock": v.stock,
                    "sku": v.sku,
                }
                for v in product.variants
            ],
            "images": list(product.images),
            "published": product.published,
            "createdAt": product.created_at,
            "updatedAt": product.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        created_at = raw.get("createdAt", "")
        return Product(
            id=raw["id"],
            name=raw.get("name", ""),
            brand=raw.get("brand", ""),
            category=raw.get("category", ""),
            description=raw.get("description", ""),
            disclaimer=raw.get("disclaimer", ""),
            variants=[
                ProductVariant(
                    id=v["id"],
                    size=v.get("size", ""),
                    price=v.get("price", 0),
                    mrp=v.get("mrp", 0),
                    stock=v.get("stock") or 0,
                    sku=v.get("sku", ""),
                )
                for v in raw.get("variants", [])
            ],
            images=list(raw.get("images", [])),
            published=raw.get("published", True),
            created_at=created_at,
            updated_at=raw.get("updatedAt", created_at),
        )
