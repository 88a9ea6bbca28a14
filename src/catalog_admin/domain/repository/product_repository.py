"""Abstract snapshot repository for the Product collection.

Defined in the domain layer so the domain never depends on
infrastructure. The collection is always read and written whole: there
are no partial updates and no per-product lookups at this level.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_admin.domain.model.product import Product


class ProductSnapshotRepository(ABC):

    @abstractmethod
    def load(self) -> list[Product]:
        """Return the stored collection, or [] if none is readable."""

    @abstractmethod
    def save(self, products: list[Product]) -> None:
        """Replace the stored snapshot with *products*, all-or-nothing."""
