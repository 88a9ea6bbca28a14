"""Application services: read-only catalog views (queries)."""

from __future__ import annotations

from catalog_admin.application.dto import (
    DashboardDTO,
    ProductDetailDTO,
    ProductRowDTO,
    VariantDTO,
)
from catalog_admin.application.product_store import ProductStore
from catalog_admin.domain.exceptions import EntityNotFoundError
from catalog_admin.domain.model.pricing import (
    discount_percent,
    format_amount,
    is_low_stock,
    price_range,
    total_stock,
)
from catalog_admin.domain.model.product import Product

RECENT_PRODUCTS = 5


def _status(product: Product) -> str:
    return "Published" if product.published else "Draft"


def _to_row(product: Product) -> ProductRowDTO:
    return ProductRowDTO(
        id=product.id,
        name=product.name,
        brand=product.brand,
        category=product.category,
        price=str(price_range(product)),
        total_stock=total_stock(product),
        low_stock=is_low_stock(product),
        status=_status(product),
    )


class ListProductsHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(self, search: str = "") -> list[ProductRowDTO]:
        """Rows for every product whose name or category contains *search*.

        Matching is a case-insensitive substring test; an empty query
        matches everything.
        """
        query = search.strip().lower()
        return [
            _to_row(p)
            for p in self._store.products
            if query in p.name.lower() or query in p.category.lower()
        ]


class ShowProductHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(self, product_id: str) -> ProductDetailDTO:
        product = self._store.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        return ProductDetailDTO(
            id=product.id,
            name=product.name,
            brand=product.brand,
            category=product.category,
            description=product.description,
            disclaimer=product.disclaimer,
            status=_status(product),
            price=str(price_range(product)),
            total_stock=total_stock(product),
            variants=[
                VariantDTO(
                    id=v.id,
                    size=v.size,
                    price=format_amount(v.price),
                    mrp=format_amount(v.mrp),
                    discount_percent=discount_percent(v.price, v.mrp),
                    stock=v.stock,
                    sku=v.sku,
                )
                for v in product.variants
            ],
            images=list(product.images),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class DashboardHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(self) -> DashboardDTO:
        products = self._store.products
        return DashboardDTO(
            total_products=len(products),
            published_products=sum(1 for p in products if p.published),
            total_stock=sum(total_stock(p) for p in products),
            low_stock_products=sum(1 for p in products if is_low_stock(p)),
            recent=[_to_row(p) for p in products[:RECENT_PRODUCTS]],
        )
