"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to the CLI
without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductRowDTO:
    """Output: one row of the product table."""

    id: str
    name: str
    brand: str
    category: str
    price: str  # formatted, e.g. "₹50 - ₹80"
    total_stock: int
    low_stock: bool
    status: str  # "Published" or "Draft"


@dataclass(frozen=True)
class VariantDTO:
    id: str
    size: str
    price: str
    mrp: str
    discount_percent: int
    stock: int
    sku: str


@dataclass(frozen=True)
class ProductDetailDTO:
    """Output: a complete product as displayed to the user."""

    id: str
    name: str
    brand: str
    category: str
    description: str
    disclaimer: str
    status: str
    price: str
    total_stock: int
    variants: list[VariantDTO]
    images: list[str]
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class DashboardDTO:
    total_products: int
    published_products: int
    total_stock: int
    low_stock_products: int
    recent: list[ProductRowDTO]
