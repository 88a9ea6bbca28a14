"""Product aggregate and its variants.

A Product owns an ordered list of ProductVariants. Variants have no
lifecycle of their own: they are created, edited and removed only as part
of their product's edit session and persisted inside it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

BRANDS = (
    "Pro Nature",
    "Organic India",
    "Patanjali",
    "Dhara",
    "Fortune",
    "Saffola",
    "Aashirvaad",
    "Tata Sampann",
    "Mother Dairy",
    "Amul",
)

CATEGORIES = (
    "Oils & Ghee",
    "Pulses & Grains",
    "Spices & Masalas",
    "Rice & Flour",
    "Dairy Products",
    "Snacks & Namkeen",
    "Tea & Coffee",
    "Sugar & Jaggery",
    "Dry Fruits & Nuts",
    "Organic Products",
)


@dataclass(frozen=True)
class ProductVariant:
    """A purchasable size/SKU option of a product.

    Immutable: edits produce a new variant via ``dataclasses.replace``
    so a draft never aliases the stored product's variants.
    Prices and stock are not range-checked; display code tolerates
    ``price > mrp`` and negative values.
    """

    id: str
    size: str = ""
    price: float = 0
    mrp: float = 0
    stock: int = 0
    sku: str = ""


@dataclass
class Product:
    """A product in the catalog.

    Aggregate root. ``id`` and ``created_at`` never change after
    creation; ``updated_at`` is refreshed by the store on every update.
    Timestamps are UTC ISO-8601 strings, so they sort lexically.
    """

    id: str
    name: str
    brand: str
    category: str
    created_at: str
    updated_at: str
    description: str = ""
    disclaimer: str = ""
    variants: list[ProductVariant] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    published: bool = True

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None

    def variant_ids(self) -> set[str]:
        return {v.id for v in self.variants}
