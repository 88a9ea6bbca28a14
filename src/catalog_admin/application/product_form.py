"""Application service: the product form.

A ProductForm holds the draft of one product, either seeded from a
stored product (edit) or from empty defaults (new). Nothing touches the
store until ``submit()`` passes validation; then the draft is handed to
``ProductStore.add`` or ``ProductStore.update`` depending on how the
form was opened, never on what the draft contains.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import replace
from enum import Enum
from typing import Any

from catalog_admin.application.product_store import ProductStore
from catalog_admin.application.text_generation import TextGenerator
from catalog_admin.domain.exceptions import EntityNotFoundError, ValidationError
from catalog_admin.domain.model.product import Product, ProductVariant
from catalog_admin.domain.service.identifiers import generate_id, unique_id

logger = logging.getLogger(__name__)


class VariantField(Enum):
    """The editable fields of a variant, each with its own value type."""

    SIZE = "size"
    PRICE = "price"
    MRP = "mrp"
    STOCK = "stock"
    SKU = "sku"

    def coerce(self, value: Any) -> Any:
        """Convert *value* to this field's type or raise ValidationError."""
        label = self.value.upper() if self is VariantField.MRP else self.value.capitalize()
        if self in (VariantField.SIZE, VariantField.SKU):
            return "" if value is None else str(value).strip()
        if self is VariantField.STOCK:
            number = _to_number(value, label)
            if number != int(number):
                raise ValidationError(f"{label} must be a whole number, got {value!r}")
            return int(number)
        return _to_number(value, label)


def _to_number(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise ValidationError(f"{label} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValidationError(f"{label} must be a finite number, got {value!r}")
    return number


class ProductForm:
    """Draft state and submission gate for a single product."""

    def __init__(
        self,
        store: ProductStore,
        product: Product | None = None,
        id_generator: Callable[[], str] = generate_id,
    ) -> None:
        self._store = store
        self._id_generator = id_generator
        self._product_id = product.id if product is not None else None
        self._closed = False

        self.name = product.name if product else ""
        self.brand = product.brand if product else ""
        self.category = product.category if product else ""
        self.description = product.description if product else ""
        self.disclaimer = product.disclaimer if product else ""
        self.published = product.published if product else True
        self._variants: list[ProductVariant] = list(product.variants) if product else []
        self._images: list[str] = list(product.images) if product else []

    # --- Factories ------------------------------------------------------------

    @classmethod
    def new(
        cls, store: ProductStore, id_generator: Callable[[], str] = generate_id
    ) -> ProductForm:
        return cls(store, id_generator=id_generator)

    @classmethod
    def edit(
        cls,
        store: ProductStore,
        product_id: str,
        id_generator: Callable[[], str] = generate_id,
    ) -> ProductForm:
        product = store.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        return cls(store, product, id_generator=id_generator)

    # --- State ----------------------------------------------------------------

    @property
    def product_id(self) -> str | None:
        return self._product_id

    @property
    def is_editing(self) -> bool:
        return self._product_id is not None

    @property
    def is_open(self) -> bool:
        return not self._closed

    @property
    def variants(self) -> list[ProductVariant]:
        return list(self._variants)

    @property
    def images(self) -> list[str]:
        return list(self._images)

    # --- Variants -------------------------------------------------------------

    def add_variant(self) -> ProductVariant:
        """Append a blank variant with an id unique within this draft."""
        variant = ProductVariant(
            id=unique_id({v.id for v in self._variants}, self._id_generator)
        )
        self._variants.append(variant)
        return variant

    def remove_variant(self, variant_id: str) -> None:
        self._variants = [v for v in self._variants if v.id != variant_id]

    def update_variant(self, variant_id: str, field: VariantField, value: Any) -> None:
        """Set one field of one variant; unknown ids are ignored."""
        coerced = field.coerce(value)
        self._variants = [
            replace(v, **{field.value: coerced}) if v.id == variant_id else v
            for v in self._variants
        ]

    # --- Images ---------------------------------------------------------------

    def add_image(self, reference: str) -> None:
        """Append an image reference; the first one is the cover image."""
        reference = reference.strip()
        if not reference:
            raise ValidationError("Image reference must not be empty")
        self._images.append(reference)

    def remove_image(self, index: int) -> None:
        """Remove the image at *index* (0 is the cover). Out of range is a no-op."""
        if 0 <= index < len(self._images):
            del self._images[index]

    # --- AI-assisted text -----------------------------------------------------

    def generate_description(self, generator: TextGenerator) -> bool:
        """Fill the description from *generator*. Returns True if it changed."""
        if not self.name or not self.brand:
            raise ValidationError("Please enter a product name and brand first.")
        text = generator.generate_description(self.name, self.brand, self.category)
        return self._apply_generated("description", text)

    def generate_disclaimer(self, generator: TextGenerator) -> bool:
        """Fill the disclaimer from *generator*. Returns True if it changed."""
        text = generator.generate_disclaimer(self.category)
        return self._apply_generated("disclaimer", text)

    def _apply_generated(self, field: str, text: str | None) -> bool:
        if not text:
            return False
        # The response may outlive the draft it was requested for.
        if self._closed:
            logger.info("Dropped generated %s for a closed form", field)
            return False
        setattr(self, field, text)
        return True

    # --- Submission -----------------------------------------------------------

    def validate(self) -> None:
        """Raise ValidationError for the first failing check."""
        if not self.name.strip():
            raise ValidationError("Please enter a product name")
        if not self.brand:
            raise ValidationError("Please select a brand")
        if not self.category:
            raise ValidationError("Please select a category")
        if not self._variants:
            raise ValidationError("Please add at least one product variant")

    def payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "description": self.description,
            "disclaimer": self.disclaimer,
            "variants": list(self._variants),
            "images": list(self._images),
            "published": self.published,
        }

    def submit(self) -> Product:
        """Validate the draft and commit it to the store.

        Returns the stored product. The form is closed afterwards, so late
        AI responses are no longer applied.
        """
        if self._closed:
            raise ValidationError("This form has already been closed")
        self.validate()

        if self._product_id is None:
            product = self._store.add(self.payload())
            self._product_id = product.id
        else:
            self._store.update(self._product_id, self.payload())
            product = self._store.get(self._product_id)
            if product is None:
                raise EntityNotFoundError(f"Product '{self._product_id}' not found")

        self._closed = True
        return product

    def abandon(self) -> None:
        """Close the form without committing anything."""
        self._closed = True
