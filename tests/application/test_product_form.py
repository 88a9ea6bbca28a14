"""Integration tests for the ProductForm (draft, validation, commit)."""

import pytest

from catalog_admin.application.product_form import ProductForm, VariantField
from catalog_admin.application.product_store import ProductStore
from catalog_admin.domain.exceptions import EntityNotFoundError, ValidationError
from catalog_admin.domain.model.pricing import discount_percent, total_stock
from tests.fakes import FakeProductRepository, FakeTextGenerator, sequential_ids


def _store() -> tuple[ProductStore, FakeProductRepository]:
    repo = FakeProductRepository()
    return ProductStore(repo, id_generator=sequential_ids("p")), repo


def _filled_form(store: ProductStore) -> ProductForm:
    form = ProductForm.new(store, id_generator=sequential_ids("v"))
    form.name = "Ground Nut Oil"
    form.brand = "Dhara"
    form.category = "Oils & Ghee"
    variant = form.add_variant()
    form.update_variant(variant.id, VariantField.SIZE, "1L")
    form.update_variant(variant.id, VariantField.PRICE, 180)
    form.update_variant(variant.id, VariantField.MRP, 220)
    form.update_variant(variant.id, VariantField.STOCK, 40)
    form.update_variant(variant.id, VariantField.SKU, "GNO1L")
    return form


class TestNewFormDefaults:

    def test_defaults(self):
        store, _ = _store()
        form = ProductForm.new(store)
        assert form.name == form.brand == form.category == ""
        assert form.description == form.disclaimer == ""
        assert form.variants == []
        assert form.images == []
        assert form.published is True
        assert form.is_editing is False


class TestValidation:

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("name", "   ", "Please enter a product name"),
            ("brand", "", "Please select a brand"),
            ("category", "", "Please select a category"),
        ],
    )
    def test_missing_field_rejected_before_store(self, field, value, message):
        store, repo = _store()
        form = _filled_form(store)
        setattr(form, field, value)

        with pytest.raises(ValidationError, match=message):
            form.submit()
        assert store.products == []
        assert repo.save_count == 0

    def test_zero_variants_rejected(self):
        store, repo = _store()
        form = _filled_form(store)
        form.remove_variant(form.variants[0].id)

        with pytest.raises(ValidationError, match="at least one product variant"):
            form.submit()
        assert store.products == []
        assert repo.save_count == 0

    def test_first_failure_wins(self):
        store, _ = _store()
        form = ProductForm.new(store)
        with pytest.raises(ValidationError, match="product name"):
            form.submit()

    def test_form_stays_open_after_failed_submit(self):
        store, _ = _store()
        form = _filled_form(store)
        form.name = ""
        with pytest.raises(ValidationError):
            form.submit()
        form.name = "Ground Nut Oil"
        assert form.submit().name == "Ground Nut Oil"


class TestSubmitCreate:

    def test_end_to_end_ground_nut_oil(self):
        store, repo = _store()
        product = _filled_form(store).submit()

        stored = repo.snapshot[0]
        assert stored.id == product.id
        assert stored.published is True
        assert total_stock(stored) == 40
        assert discount_percent(180, 220) == 18
        assert stored.variants[0].sku == "GNO1L"
        assert stored.variants[0].size == "1L"

    def test_submit_twice_rejected(self):
        store, _ = _store()
        form = _filled_form(store)
        form.submit()
        with pytest.raises(ValidationError, match="closed"):
            form.submit()
        assert len(store.products) == 1


class TestSubmitEdit:

    def test_edit_updates_existing_product(self):
        store, _ = _store()
        product = _filled_form(store).submit()

        form = ProductForm.edit(store, product.id)
        assert form.is_editing
        assert form.name == "Ground Nut Oil"
        form.description = "Cold pressed."
        updated = form.submit()

        assert len(store.products) == 1
        assert updated.id == product.id
        assert updated.description == "Cold pressed."
        assert updated.created_at == product.created_at

    def test_edit_draft_does_not_touch_store_before_submit(self):
        store, repo = _store()
        product = _filled_form(store).submit()
        saves = repo.save_count

        form = ProductForm.edit(store, product.id)
        form.name = "Changed"
        form.add_variant()
        form.abandon()

        assert store.get(product.id).name == "Ground Nut Oil"
        assert len(store.get(product.id).variants) == 1
        assert repo.save_count == saves

    def test_edit_unknown_product_rejected(self):
        store, _ = _store()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ProductForm.edit(store, "missing")


class TestVariants:

    def test_new_variant_is_zeroed(self):
        store, _ = _store()
        form = ProductForm.new(store)
        variant = form.add_variant()
        assert (variant.size, variant.price, variant.mrp, variant.stock, variant.sku) == ("", 0, 0, 0, "")

    def test_variant_ids_unique_within_draft(self):
        store, _ = _store()
        draws = iter(["v", "v", "w"])
        form = ProductForm.new(store, id_generator=lambda: next(draws))
        first = form.add_variant()
        second = form.add_variant()
        assert first.id != second.id

    def test_update_touches_only_target(self):
        store, _ = _store()
        form = ProductForm.new(store, id_generator=sequential_ids("v"))
        a = form.add_variant()
        b = form.add_variant()
        form.update_variant(b.id, VariantField.PRICE, "99.5")

        variants = {v.id: v for v in form.variants}
        assert variants[b.id].price == 99.5
        assert variants[a.id].price == 0
        assert variants[b.id].mrp == 0

    def test_update_unknown_variant_ignored(self):
        store, _ = _store()
        form = ProductForm.new(store)
        variant = form.add_variant()
        form.update_variant("missing", VariantField.SIZE, "5L")
        assert form.variants == [variant]

    def test_remove_variant(self):
        store, _ = _store()
        form = ProductForm.new(store, id_generator=sequential_ids("v"))
        a = form.add_variant()
        b = form.add_variant()
        form.remove_variant(a.id)
        assert [v.id for v in form.variants] == [b.id]

    def test_stock_must_be_whole_number(self):
        store, _ = _store()
        form = ProductForm.new(store)
        variant = form.add_variant()
        with pytest.raises(ValidationError, match="whole number"):
            form.update_variant(variant.id, VariantField.STOCK, "2.5")

    def test_price_must_be_numeric(self):
        store, _ = _store()
        form = ProductForm.new(store)
        variant = form.add_variant()
        with pytest.raises(ValidationError, match="Price must be a number"):
            form.update_variant(variant.id, VariantField.PRICE, "cheap")

    def test_mrp_rejects_infinity(self):
        store, _ = _store()
        form = ProductForm.new(store)
        variant = form.add_variant()
        with pytest.raises(ValidationError, match="MRP must be a finite number"):
            form.update_variant(variant.id, VariantField.MRP, "inf")

    def test_stock_string_coerced(self):
        store, _ = _store()
        form = ProductForm.new(store)
        variant = form.add_variant()
        form.update_variant(variant.id, VariantField.STOCK, "12")
        assert form.variants[0].stock == 12


class TestImages:

    def test_first_image_is_cover(self):
        store, _ = _store()
        form = ProductForm.new(store)
        form.add_image("cover.jpg")
        form.add_image("side.jpg")
        assert form.images == ["cover.jpg", "side.jpg"]

    def test_remove_cover_promotes_next(self):
        store, _ = _store()
        form = ProductForm.new(store)
        form.add_image("cover.jpg")
        form.add_image("side.jpg")
        form.remove_image(0)
        assert form.images == ["side.jpg"]

    def test_remove_gallery_image(self):
        store, _ = _store()
        form = ProductForm.new(store)
        for ref in ("a.jpg", "b.jpg", "c.jpg"):
            form.add_image(ref)
        form.remove_image(1)
        assert form.images == ["a.jpg", "c.jpg"]

    def test_out_of_range_index_ignored(self):
        store, _ = _store()
        form = ProductForm.new(store)
        form.add_image("a.jpg")
        form.remove_image(5)
        form.remove_image(-1)
        assert form.images == ["a.jpg"]

    def test_blank_reference_rejected(self):
        store, _ = _store()
        form = ProductForm.new(store)
        with pytest.raises(ValidationError, match="must not be empty"):
            form.add_image("  ")

    def test_images_persisted_with_product(self):
        store, _ = _store()
        form = _filled_form(store)
        form.add_image("https://cdn.example.com/oil.jpg")
        product = form.submit()
        assert product.primary_image == "https://cdn.example.com/oil.jpg"


class TestGeneratedText:

    def test_description_applied(self):
        store, _ = _store()
        form = _filled_form(store)
        generator = FakeTextGenerator(description="Pure oil.")

        assert form.generate_description(generator) is True
        assert form.description == "Pure oil."
        assert generator.calls == [("description", "Ground Nut Oil", "Dhara", "Oils & Ghee")]

    def test_description_requires_name_and_brand(self):
        store, _ = _store()
        form = ProductForm.new(store)
        generator = FakeTextGenerator(description="Pure oil.")
        with pytest.raises(ValidationError, match="name and brand first"):
            form.generate_description(generator)
        assert generator.calls == []

    def test_no_result_leaves_field_unchanged(self):
        store, _ = _store()
        form = _filled_form(store)
        form.disclaimer = "Existing."
        assert form.generate_disclaimer(FakeTextGenerator(disclaimer=None)) is False
        assert form.disclaimer == "Existing."

    def test_disclaimer_uses_category(self):
        store, _ = _store()
        form = _filled_form(store)
        generator = FakeTextGenerator(disclaimer="Packaging may vary.")
        form.generate_disclaimer(generator)
        assert form.disclaimer == "Packaging may vary."
        assert generator.calls == [("disclaimer", "Oils & Ghee")]

    def test_response_after_abandon_is_dropped(self):
        store, _ = _store()
        form = _filled_form(store)

        class AbandoningGenerator(FakeTextGenerator):
            def generate_description(self, name, brand, category):
                form.abandon()
                return "Too late."

        assert form.generate_description(AbandoningGenerator()) is False
        assert form.description == ""
