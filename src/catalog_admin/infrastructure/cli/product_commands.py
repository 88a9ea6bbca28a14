"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog_admin.application.catalog_queries import (
    DashboardHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from catalog_admin.application.product_form import ProductForm, VariantField
from catalog_admin.domain.exceptions import DomainException
from catalog_admin.domain.model.product import BRANDS, CATEGORIES
from catalog_admin.infrastructure.bootstrap import (
    auth_handler,
    product_store,
    text_generator,
)

_VARIANT_FIELDS = (
    VariantField.SIZE,
    VariantField.PRICE,
    VariantField.MRP,
    VariantField.STOCK,
    VariantField.SKU,
)


def _parse_variant(raw: str) -> list[str]:
    """Split 'SIZE:PRICE:MRP:STOCK:SKU' into its five parts."""
    parts = raw.split(":")
    if len(parts) != len(_VARIANT_FIELDS):
        raise click.BadParameter(
            f"Invalid variant '{raw}'. Expected 'Size:Price:MRP:Stock:SKU'."
        )
    return parts


def _parse_variant_edit(raw: str) -> tuple[str, VariantField, str]:
    """Parse 'VARIANT_ID:FIELD=VALUE'."""
    variant_id, _, assignment = raw.partition(":")
    if not assignment or "=" not in assignment:
        raise click.BadParameter(
            f"Invalid variant edit '{raw}'. Expected 'VariantId:field=value'."
        )
    field_name, value = assignment.split("=", 1)
    try:
        field = VariantField(field_name.strip().lower())
    except ValueError:
        names = ", ".join(f.value for f in VariantField)
        raise click.BadParameter(
            f"Unknown variant field '{field_name}'. Expected one of: {names}."
        )
    return variant_id.strip(), field, value


def _add_variants(form: ProductForm, specs: tuple[str, ...]) -> None:
    for spec in specs:
        parts = _parse_variant(spec)
        variant = form.add_variant()
        for field, value in zip(_VARIANT_FIELDS, parts):
            form.update_variant(variant.id, field, value)


def _generate_text(form: ProductForm, description: bool, disclaimer: bool) -> None:
    if description and not form.generate_description(text_generator()):
        click.echo("Description was not generated; keeping the current text.", err=True)
    if disclaimer and not form.generate_disclaimer(text_generator()):
        click.echo("Disclaimer was not generated; keeping the current text.", err=True)


def _print_rows(rows) -> None:
    click.echo(
        f"{'ID':<13} {'Name':<24} {'Brand':<14} {'Category':<18} "
        f"{'Price':>16} {'Stock':>6}  Status"
    )
    click.echo("-" * 104)
    for row in rows:
        stock = f"{row.total_stock}{'!' if row.low_stock else ''}"
        click.echo(
            f"{row.id:<13} {row.name:<24} {row.brand:<14} {row.category:<18} "
            f"{row.price:>16} {stock:>6}  {row.status}"
        )


@click.command("list")
@click.option("--search", default="", help="Filter by name or category.")
def product_list(search: str) -> None:
    """List products in the catalog."""
    try:
        auth_handler().require_user()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    rows = ListProductsHandler(product_store()).handle(search)
    if not rows:
        click.echo("No products found. Add your first product to get started.")
        return
    _print_rows(rows)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID to display.")
def product_show(product_id: str) -> None:
    """Show details of a product."""
    try:
        auth_handler().require_user()
        dto = ShowProductHandler(product_store()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.name}  ({dto.status})")
    click.echo(f"ID:       {dto.id}")
    click.echo(f"Brand:    {dto.brand}")
    click.echo(f"Category: {dto.category}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Stock:    {dto.total_stock}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    if dto.description:
        click.echo()
        click.echo(dto.description)
    if dto.disclaimer:
        click.echo()
        click.echo(f"Disclaimer: {dto.disclaimer}")
    click.echo()
    click.echo(
        f"  {'Variant':<13} {'Size':<8} {'Price':>9} {'MRP':>9} {'Off':>5} "
        f"{'Stock':>6}  SKU"
    )
    click.echo(f"  {'-'*62}")
    for v in dto.variants:
        click.echo(
            f"  {v.id:<13} {v.size:<8} {v.price:>9} {v.mrp:>9} "
            f"{str(v.discount_percent) + '%':>5} {v.stock:>6}  {v.sku}"
        )
    for i, image in enumerate(dto.images):
        label = "Cover" if i == 0 else f"Image {i}"
        click.echo(f"{label}: {image}")


@click.command("add")
@click.option("--name", default="", help="Product name.")
@click.option("--brand", type=click.Choice(BRANDS), default=None, help="Brand.")
@click.option("--category", type=click.Choice(CATEGORIES), default=None, help="Category.")
@click.option("--description", default="", help="Product description.")
@click.option("--disclaimer", default="", help="Product disclaimer.")
@click.option(
    "--variant",
    "variants",
    multiple=True,
    help="Variant as 'Size:Price:MRP:Stock:SKU'. Repeatable.",
)
@click.option("--image", "images", multiple=True, help="Image path or URL. Repeatable.")
@click.option("--draft", is_flag=True, default=False, help="Save without publishing.")
@click.option("--generate-description", is_flag=True, default=False, help="Write the description with AI.")
@click.option("--generate-disclaimer", is_flag=True, default=False, help="Write the disclaimer with AI.")
def product_add(
    name: str,
    brand: str | None,
    category: str | None,
    description: str,
    disclaimer: str,
    variants: tuple[str, ...],
    images: tuple[str, ...],
    draft: bool,
    generate_description: bool,
    generate_disclaimer: bool,
) -> None:
    """Add a new product to the catalog."""
    try:
        auth_handler().require_user()
        form = ProductForm.new(product_store())
        form.name = name
        form.brand = brand or ""
        form.category = category or ""
        form.description = description
        form.disclaimer = disclaimer
        form.published = not draft
        _add_variants(form, variants)
        for image in images:
            form.add_image(image)
        _generate_text(form, generate_description, generate_disclaimer)
        product = form.submit()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' has been added to your catalog.")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--brand", type=click.Choice(BRANDS), default=None, help="New brand.")
@click.option("--category", type=click.Choice(CATEGORIES), default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@click.option("--disclaimer", default=None, help="New disclaimer.")
@click.option("--publish/--unpublish", "published", default=None, help="Change visibility.")
@click.option("--add-variant", "add_variants", multiple=True, help="Variant as 'Size:Price:MRP:Stock:SKU'.")
@click.option("--remove-variant", "remove_variants", multiple=True, help="Variant ID to remove.")
@click.option("--set-variant", "set_variants", multiple=True, help="Variant edit as 'VariantId:field=value'.")
@click.option("--add-image", "add_images", multiple=True, help="Image path or URL to append.")
@click.option(
    "--remove-image",
    "remove_images",
    multiple=True,
    type=int,
    help="Image position to remove (0 is the cover).",
)
@click.option("--generate-description", is_flag=True, default=False, help="Rewrite the description with AI.")
@click.option("--generate-disclaimer", is_flag=True, default=False, help="Rewrite the disclaimer with AI.")
def product_update(
    product_id: str,
    name: str | None,
    brand: str | None,
    category: str | None,
    description: str | None,
    disclaimer: str | None,
    published: bool | None,
    add_variants: tuple[str, ...],
    remove_variants: tuple[str, ...],
    set_variants: tuple[str, ...],
    add_images: tuple[str, ...],
    remove_images: tuple[int, ...],
    generate_description: bool,
    generate_disclaimer: bool,
) -> None:
    """Edit an existing product.

    Image positions given to --remove-image refer to the list as stored
    before this command; removals happen before --add-image.
    """
    edits = [_parse_variant_edit(raw) for raw in set_variants]

    try:
        auth_handler().require_user()
        form = ProductForm.edit(product_store(), product_id)
        if name is not None:
            form.name = name
        if brand is not None:
            form.brand = brand
        if category is not None:
            form.category = category
        if description is not None:
            form.description = description
        if disclaimer is not None:
            form.disclaimer = disclaimer
        if published is not None:
            form.published = published

        for variant_id in remove_variants:
            form.remove_variant(variant_id)
        for variant_id, field, value in edits:
            form.update_variant(variant_id, field, value)
        _add_variants(form, add_variants)

        for index in sorted(set(remove_images), reverse=True):
            form.remove_image(index)
        for image in add_images:
            form.add_image(image)

        _generate_text(form, generate_description, generate_disclaimer)
        product = form.submit()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' has been updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID to delete.")
@click.confirmation_option(prompt="Delete this product?")
def product_delete(product_id: str) -> None:
    """Delete a product from the catalog."""
    try:
        auth_handler().require_user()
        store = product_store()
        existed = store.get(product_id) is not None
        store.delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if existed:
        click.echo(f"Product {product_id} deleted.")
    else:
        click.echo(f"No product with ID {product_id}; nothing deleted.")


@click.command("dashboard")
def dashboard() -> None:
    """Show catalog totals and the first products."""
    try:
        auth_handler().require_user()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = DashboardHandler(product_store()).handle()
    click.echo(f"Total products:     {dto.total_products}")
    click.echo(f"Published:          {dto.published_products}")
    click.echo(f"Units in stock:     {dto.total_stock}")
    click.echo(f"Low stock products: {dto.low_stock_products}")
    click.echo()
    if not dto.recent:
        click.echo("No products found. Add your first product to get started.")
        return
    _print_rows(dto.recent)
