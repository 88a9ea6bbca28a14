import logging

import click

from catalog_admin.infrastructure.cli.auth_commands import (
    auth_login,
    auth_logout,
    auth_signup,
    auth_whoami,
)
from catalog_admin.infrastructure.cli.product_commands import (
    dashboard,
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog_admin.infrastructure.config import get_settings


@click.group()
def cli() -> None:
    """Catalog Admin: manage the product catalog"""
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def auth() -> None:
    """Log in and out."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_signup)
auth.add_command(auth_whoami)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cli.add_command(dashboard)
