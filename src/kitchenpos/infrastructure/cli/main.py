import logging

import click

from kitchenpos.infrastructure.cli.menu_commands import (
    menu_create,
    menu_display,
    menu_hide,
    menu_list,
)
from kitchenpos.infrastructure.cli.product_commands import (
    product_add,
    product_change_price,
    product_list,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log what the system is doing.")
def cli(verbose: bool) -> None:
    """kitchenpos — products and menus for the point of sale"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def menu() -> None:
    """Manage menus."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_change_price)
product.add_command(product_list)
menu.add_command(menu_create)
menu.add_command(menu_display)
menu.add_command(menu_hide)
menu.add_command(menu_list)
