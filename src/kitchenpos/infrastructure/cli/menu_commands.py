"""CLI commands for the Menu aggregate."""

from __future__ import annotations

import click
import httpx

from kitchenpos.application.change_menu_visibility import (
    DisplayMenuHandler,
    HideMenuHandler,
)
from kitchenpos.application.create_menu import CreateMenuHandler
from kitchenpos.application.dto import MenuProductSpec
from kitchenpos.application.list_menus import ListMenusHandler
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.domain.service.name_validator import NameValidator
from kitchenpos.infrastructure.bootstrap import (
    menu_repository,
    product_repository,
    profanity_checker,
)


def _parse_item(raw: str) -> MenuProductSpec:
    """Parse 'PRODUCT_ID:QTY' into a MenuProductSpec."""
    if ":" not in raw:
        raise click.BadParameter(f"Expected PRODUCT_ID:QTY, got '{raw}'")
    product_id, qty_str = raw.rsplit(":", 1)
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(f"Quantity must be an integer, got '{qty_str}'")
    return MenuProductSpec(product_id=product_id.strip(), quantity=qty)


@click.command("create")
@click.option("--name", required=True, help="Menu name.")
@click.option("--price", required=True, help="Menu price (e.g. 19000).")
@click.option(
    "--item", "items", required=True, multiple=True,
    help="Product and quantity as PRODUCT_ID:QTY. Repeatable.",
)
@click.option("--hidden", is_flag=True, help="Create the menu without displaying it.")
@click.option("--group", "menu_group_id", default=None, help="Menu group ID.")
def menu_create(
    name: str,
    price: str,
    items: tuple[str, ...],
    hidden: bool,
    menu_group_id: str | None,
) -> None:
    """Create a menu from existing products."""
    specs = [_parse_item(raw) for raw in items]
    with profanity_checker() as checker:
        handler = CreateMenuHandler(
            menu_repo=menu_repository(),
            product_repo=product_repository(),
            name_validator=NameValidator(checker),
        )

        try:
            menu = handler.handle(
                name=name,
                price=price,
                item_specs=specs,
                displayed=not hidden,
                menu_group_id=menu_group_id,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))
        except httpx.HTTPError as exc:
            raise click.ClickException(f"Profanity check unavailable: {exc}")

    state = "displayed" if menu.displayed else "hidden"
    click.echo(f"Menu {menu.id} '{menu.name}' created at {menu.price} ({state})")


@click.command("list")
def menu_list() -> None:
    """List all menus with their product totals."""
    handler = ListMenusHandler(
        menu_repo=menu_repository(),
        product_repo=product_repository(),
    )

    try:
        menus = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not menus:
        click.echo("No menus found.")
        return

    for dto in menus:
        state = "displayed" if dto.displayed else "hidden"
        click.echo(f"\n{dto.name}  [{state}]  {dto.id}")
        click.echo(f"  Price: {dto.price}  (products total {dto.products_total})")
        for item in dto.items:
            click.echo(f"  - {item.product_name} x{item.quantity} @ {item.unit_price}")


@click.command("hide")
@click.option("--id", "menu_id", required=True, help="Menu ID.")
def menu_hide(menu_id: str) -> None:
    """Take a menu off sale."""
    handler = HideMenuHandler(menu_repo=menu_repository())

    try:
        handler.handle(menu_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu_id} hidden")


@click.command("display")
@click.option("--id", "menu_id", required=True, help="Menu ID.")
def menu_display(menu_id: str) -> None:
    """Put a menu back on sale if its price is still valid."""
    handler = DisplayMenuHandler(
        menu_repo=menu_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(menu_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu_id} displayed")
