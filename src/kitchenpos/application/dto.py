"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.model.product import Product


@dataclass(frozen=True)
class MenuProductSpec:
    """Input: one product to put in a menu (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class MenuProductDTO:
    """Output: a single menu line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "16,000 KRW"


@dataclass(frozen=True)
class MenuDTO:
    """Output: a complete menu as displayed to the user."""

    id: str
    name: str
    price: str
    products_total: str
    displayed: bool
    menu_group_id: str | None
    items: list[MenuProductDTO]


@dataclass(frozen=True)
class PriceChangeResult:
    """Output: the repriced product and the menus the new price hid."""

    product: Product
    hidden_menus: list[Menu]
