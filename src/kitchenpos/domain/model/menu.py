"""Menu aggregate — a priced bundle of products.

A menu references its products by ID only (``MenuProduct``); it never owns
them. Anything that needs current product prices receives the computed
line-item total from the caller, usually ``MenuPricingService``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from kitchenpos.domain.exceptions import PriceExceedsSumError, ValidationError
from kitchenpos.domain.model.value_objects import Money, Name, Quantity


@dataclass(frozen=True)
class MenuProduct:
    """One line of a menu: which product, and how many of it."""

    product_id: str
    quantity: Quantity


@dataclass
class Menu:
    """Aggregate root for menus.

    Use the ``Menu.create()`` factory for new menus — it enforces the
    price rule.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted menus without re-validating.

    Invariants:
    - at creation, ``price`` is at most the line-item total
    - ``displayed`` is only switched off by ``hide()`` and only switched
      back on by ``display()``, which re-checks the price
    """

    id: str
    name: Name
    price: Money
    menu_products: list[MenuProduct]
    displayed: bool = True
    menu_group_id: str | None = None

    # --- Factory (used for NEW menus only) ------------------------------------

    @staticmethod
    def create(
        name: Name,
        price: Money,
        menu_products: list[MenuProduct],
        line_items_total: Money,
        displayed: bool = True,
        menu_group_id: str | None = None,
    ) -> Menu:
        """Create a new menu, enforcing all invariants."""
        if not menu_products:
            raise ValidationError("Menu must contain at least one product")

        _ensure_within_total(price, line_items_total)

        return Menu(
            id=uuid.uuid4().hex,
            name=name,
            price=price,
            menu_products=list(menu_products),
            displayed=displayed,
            menu_group_id=menu_group_id,
        )

    # --- Visibility -----------------------------------------------------------

    def hide(self) -> Menu:
        """Take the menu off sale. Hiding a hidden menu is a no-op."""
        self.displayed = False
        return self

    def display(self, line_items_total: Money) -> Menu:
        """Put the menu back on sale if its price is still consistent."""
        _ensure_within_total(self.price, line_items_total)
        self.displayed = True
        return self

    # --- Computed properties --------------------------------------------------

    @property
    def product_ids(self) -> list[str]:
        return [mp.product_id for mp in self.menu_products]

    def exceeds(self, line_items_total: Money) -> bool:
        return self.price > line_items_total


def _ensure_within_total(price: Money, line_items_total: Money) -> None:
    if price > line_items_total:
        raise PriceExceedsSumError(
            f"Menu price {price} exceeds the sum of its products {line_items_total}"
        )
