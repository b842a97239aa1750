"""Domain service: Menu Pricing.

A menu's price must never exceed the sum of its products' prices times
their quantities. Neither aggregate can enforce that alone (a product does
not know about menus, and a menu only holds product IDs), so this service
coordinates the two:

- at menu creation, it resolves every line item and checks the price;
- after a product price change, it re-checks every menu containing that
  product and hides the ones that are now overpriced.

Menus are never shown again automatically; that takes an explicit
``display`` request.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from kitchenpos.domain.exceptions import ProductNotFoundError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class MenuPricingService:

    def __init__(
        self,
        product_repo: ProductRepository,
        menu_repo: MenuRepository,
    ) -> None:
        self._product_repo = product_repo
        self._menu_repo = menu_repo

    def line_items_total(
        self,
        menu_products: Iterable[MenuProduct],
        overrides: Mapping[str, Product] | None = None,
    ) -> Money:
        """Sum ``price × quantity`` over the line items at current prices.

        Products in *overrides* are used instead of the stored copy, so a
        price that was just changed in memory is never read back stale.
        """
        overrides = overrides or {}
        total = Money.zero()
        for line in menu_products:
            product = overrides.get(line.product_id)
            if product is None:
                product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise ProductNotFoundError(
                    f"Product with ID '{line.product_id}' not found"
                )
            total = total + product.price * line.quantity.value
        return total

    def on_product_price_changed(self, product: Product) -> list[Menu]:
        """Hide every displayed menu the new product price made overpriced.

        The product must already carry its new price and be saved. Each
        menu is decided and saved on its own, so stopping part-way leaves
        every processed menu correct. Returns the menus hidden by this call.
        """
        hidden: list[Menu] = []
        overrides = {product.id: product}

        for menu in self._menu_repo.find_all_by_product_id(product.id):
            if not menu.displayed:
                continue
            total = self.line_items_total(menu.menu_products, overrides)
            if not menu.exceeds(total):
                continue

            menu.hide()
            self._menu_repo.save(menu)
            hidden.append(menu)
            logger.info(
                "Hid menu %s ('%s'): price %s exceeds product total %s",
                menu.id, menu.name, menu.price, total,
            )

        return hidden
