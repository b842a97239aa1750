"""Application service: Create Menu use case.

Orchestrates the flow between repositories and the domain model:
validate the name and price, resolve every product through the pricing
service, then let the Menu aggregate enforce the price rule.
Nothing is saved unless every check passes.
"""

from __future__ import annotations

import logging

from kitchenpos.application.dto import MenuProductSpec
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService
from kitchenpos.domain.service.name_validator import NameValidator

logger = logging.getLogger(__name__)


class CreateMenuHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        product_repo: ProductRepository,
        name_validator: NameValidator,
    ) -> None:
        self._menu_repo = menu_repo
        self._name_validator = name_validator
        self._pricing = MenuPricingService(product_repo, menu_repo)

    def handle(
        self,
        name: str | None,
        price: str | int | None,
        item_specs: list[MenuProductSpec],
        displayed: bool = True,
        menu_group_id: str | None = None,
    ) -> Menu:
        """Create a new menu.

        Steps:
        1. Validate the name (profanity check) and the price.
        2. Build MenuProducts and sum their current product prices
           (fails if a product does not exist).
        3. Let the Menu aggregate reject a price above that sum.
        4. Persist and return the menu.
        """
        valid_name = self._name_validator.validate(name)
        valid_price = Money.of(price)

        menu_products = [
            MenuProduct(product_id=spec.product_id, quantity=Quantity(spec.quantity))
            for spec in item_specs
        ]
        total = self._pricing.line_items_total(menu_products)

        menu = Menu.create(
            name=valid_name,
            price=valid_price,
            menu_products=menu_products,
            line_items_total=total,
            displayed=displayed,
            menu_group_id=menu_group_id,
        )
        self._menu_repo.save(menu)
        logger.info("Created menu %s '%s' at %s (products total %s)", menu.id, menu.name, menu.price, total)
        return menu
