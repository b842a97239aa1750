"""Application service: Change Product Price use case.

Saves the new price first, then lets ``MenuPricingService`` hide any
menu that the new price made overpriced.
"""

from __future__ import annotations

import logging

from kitchenpos.application.dto import PriceChangeResult
from kitchenpos.domain.exceptions import ProductNotFoundError
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService

logger = logging.getLogger(__name__)


class ChangeProductPriceHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        menu_repo: MenuRepository,
    ) -> None:
        self._product_repo = product_repo
        self._pricing = MenuPricingService(product_repo, menu_repo)

    def handle(self, product_id: str, new_price: str | int | None) -> PriceChangeResult:
        """Reprice a product and report which menus were hidden as a result."""
        price = Money.of(new_price)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product with ID '{product_id}' not found")

        old_price = product.price
        product.change_price(price)
        self._product_repo.save(product)
        logger.info("Changed price of product %s from %s to %s", product.id, old_price, price)

        hidden = self._pricing.on_product_price_changed(product)
        return PriceChangeResult(product=product, hidden_menus=hidden)
