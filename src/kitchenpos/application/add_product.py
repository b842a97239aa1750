"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.name_validator import NameValidator

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        name_validator: NameValidator,
    ) -> None:
        self._product_repo = product_repo
        self._name_validator = name_validator

    def handle(self, name: str | None, price: str | int | None) -> Product:
        """Add a new product to the catalog.

        The name is checked before the price, so a request where both are
        bad fails with InvalidNameError.
        """
        valid_name = self._name_validator.validate(name)
        valid_price = Money.of(price)

        product = Product.create(name=valid_name, price=valid_price)
        self._product_repo.save(product)
        logger.info("Added product %s '%s' at %s", product.id, product.name, product.price)
        return product
