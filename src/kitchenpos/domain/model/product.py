"""Product aggregate.

Products live independently of menus. A product never knows which menus
reference it; keeping menus consistent after a price change is the job of
``MenuPricingService``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from kitchenpos.domain.model.value_objects import Money, Name


@dataclass
class Product:
    """A sellable item in the catalog.

    Kept as a mutable dataclass because price changes are a legitimate
    mutation on the aggregate. Name and price are already-validated
    value objects.
    """

    id: str
    name: Name
    price: Money

    @staticmethod
    def create(name: Name, price: Money) -> Product:
        """Create a new product with a freshly assigned ID."""
        return Product(id=uuid.uuid4().hex, name=name, price=price)

    def change_price(self, new_price: Money) -> Product:
        """Change the product price.

        Menus that contain this product are NOT re-checked here.
        """
        self.price = new_price
        return self
