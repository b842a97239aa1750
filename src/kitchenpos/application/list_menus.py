"""Application service: List Menus use case (query)."""

from __future__ import annotations

from kitchenpos.application.dto import MenuDTO, MenuProductDTO
from kitchenpos.domain.exceptions import ProductNotFoundError
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService


class ListMenusHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._menu_repo = menu_repo
        self._product_repo = product_repo
        self._pricing = MenuPricingService(product_repo, menu_repo)

    def handle(self) -> list[MenuDTO]:
        return [self._to_dto(menu) for menu in self._menu_repo.list_all()]

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, menu: Menu) -> MenuDTO:
        items: list[MenuProductDTO] = []
        for line in menu.menu_products:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise ProductNotFoundError(
                    f"Menu '{menu.name}' references missing product '{line.product_id}'"
                )
            items.append(
                MenuProductDTO(
                    product_id=product.id,
                    product_name=str(product.name),
                    quantity=line.quantity.value,
                    unit_price=str(product.price),
                )
            )

        return MenuDTO(
            id=menu.id,
            name=str(menu.name),
            price=str(menu.price),
            products_total=str(self._pricing.line_items_total(menu.menu_products)),
            displayed=menu.displayed,
            menu_group_id=menu.menu_group_id,
            items=items,
        )
