"""Application services: Hide Menu and Display Menu use cases.

Hiding always succeeds. Displaying re-checks the menu price against the
current product prices, since a price change may have hidden it.
"""

from __future__ import annotations

from kitchenpos.domain.exceptions import MenuNotFoundError
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService


def _load_menu(menu_repo: MenuRepository, menu_id: str) -> Menu:
    menu = menu_repo.get_by_id(menu_id)
    if menu is None:
        raise MenuNotFoundError(f"Menu with ID '{menu_id}' not found")
    return menu


class HideMenuHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, menu_id: str) -> Menu:
        menu = _load_menu(self._menu_repo, menu_id)
        menu.hide()
        self._menu_repo.save(menu)
        return menu


class DisplayMenuHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._menu_repo = menu_repo
        self._pricing = MenuPricingService(product_repo, menu_repo)

    def handle(self, menu_id: str) -> Menu:
        menu = _load_menu(self._menu_repo, menu_id)
        menu.display(self._pricing.line_items_total(menu.menu_products))
        self._menu_repo.save(menu)
        return menu
