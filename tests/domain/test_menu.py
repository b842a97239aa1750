"""Unit tests for the Menu aggregate and its price rule."""

import pytest

from kitchenpos.domain.exceptions import PriceExceedsSumError, ValidationError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Name, Quantity


def _lines(qty: int = 2) -> list[MenuProduct]:
    return [MenuProduct(product_id="p1", quantity=Quantity(qty))]


class TestMenuCreation:

    def test_happy_path(self):
        menu = Menu.create(
            name=Name("two chickens"),
            price=Money.of(19_000),
            menu_products=_lines(),
            line_items_total=Money.of(32_000),
        )
        assert menu.id
        assert menu.displayed is True
        assert menu.product_ids == ["p1"]
        assert menu.menu_group_id is None

    def test_price_equal_to_total_accepted(self):
        menu = Menu.create(Name("two chickens"), Money.of(32_000), _lines(), Money.of(32_000))
        assert menu.price == Money.of(32_000)

    def test_price_above_total_rejected(self):
        with pytest.raises(PriceExceedsSumError, match="exceeds"):
            Menu.create(Name("two chickens"), Money.of(32_001), _lines(), Money.of(32_000))

    def test_empty_products_rejected(self):
        with pytest.raises(ValidationError, match="at least one product"):
            Menu.create(Name("nothing"), Money.zero(), [], Money.zero())

    def test_created_hidden_when_requested(self):
        menu = Menu.create(
            Name("two chickens"), Money.of(19_000), _lines(), Money.of(32_000),
            displayed=False, menu_group_id="g1",
        )
        assert menu.displayed is False
        assert menu.menu_group_id == "g1"


class TestMenuVisibility:

    def _menu(self) -> Menu:
        return Menu.create(Name("two chickens"), Money.of(19_000), _lines(), Money.of(32_000))

    def test_hide(self):
        menu = self._menu()
        menu.hide()
        assert menu.displayed is False

    def test_hide_is_idempotent(self):
        menu = self._menu()
        menu.hide()
        menu.hide()
        assert menu.displayed is False

    def test_display_when_price_still_valid(self):
        menu = self._menu().hide()
        menu.display(Money.of(20_000))
        assert menu.displayed is True

    def test_display_rejected_when_overpriced(self):
        menu = self._menu().hide()
        with pytest.raises(PriceExceedsSumError):
            menu.display(Money.of(16_000))
        assert menu.displayed is False

    def test_exceeds(self):
        menu = self._menu()
        assert menu.exceeds(Money.of(18_999))
        assert not menu.exceeds(Money.of(19_000))
