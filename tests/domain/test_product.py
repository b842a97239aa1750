"""Unit tests for the Product aggregate."""

from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Name


class TestProduct:

    def test_create_assigns_id(self):
        product = Product.create(Name("fried chicken"), Money.of(16_000))
        assert product.id
        assert product.name == Name("fried chicken")
        assert product.price == Money.of(16_000)

    def test_ids_are_unique(self):
        a = Product.create(Name("fried chicken"), Money.of(16_000))
        b = Product.create(Name("fried chicken"), Money.of(16_000))
        assert a.id != b.id

    def test_change_price(self):
        product = Product.create(Name("fried chicken"), Money.of(16_000))
        returned = product.change_price(Money.of(15_000))
        assert returned is product
        assert product.price == Money.of(15_000)
