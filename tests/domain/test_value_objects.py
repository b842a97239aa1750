"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from kitchenpos.domain.exceptions import InvalidNameError, InvalidPriceError, ValidationError
from kitchenpos.domain.model.value_objects import Money, Name, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("16000"))
        assert m.amount == Decimal("16000")
        assert m.currency == "KRW"

    def test_of_factory_from_string(self):
        m = Money.of("16000.50")
        assert m.amount == Decimal("16000.50")

    def test_of_factory_from_int(self):
        m = Money.of(16_000)
        assert m.amount == Decimal("16000")

    def test_zero_is_allowed(self):
        assert Money.of(0) == Money.zero()

    def test_none_rejected(self):
        with pytest.raises(InvalidPriceError, match="required"):
            Money.of(None)

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidPriceError, match="cannot be negative"):
            Money.of("-1000")

    def test_garbage_rejected(self):
        with pytest.raises(InvalidPriceError, match="Invalid money amount"):
            Money.of("sixteen thousand")

    def test_nan_rejected(self):
        with pytest.raises(InvalidPriceError, match="finite"):
            Money.of("NaN")

    def test_invalid_price_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Money.of("-1")

    def test_addition(self):
        result = Money.of("16000") + Money.of("3000")
        assert result == Money.of("19000")

    def test_decimal_sums_are_exact(self):
        total = Money.zero()
        for _ in range(10):
            total = total + Money.of("0.1")
        assert total == Money.of("1.0")

    def test_multiplication_by_int(self):
        result = Money.of("8000") * 2
        assert result == Money.of("16000")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("8000") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "KRW") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("16000")) == "16,000 KRW"

    def test_comparison_operators(self):
        assert Money.of("16000") < Money.of("19000")
        assert Money.of("19000") > Money.of("16000")
        assert Money.of("19000") >= Money.of("19000")
        assert Money.of("19000") <= Money.of("19000")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(2).value == 2

    def test_zero_allowed(self):
        assert Quantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Quantity(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity("2")


# ── Name ─────────────────────────────────────────────────────────────────────


class TestName:

    def test_strips_whitespace(self):
        assert Name("  fried chicken ").value == "fried chicken"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_or_blank_rejected(self, raw):
        with pytest.raises(InvalidNameError):
            Name(raw)
