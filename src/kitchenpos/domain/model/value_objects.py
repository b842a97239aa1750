"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from kitchenpos.domain.exceptions import InvalidNameError, InvalidPriceError, ValidationError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that summing line items never drifts; a menu priced
    exactly at its line-item total must compare equal, not one ulp above.
    """

    amount: Decimal
    currency: str = "KRW"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidPriceError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidPriceError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidPriceError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:,} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal | None) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if amount is None:
            raise InvalidPriceError("Price is required")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPriceError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """How many units of a product a menu contains.

    Zero is accepted; only negative counts are rejected.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Name:
    """A display name for a product or menu.

    Only checks that the text is present. Profanity screening needs an
    external service and is done by ``NameValidator`` before a Name is built.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not isinstance(self.value, str):
            raise InvalidNameError("Name is required")
        if not self.value.strip():
            raise InvalidNameError("Name cannot be blank")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
