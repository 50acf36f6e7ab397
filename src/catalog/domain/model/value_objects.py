"""Money and stock level, the two value objects of the catalog.

Both are frozen and validate on construction, so an instance that exists
is always valid. Operations return new instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import (
    CurrencyMismatchError,
    InsufficientStockError,
    ValidationError,
)

DEFAULT_CURRENCY = "BRL"
LOW_STOCK_THRESHOLD = 10

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount tagged with a currency code.

    Arithmetic and ordering only work between amounts of the same currency.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < _ZERO:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError("Currency cannot be empty")

    @classmethod
    def of(cls, amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Build from anything ``Decimal(str(x))`` understands."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return cls(value, currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(_ZERO, currency)

    def _same_currency(self, other: Money, verb: str) -> Decimal:
        if other.currency != self.currency:
            raise CurrencyMismatchError(
                f"Cannot {verb} money with different currencies "
                f"({self.currency} and {other.currency})"
            )
        return other.amount

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._same_currency(other, "add"), self.currency)

    def __sub__(self, other: Money) -> Money:
        remaining = self.amount - self._same_currency(other, "subtract")
        if remaining < _ZERO:
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(remaining, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._same_currency(other, "compare")

    def __le__(self, other: Money) -> bool:
        return self.amount <= self._same_currency(other, "compare")

    def __gt__(self, other: Money) -> bool:
        return self.amount > self._same_currency(other, "compare")

    def __ge__(self, other: Money) -> bool:
        return self.amount >= self._same_currency(other, "compare")

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"


@dataclass(frozen=True)
class StockQuantity:
    """Units on hand.

    Never negative. Every operation returns a new instance.
    """

    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < LOW_STOCK_THRESHOLD

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity == 0

    def add(self, amount: int) -> StockQuantity:
        if amount < 0:
            raise ValidationError("Amount to add cannot be negative")
        return StockQuantity(self.quantity + amount)

    def subtract(self, amount: int) -> StockQuantity:
        if amount < 0:
            raise ValidationError("Amount to subtract cannot be negative")
        if amount > self.quantity:
            raise InsufficientStockError(
                f"Insufficient stock (need {amount}, have {self.quantity})"
            )
        return StockQuantity(self.quantity - amount)

    def update(self, new_quantity: int) -> StockQuantity:
        return StockQuantity(new_quantity)

    def __str__(self) -> str:
        return str(self.quantity)
