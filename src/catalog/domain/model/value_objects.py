"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import InvalidAmountError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Equality and ordering
    compare the amount only, so ``Money.of("10") == Money.of("10.00")``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidAmountError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmountError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidAmountError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal | None) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if amount is None:
            raise InvalidAmountError("Money amount is required")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmountError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def subtract(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise InvalidAmountError("Money subtraction would result in a negative amount")
        return Money(result)

    def multiply(self, factor: int) -> Money:
        """Scale by a whole quantity, e.g. to price a line of N units."""
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        if factor < 0:
            raise InvalidAmountError(f"Money multiplier cannot be negative, got {factor}")
        return Money(self.amount * factor)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    # --- Comparison -----------------------------------------------------------

    def is_greater_than(self, other: Money) -> bool:
        return self.amount > other.amount

    def is_less_than(self, other: Money) -> bool:
        return self.amount < other.amount

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
