"""Immutable Price value object with Decimal precision.

Ticket prices require exact precision, so amounts are held as Decimal.
Integers, strings and Decimals are accepted; floats are converted through
their string representation to avoid binary rounding artifacts.

Usage:
    from decimal import Decimal
    from src.domain.value_objects import Price

    general = Price(Decimal("50.00"))
    free = Price(0)
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from src.domain.errors import EventError, InvalidArgumentError, NullValueError


@dataclass(frozen=True)
class Price:
    """Non-negative ticket price.

    Attributes:
        amount: Decimal amount (zero allowed for free sections).

    Raises:
        NullValueError: If amount is None.
        InvalidArgumentError: If amount is not a finite number or is negative.

    Warning:
        Always use string initialization for Decimal to avoid float precision:
        >>> Price(Decimal("0.1"))  # Correct
        >>> Price(Decimal(0.1))    # Wrong - already imprecise!
    """

    amount: Decimal

    def __post_init__(self) -> None:
        """Normalize the amount to Decimal and validate it."""
        if self.amount is None:
            raise NullValueError("price", EventError.PRICE_REQUIRED)

        if not isinstance(self.amount, Decimal):
            if isinstance(self.amount, bool):
                raise InvalidArgumentError("price", EventError.INVALID_PRICE)
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation:
                raise InvalidArgumentError("price", EventError.INVALID_PRICE) from None

        if not self.amount.is_finite():
            raise InvalidArgumentError("price", EventError.INVALID_PRICE)
        if self.amount < 0:
            raise InvalidArgumentError("price", EventError.NEGATIVE_PRICE)

    @property
    def is_free(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
