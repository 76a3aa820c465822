"""Section domain entity.

A priced, capacity-bounded part of an Event (e.g., "General", "VIP").
Sections belong to exactly one Event and are never shared across events;
they are created when the Event is created or added later through
Event.add_section().

Usage:
    from decimal import Decimal
    from src.domain.entities import Section
    from src.domain.value_objects import Price

    general = Section(name="General", capacity=500, price=Price(Decimal("50.00")))
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.errors import EventError, InvalidArgumentError, NullValueError
from src.domain.value_objects.price import Price


@dataclass(frozen=True)
class Section:
    """Section of an Event.

    Attributes:
        name: Display name, unique (case-sensitive) within its Event.
        capacity: Number of seats (positive integer).
        price: Unit ticket price. Raw numbers are wrapped in Price.
        id: Unique section identifier (UUIDv7, generated when omitted).

    Raises:
        NullValueError: If name or price is None.
        InvalidArgumentError: If name is blank, capacity is not a positive
            integer, or price is invalid.
    """

    name: str
    capacity: int
    price: Price
    id: UUID = field(default_factory=uuid7)

    def __post_init__(self) -> None:
        """Validate section fields."""
        if self.name is None:
            raise NullValueError("name", EventError.SECTION_NAME_REQUIRED)
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("name", EventError.EMPTY_SECTION_NAME)

        if (
            not isinstance(self.capacity, int)
            or isinstance(self.capacity, bool)
            or self.capacity <= 0
        ):
            raise InvalidArgumentError("capacity", EventError.INVALID_CAPACITY)

        if not isinstance(self.price, Price):
            object.__setattr__(self, "price", Price(self.price))

    @property
    def total_value(self) -> Decimal:
        """Revenue if every seat is sold."""
        return self.price.amount * self.capacity
