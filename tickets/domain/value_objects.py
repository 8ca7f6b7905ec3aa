"""Domain primitives for ticket purchases."""

from dataclasses import dataclass
from enum import Enum


class TicketCategory(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AccountId:
    """Account identifier as received from the caller.

    Validity is checked by the service, after the ticket rules, so it is
    not enforced at construction time.
    """

    value: int

    @property
    def is_valid(self) -> bool:
        return self.value > 0


@dataclass(frozen=True)
class Money:
    """Amount in whole currency units."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class SeatCount:
    """Non-negative number of reservable seats."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Seat count cannot be negative")
