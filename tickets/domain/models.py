"""Domain models for a single purchase call.

These are transient: built per call and discarded when it returns.
"""

from dataclasses import dataclass
from typing import Iterable, Self

from tickets.domain.value_objects import AccountId, Money, SeatCount, TicketCategory


@dataclass(frozen=True)
class TicketTypeRequest:
    """One (category, quantity) entry of a purchase batch.

    The quantity is kept as received and may be negative.
    """

    category: TicketCategory
    quantity: int


@dataclass(frozen=True)
class PurchaseOrder:
    """Account plus the ordered ticket requests of one purchase."""

    account_id: AccountId
    requests: tuple[TicketTypeRequest, ...] = ()

    @classmethod
    def create(cls, account_id: int, requests: Iterable[TicketTypeRequest]) -> Self:
        return cls(account_id=AccountId(account_id), requests=tuple(requests))


@dataclass(frozen=True)
class TicketTally:
    """Per-category totals and presence flags for one order.

    A category is present when any request entry of it appeared, even with
    quantity zero.
    """

    adult_count: int = 0
    child_count: int = 0
    infant_count: int = 0
    has_adult: bool = False
    has_child: bool = False
    has_infant: bool = False

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        counts = {category: 0 for category in TicketCategory}
        present = {category: False for category in TicketCategory}
        for request in requests:
            counts[request.category] += request.quantity
            present[request.category] = True
        return cls(
            adult_count=counts[TicketCategory.ADULT],
            child_count=counts[TicketCategory.CHILD],
            infant_count=counts[TicketCategory.INFANT],
            has_adult=present[TicketCategory.ADULT],
            has_child=present[TicketCategory.CHILD],
            has_infant=present[TicketCategory.INFANT],
        )

    @property
    def total_count(self) -> int:
        return self.adult_count + self.child_count + self.infant_count


@dataclass(frozen=True)
class PurchaseSummary:
    """Priced result of a validated order."""

    account_id: AccountId
    total_amount: Money
    total_seats: SeatCount
