"""Gateway interfaces for the third-party collaborators.

The service only calls these after an order has been validated and priced.
Implementations own their own transport, timeouts and retries.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        """Charge amount_to_pay to the account."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve total_seats_to_allocate seats for the account."""
        ...
