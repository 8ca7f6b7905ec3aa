"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate ticket rules before anything is charged or reserved
- Raise InvalidPurchaseError for every rejected purchase
- Keep no per-call state on the instance

Checks run in a fixed order and the first failure aborts the purchase.
The account id is deliberately checked last.
"""

from loguru import logger

from tickets.config import Settings, settings as default_settings
from tickets.domain.errors import (
    AdultMissingError,
    AdultRequiredError,
    InfantAdultMismatchError,
    InsufficientAdultsError,
    InvalidAccountError,
    InvalidPurchaseError,
    NegativeQuantityError,
    SeatLimitExceededError,
)
from tickets.domain.models import PurchaseOrder, PurchaseSummary, TicketTally, TicketTypeRequest
from tickets.domain.value_objects import Money, SeatCount, TicketCategory
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.gateways.logging_gateways import LoggingPaymentGateway, LoggingSeatReservationGateway

SEATED_CATEGORIES = (TicketCategory.ADULT, TicketCategory.CHILD)


class TicketService:
    """Service for validating, pricing and purchasing tickets."""

    def __init__(
        self,
        payment_gateway: PaymentGateway | None = None,
        reservation_gateway: SeatReservationGateway | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway or LoggingPaymentGateway()
        self._reservation_gateway = reservation_gateway or LoggingSeatReservationGateway()
        self._settings = settings or default_settings

    def purchase_tickets(self, account_id: int, *ticket_type_requests: TicketTypeRequest) -> None:
        """Validate and price the requests, then pay and reserve seats.

        Raises:
            InvalidPurchaseError: If any ticket rule or the account check fails.
                No gateway is called in that case.
        """
        order = PurchaseOrder.create(account_id, ticket_type_requests)
        summary = self.quote(order)

        self._payment_gateway.make_payment(account_id, summary.total_amount.amount)
        self._reservation_gateway.reserve_seat(account_id, summary.total_seats.value)
        logger.info(
            f"Purchase completed for account {account_id}: "
            f"amount={summary.total_amount} seats={summary.total_seats.value}"
        )

    def quote(self, order: PurchaseOrder) -> PurchaseSummary:
        """Return the price and seat count for an order without purchasing.

        Raises:
            InvalidPurchaseError: If any ticket rule or the account check fails.
        """
        try:
            self._check_quantities(order.requests)
            total_seats = self._count_seats(order.requests)
            tally = TicketTally.from_requests(order.requests)
            self._check_composition(tally)
            total_amount = self._price(tally)
            if not order.account_id.is_valid:
                raise InvalidAccountError(order.account_id.value)
        except InvalidPurchaseError as exc:
            logger.warning(
                f"Purchase rejected for account {order.account_id.value}: "
                f"{exc.code.value} {exc.message}"
            )
            raise

        return PurchaseSummary(
            account_id=order.account_id,
            total_amount=total_amount,
            total_seats=total_seats,
        )

    def _check_quantities(self, requests: tuple[TicketTypeRequest, ...]) -> None:
        invalid = [request.category for request in requests if request.quantity < 0]
        if invalid:
            raise NegativeQuantityError(invalid)

    def _count_seats(self, requests: tuple[TicketTypeRequest, ...]) -> SeatCount:
        # Infants sit on an adult's lap and take no seat.
        total = sum(
            request.quantity
            for request in requests
            if request.category in SEATED_CATEGORIES and request.quantity > 0
        )
        limit = self._settings.MAX_TICKETS_PER_PURCHASE
        if total > limit:
            raise SeatLimitExceededError(limit=limit, total=total)
        return SeatCount(total)

    def _check_composition(self, tally: TicketTally) -> None:
        if tally.has_adult and tally.adult_count <= 0 and not tally.has_child and not tally.has_infant:
            raise AdultRequiredError()
        if not tally.has_adult and (tally.has_child or tally.has_infant):
            raise AdultMissingError()
        if tally.has_adult and tally.has_child and tally.has_infant and tally.adult_count < tally.infant_count:
            raise InfantAdultMismatchError()
        if tally.has_adult and tally.has_infant and tally.infant_count > tally.adult_count:
            raise InsufficientAdultsError(tally.infant_count - tally.adult_count)
        # Empty or all-zero orders fall through the rules above.
        if tally.total_count <= 0:
            raise AdultRequiredError()

    def _price(self, tally: TicketTally) -> Money:
        return (
            Money(self._settings.ADULT_PRICE) * tally.adult_count
            + Money(self._settings.CHILD_PRICE) * tally.child_count
            + Money(self._settings.INFANT_PRICE) * tally.infant_count
        )
