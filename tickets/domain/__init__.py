from tickets.domain.errors import ErrorCode, InvalidPurchaseError
from tickets.domain.models import PurchaseOrder, PurchaseSummary, TicketTally, TicketTypeRequest
from tickets.domain.value_objects import AccountId, Money, SeatCount, TicketCategory

__all__ = [
    "TicketCategory",
    "TicketTypeRequest",
    "PurchaseOrder",
    "PurchaseSummary",
    "TicketTally",
    "AccountId",
    "Money",
    "SeatCount",
    "ErrorCode",
    "InvalidPurchaseError",
]
