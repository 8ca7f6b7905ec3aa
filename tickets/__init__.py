from tickets.domain import InvalidPurchaseError, TicketCategory, TicketTypeRequest
from tickets.services.ticket_service import TicketService

__all__ = [
    "TicketService",
    "TicketCategory",
    "TicketTypeRequest",
    "InvalidPurchaseError",
]
