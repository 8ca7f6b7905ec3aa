"""Domain error codes for ticket purchases.

Callers only ever catch InvalidPurchaseError. The subclasses and the code
tag identify the failing rule.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from tickets.domain.value_objects import TicketCategory


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_QUANTITY = "INVALID_QUANTITY"
    SEAT_LIMIT_EXCEEDED = "SEAT_LIMIT_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    ADULT_MISSING = "ADULT_MISSING"
    INFANT_ADULT_MISMATCH = "INFANT_ADULT_MISMATCH"
    INSUFFICIENT_ADULTS = "INSUFFICIENT_ADULTS"
    INVALID_ACCOUNT = "INVALID_ACCOUNT"


@dataclass(eq=False)
class InvalidPurchaseError(Exception):
    """Base purchase error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


class NegativeQuantityError(InvalidPurchaseError):
    """Raised when any request carries a negative quantity."""

    def __init__(self, categories: Iterable[TicketCategory]) -> None:
        self.categories = tuple(categories)
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message="Please provide valid input for type: "
            + ",".join(str(category) for category in self.categories),
        )


class SeatLimitExceededError(InvalidPurchaseError):
    """Raised when adult and child tickets exceed the per-order limit."""

    def __init__(self, limit: int, total: int) -> None:
        self.limit = limit
        self.exceeded_by = total - limit
        super().__init__(
            code=ErrorCode.SEAT_LIMIT_EXCEEDED,
            message=f"Maximum number of tickets allowed is {limit} "
            f"but exceeded by {self.exceeded_by}",
        )


class AdultRequiredError(InvalidPurchaseError):
    """Raised when no adult ticket is actually being bought."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED,
            message="at least one adult ticket required",
        )


class AdultMissingError(InvalidPurchaseError):
    """Raised when child or infant tickets come without any adult entry."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_MISSING,
            message="infant/child cannot purchase without adult",
        )


class InfantAdultMismatchError(InvalidPurchaseError):
    """Raised when a mixed order has more infants than adults."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFANT_ADULT_MISMATCH,
            message="infant and adult count mismatch",
        )


class InsufficientAdultsError(InvalidPurchaseError):
    """Raised when infants outnumber adults."""

    def __init__(self, missing: int) -> None:
        self.missing = missing
        super().__init__(
            code=ErrorCode.INSUFFICIENT_ADULTS,
            message=f"must add {missing} more adult tickets",
        )


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account id is zero or negative."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account number",
        )
