"""Stand-in gateways that record each call in the log and do nothing else."""

from loguru import logger

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway


class LoggingPaymentGateway(PaymentGateway):
    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        logger.info(f"Payment of {amount_to_pay} taken from account {account_id}")


class LoggingSeatReservationGateway(SeatReservationGateway):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info(f"{total_seats_to_allocate} seat(s) reserved for account {account_id}")
