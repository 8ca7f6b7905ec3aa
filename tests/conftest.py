"""Pytest configuration and shared fixtures."""

import pytest
from loguru import logger

from tickets.config import Settings
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.services.ticket_service import TicketService


class RecordingPaymentGateway(PaymentGateway):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, amount_to_pay))


class RecordingSeatReservationGateway(SeatReservationGateway):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))


@pytest.fixture
def gateway_calls() -> list:
    return []


@pytest.fixture
def payment_gateway(gateway_calls: list) -> RecordingPaymentGateway:
    return RecordingPaymentGateway(gateway_calls)


@pytest.fixture
def reservation_gateway(gateway_calls: list) -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway(gateway_calls)


@pytest.fixture
def ticket_service(payment_gateway, reservation_gateway) -> TicketService:
    return TicketService(payment_gateway, reservation_gateway, settings=Settings())


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
