"""Pytest configuration and shared fixtures."""

from unittest.mock import create_autospec

import pytest
from rest_framework.test import APIClient

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_service():
    return create_autospec(TicketPaymentService, instance=True)


@pytest.fixture
def seat_service():
    return create_autospec(SeatReservationService, instance=True)


@pytest.fixture
def ticket_service(payment_service, seat_service) -> TicketService:
    return TicketService(payment_service=payment_service, seat_service=seat_service)


@pytest.fixture
def wired_ticket_service(monkeypatch, ticket_service) -> TicketService:
    """Make the HTTP handler and management command use the mocked service."""
    monkeypatch.setattr("tickets.handlers.views.get_ticket_service", lambda: ticket_service)
    monkeypatch.setattr(
        "tickets.management.commands.purchase_tickets.get_ticket_service", lambda: ticket_service
    )
    return ticket_service
