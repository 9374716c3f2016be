"""Builds the ticket service from Django settings."""

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.services.ticket_service import TicketService


def get_ticket_service() -> TicketService:
    """Return a TicketService wired to the configured gateways."""
    payment_service_class = import_string(settings.TICKETS_PAYMENT_SERVICE)
    seat_service_class = import_string(settings.TICKETS_SEAT_RESERVATION_SERVICE)
    return TicketService(
        payment_service=payment_service_class(),
        seat_service=seat_service_class(),
    )
