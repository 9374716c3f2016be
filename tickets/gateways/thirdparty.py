"""Adapters for the external payment gateway and seat booking system.

The external systems are assumed to always succeed once called with
well-typed arguments, so these only check argument types and record the call.
"""

import logging

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


def _require_int(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")


class ThirdPartyPaymentService(TicketPaymentService):
    """Payment gateway adapter."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        _require_int(account_id, "accountId")
        _require_int(total_amount_to_pay, "totalAmountToPay")
        logger.info("Payment of %d taken from account %d", total_amount_to_pay, account_id)


class ThirdPartySeatReservationService(SeatReservationService):
    """Seat booking adapter."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        _require_int(account_id, "accountId")
        _require_int(total_seats_to_allocate, "totalSeatsToAllocate")
        logger.info("Reserved %d seats for account %d", total_seats_to_allocate, account_id)
