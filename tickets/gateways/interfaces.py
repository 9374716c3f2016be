"""Gateway interfaces for the services a purchase is handed off to.

Gateways must be swappable. The ticket service only ever talks to these.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats for an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
