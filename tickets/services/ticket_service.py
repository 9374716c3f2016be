"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Sequence

from tickets.domain import (
    DEFAULT_RULES,
    AccountId,
    PurchaseResult,
    PurchaseRules,
    TicketCounts,
    TicketType,
    TicketTypeRequest,
)
from tickets.domain.errors import (
    AdultRequiredError,
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    NoTicketsRequestedError,
    TicketLimitExceededError,
)
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for buying cinema tickets."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_service: SeatReservationService,
        rules: PurchaseRules = DEFAULT_RULES,
    ) -> None:
        self._payment_service = payment_service
        self._seat_service = seat_service
        self._rules = rules

    @property
    def rules(self) -> PurchaseRules:
        return self._rules

    def purchase_tickets(self, account_id: int, *ticket_type_requests: TicketTypeRequest) -> PurchaseResult:
        """Validate a purchase, take payment and reserve seats.

        Payment is taken before seats are reserved. Nothing is rolled back if
        the reservation fails; the gateway's error propagates unchanged.

        Raises:
            InvalidAccountError: If account_id is not a positive integer.
            NoTicketsRequestedError: If no ticket requests are given.
            InvalidTicketRequestError: If a request is not a TicketTypeRequest.
            TicketLimitExceededError: If more tickets than allowed are requested.
            AdultRequiredError: If child or infant tickets have no adult ticket.
        """
        try:
            account = self._parse_account(account_id)
            counts = self._aggregate(ticket_type_requests)
            self._validate_purchase_rules(counts)
        except InvalidPurchaseError as exc:
            logger.warning("Purchase rejected for account %r: %s", account_id, exc.code.value)
            raise

        total_amount = self.calculate_total_amount(counts)
        total_seats = self.calculate_total_seats(counts)

        self._payment_service.make_payment(account.value, total_amount)
        try:
            self._seat_service.reserve_seat(account.value, total_seats)
        except Exception:
            logger.error(
                "Payment of %d taken from account %d but %d seats were not reserved",
                total_amount,
                account.value,
                total_seats,
            )
            raise

        logger.info(
            "Account %d bought %d tickets for %d (%d seats)",
            account.value,
            counts.total,
            total_amount,
            total_seats,
        )
        return PurchaseResult(total_amount=total_amount, total_seats=total_seats, ticket_counts=counts)

    def calculate_total_amount(self, counts: TicketCounts) -> int:
        """Return the price of the given tickets."""
        return self._rules.total_amount(counts)

    def calculate_total_seats(self, counts: TicketCounts) -> int:
        """Return the number of seats the given tickets need."""
        return counts.seats

    @staticmethod
    def _parse_account(account_id: int) -> AccountId:
        try:
            return AccountId(account_id)
        except ValueError as exc:
            raise InvalidAccountError() from exc

    @staticmethod
    def _aggregate(ticket_type_requests: Sequence[TicketTypeRequest]) -> TicketCounts:
        if not ticket_type_requests:
            raise NoTicketsRequestedError()
        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidTicketRequestError()
        return TicketCounts.from_requests(ticket_type_requests)

    def _validate_purchase_rules(self, counts: TicketCounts) -> None:
        if counts.total > self._rules.max_tickets:
            raise TicketLimitExceededError(self._rules.max_tickets)

        if counts[TicketType.ADULT] == 0 and (counts[TicketType.CHILD] > 0 or counts[TicketType.INFANT] > 0):
            raise AdultRequiredError()
