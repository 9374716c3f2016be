"""Pricing and purchase limits.

Rules are immutable and owned by the service that applies them, so tests can
inject their own without touching module state.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from tickets.domain.models import TicketCounts
from tickets.domain.value_objects import TicketType

TICKET_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 25,
        TicketType.CHILD: 15,
        TicketType.INFANT: 0,
    }
)

MAX_TICKETS = 25


@dataclass(frozen=True)
class PurchaseRules:
    """Price per ticket type and the ticket limit for a single purchase."""

    prices: Mapping[TicketType, int] = field(default_factory=lambda: TICKET_PRICES)
    max_tickets: int = MAX_TICKETS

    def __post_init__(self) -> None:
        missing = [ticket_type.value for ticket_type in TicketType if ticket_type not in self.prices]
        if missing:
            raise ValueError(f"Missing prices for: {', '.join(missing)}")
        if any(price < 0 for price in self.prices.values()):
            raise ValueError("Ticket price cannot be negative")
        if self.max_tickets <= 0:
            raise ValueError("Ticket limit must be greater than zero")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def __hash__(self) -> int:
        return hash((tuple(self.prices[t] for t in TicketType), self.max_tickets))

    def price_of(self, ticket_type: TicketType) -> int:
        return self.prices[ticket_type]

    def total_amount(self, counts: TicketCounts) -> int:
        return sum(self.prices[ticket_type] * counts[ticket_type] for ticket_type in TicketType)


DEFAULT_RULES = PurchaseRules()
