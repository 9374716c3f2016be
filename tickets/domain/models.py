"""Domain models for a ticket purchase.

These are pure domain objects with no API input rules.
They are built once per purchase and never mutated.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from tickets.domain.value_objects import TicketType


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of a single category."""

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise TypeError("ticket_type must be a TicketType")
        if isinstance(self.no_of_tickets, bool) or not isinstance(self.no_of_tickets, int):
            raise TypeError("no_of_tickets must be an integer")
        if self.no_of_tickets <= 0:
            raise ValueError("no_of_tickets must be greater than zero")

    @classmethod
    def of(cls, ticket_type: str, no_of_tickets: int) -> Self:
        return cls(ticket_type=TicketType.from_string(ticket_type), no_of_tickets=no_of_tickets)


@dataclass(frozen=True)
class TicketCounts:
    """Number of tickets per category, zero for categories not requested."""

    counts: Mapping[TicketType, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        filled = {ticket_type: 0 for ticket_type in TicketType}
        for ticket_type, count in self.counts.items():
            if not isinstance(ticket_type, TicketType):
                raise TypeError("Ticket counts must be keyed by TicketType")
            if count < 0:
                raise ValueError("Ticket count cannot be negative")
            filled[ticket_type] = count
        object.__setattr__(self, "counts", MappingProxyType(filled))

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        totals = {ticket_type: 0 for ticket_type in TicketType}
        for request in requests:
            totals[request.ticket_type] += request.no_of_tickets
        return cls(counts=totals)

    def __getitem__(self, ticket_type: TicketType) -> int:
        return self.counts[ticket_type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicketCounts):
            return NotImplemented
        return dict(self.counts) == dict(other.counts)

    def __hash__(self) -> int:
        return hash(tuple(self.counts[ticket_type] for ticket_type in TicketType))

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def seats(self) -> int:
        # Infants sit on an adult's lap.
        return self.counts[TicketType.ADULT] + self.counts[TicketType.CHILD]

    def as_dict(self) -> dict[str, int]:
        return {ticket_type.value: count for ticket_type, count in self.counts.items()}


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a successful purchase."""

    total_amount: int
    total_seats: int
    ticket_counts: TicketCounts
