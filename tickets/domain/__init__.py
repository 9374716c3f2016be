from tickets.domain.models import PurchaseResult, TicketCounts, TicketTypeRequest
from tickets.domain.rules import DEFAULT_RULES, PurchaseRules
from tickets.domain.value_objects import AccountId, TicketType

__all__ = [
    "TicketTypeRequest",
    "TicketCounts",
    "PurchaseResult",
    "PurchaseRules",
    "DEFAULT_RULES",
    "AccountId",
    "TicketType",
]
