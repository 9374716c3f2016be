"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a ticket purchase is rejected. Callers catch this one."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is missing or not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID",
        )


class NoTicketsRequestedError(InvalidPurchaseError):
    """Raised when a purchase contains no ticket requests."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKETS_REQUESTED,
            message="No tickets requested",
        )


class InvalidTicketRequestError(InvalidPurchaseError):
    """Raised when a purchase contains something that is not a ticket request."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUEST,
            message="Invalid ticket request",
        )


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when a purchase asks for more tickets than allowed."""

    def __init__(self, max_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Maximum {max_tickets} tickets per purchase",
        )


class AdultRequiredError(InvalidPurchaseError):
    """Raised when child or infant tickets are bought without an adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED,
            message="Child and infant tickets require at least one adult ticket",
        )
