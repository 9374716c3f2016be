from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.gateways.thirdparty import ThirdPartyPaymentService, ThirdPartySeatReservationService

__all__ = [
    "TicketPaymentService",
    "SeatReservationService",
    "ThirdPartyPaymentService",
    "ThirdPartySeatReservationService",
]
