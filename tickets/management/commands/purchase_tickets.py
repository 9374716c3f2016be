from django.core.management.base import BaseCommand, CommandError

from tickets.domain import TicketTypeRequest
from tickets.domain.errors import DomainError
from tickets.services.factory import get_ticket_service


def parse_ticket_request(value: str) -> TicketTypeRequest:
    """Parse a TYPE:COUNT argument such as ``ADULT:2``."""
    ticket_type, sep, count = value.partition(":")
    if not sep:
        raise CommandError(f"Expected TYPE:COUNT, got {value!r}")
    try:
        return TicketTypeRequest.of(ticket_type.strip().upper(), int(count))
    except (TypeError, ValueError) as exc:
        raise CommandError(f"Invalid ticket request {value!r}: {exc}") from exc


class Command(BaseCommand):
    help = "Buy cinema tickets for an account, e.g. purchase_tickets 1 ADULT:2 CHILD:1"

    def add_arguments(self, parser):
        parser.add_argument("account_id", type=int)
        parser.add_argument("tickets", nargs="*", metavar="TYPE:COUNT")

    def handle(self, *args, **options):
        requests = [parse_ticket_request(value) for value in options["tickets"]]

        try:
            result = get_ticket_service().purchase_tickets(options["account_id"], *requests)
        except DomainError as exc:
            raise CommandError(exc.message) from exc

        counts = ", ".join(f"{name}={count}" for name, count in result.ticket_counts.as_dict().items())
        self.stdout.write(f"Tickets: {counts}")
        self.stdout.write(f"Total amount: {result.total_amount}")
        self.stdout.write(self.style.SUCCESS(f"Seats reserved: {result.total_seats}"))
