"""Serializers for purchase requests and results."""

from rest_framework import serializers

from tickets.domain import PurchaseResult, TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Parses one ticket request into a TicketTypeRequest domain model."""

    ticket_type = serializers.ChoiceField(choices=[ticket_type.value for ticket_type in TicketType])
    no_of_tickets = serializers.IntegerField(min_value=1)

    def to_internal_value(self, data) -> TicketTypeRequest:
        validated = super().to_internal_value(data)
        return TicketTypeRequest.of(validated["ticket_type"], validated["no_of_tickets"])


class PurchaseRequestSerializer(serializers.Serializer):
    """Parses the body of a purchase request.

    Only the input format is checked here; purchase rules are the service's job.
    """

    account_id = serializers.IntegerField()
    ticket_type_requests = serializers.ListField(child=TicketTypeRequestSerializer(), allow_empty=True)


class PurchaseResultSerializer(serializers.Serializer):
    """Serializer for the PurchaseResult domain model."""

    total_amount = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    ticket_counts = serializers.SerializerMethodField()

    def get_ticket_counts(self, result: PurchaseResult) -> dict[str, int]:
        return result.ticket_counts.as_dict()
