"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain.errors import DomainError
from tickets.handlers.serializers import PurchaseRequestSerializer, PurchaseResultSerializer
from tickets.services.factory import get_ticket_service


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = get_ticket_service()
        try:
            result = service.purchase_tickets(
                serializer.validated_data["account_id"],
                *serializer.validated_data["ticket_type_requests"],
            )
        except DomainError as exc:
            return domain_error_response(exc)

        return Response(PurchaseResultSerializer(result).data, status=status.HTTP_200_OK)
