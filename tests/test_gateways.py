"""Tests for the third-party gateway adapters.

Run with: pytest tests/test_gateways.py -v
"""

import logging

import pytest

from tickets.gateways import ThirdPartyPaymentService, ThirdPartySeatReservationService


class TestThirdPartyPaymentService:
    """Tests for ThirdPartyPaymentService."""

    def test_make_payment_logs_call(self, caplog):
        """A well-typed payment is accepted and logged."""
        with caplog.at_level(logging.INFO, logger="tickets"):
            ThirdPartyPaymentService().make_payment(1, 65)

        assert "Payment of 65 taken from account 1" in caplog.text

    @pytest.mark.parametrize(("account_id", "amount"), [("1", 10), (1, 10.0), (None, 10), (1, True)])
    def test_make_payment_rejects_non_integers(self, account_id, amount):
        """Non-integer arguments raise TypeError."""
        with pytest.raises(TypeError):
            ThirdPartyPaymentService().make_payment(account_id, amount)


class TestThirdPartySeatReservationService:
    """Tests for ThirdPartySeatReservationService."""

    def test_reserve_seat_logs_call(self, caplog):
        """A well-typed reservation is accepted and logged."""
        with caplog.at_level(logging.INFO, logger="tickets"):
            ThirdPartySeatReservationService().reserve_seat(1, 3)

        assert "Reserved 3 seats for account 1" in caplog.text

    def test_reserve_seat_rejects_non_integer_account(self):
        """A non-integer account raises TypeError."""
        with pytest.raises(TypeError, match="accountId must be an integer"):
            ThirdPartySeatReservationService().reserve_seat("1", 3)

    def test_reserve_seat_rejects_non_integer_seats(self):
        """A non-integer seat count raises TypeError."""
        with pytest.raises(TypeError, match="totalSeatsToAllocate must be an integer"):
            ThirdPartySeatReservationService().reserve_seat(1, 2.5)
