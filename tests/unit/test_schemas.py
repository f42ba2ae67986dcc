"""
Tests de validación de formularios (schemas Pydantic).

Cada regla rechazada debe producir un ValidationError de Pydantic, que la
API traduce a 422.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from gestion_reservas.api.schemas.clients import ClientRequest
from gestion_reservas.api.schemas.payments import PaymentCreateRequest, PaymentUpdateRequest
from gestion_reservas.api.schemas.properties import PropertyRequest
from gestion_reservas.api.schemas.reservations import ReservationRequest
from gestion_reservas.api.schemas.valuations import ValuationRequest
from gestion_reservas.domain.entities.payment import PaymentMethod, PaymentStatus
from gestion_reservas.domain.entities.rental_property import PropertyStatus
from gestion_reservas.domain.entities.reservation import ReservationStatus


def _client(**overrides):
    data = {
        "first_name": "Ángela",
        "last_name": "De la Peña",
        "email": "angela@example.com",
        "phone": "+34600111222",
        "country": "España",
    }
    data.update(overrides)
    return ClientRequest(**data)


def _reservation(**overrides):
    data = {
        "client_id": 1,
        "property_id": 1,
        "start_date": "2025-07-01",
        "end_date": "2025-07-08",
        "guests": 2,
        "total_price": "595.00",
    }
    data.update(overrides)
    return ReservationRequest(**data)


class TestClientRequest:
    def test_accented_names_accepted(self):
        client = _client(first_name="  José Ñandú ")
        assert client.first_name == "José Ñandú"

    @pytest.mark.parametrize("name", ["", "   ", "Ana3", "O'Brien", "Ana-María"])
    def test_names_only_letters_and_spaces(self, name):
        with pytest.raises(ValidationError):
            _client(first_name=name)

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError):
            _client(email=email)

    @pytest.mark.parametrize("phone", ["+1234567", "+123456789012345"])
    def test_e164_phone_accepted(self, phone):
        assert _client(phone=phone).phone == phone

    @pytest.mark.parametrize("phone", ["600111222", "+123456", "+1234567890123456", "+34 600 111 222"])
    def test_non_e164_phone_rejected(self, phone):
        with pytest.raises(ValidationError):
            _client(phone=phone)


class TestPropertyRequest:
    def _data(self, **overrides):
        data = {
            "name": "Casa del Mar",
            "address": "Paseo Marítimo 12",
            "city": "Málaga",
            "country": "España",
            "nightly_price": "85,50",
            "capacity": 4,
            "description": "Frente a la playa",
            "status": "Disponible",
        }
        data.update(overrides)
        return data

    def test_status_case_insensitive_and_price_with_comma(self):
        request = PropertyRequest(**self._data())

        assert request.status == PropertyStatus.AVAILABLE
        assert request.nightly_price == Decimal("85.50")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "x" * 101},
            {"address": ""},
            {"city": " "},
            {"country": "x" * 51},
            {"nightly_price": "0"},
            {"nightly_price": "-10"},
            {"capacity": 0},
            {"description": "x" * 501},
            {"status": "reservada"},
        ],
    )
    def test_rejected(self, overrides):
        with pytest.raises(ValidationError):
            PropertyRequest(**self._data(**overrides))


class TestReservationRequest:
    def test_defaults_to_pending(self):
        assert _reservation().status == ReservationStatus.PENDING

    @pytest.mark.parametrize("end_date", ["2025-07-01", "2025-06-30"])
    def test_end_date_must_be_after_start(self, end_date):
        with pytest.raises(ValidationError):
            _reservation(end_date=end_date)

    def test_guests_at_least_one(self):
        with pytest.raises(ValidationError):
            _reservation(guests=0)

    def test_reason_only_when_cancelled(self):
        with pytest.raises(ValidationError):
            _reservation(status="confirmada", cancellation_reason="No viene")

        cancelled = _reservation(status="CANCELLED", cancellation_reason="No viene")
        assert cancelled.cancellation_reason == "No viene"

    def test_blank_reason_is_dropped(self):
        assert _reservation(cancellation_reason="   ").cancellation_reason is None


class TestPaymentRequests:
    def test_comma_amount_normalized(self):
        request = PaymentCreateRequest(reservation_id=5, amount="120,00", method="CASH", status="pendiente")

        assert request.amount == Decimal("120.00")
        assert request.method == PaymentMethod.CASH
        assert request.status == PaymentStatus.PENDING

    def test_amount_optional(self):
        request = PaymentCreateRequest(reservation_id=5, method="tarjeta", status="completado")
        assert request.amount is None

    @pytest.mark.parametrize("amount", ["0", "-1", "doce", "0,00"])
    def test_amount_must_be_positive_number(self, amount):
        with pytest.raises(ValidationError):
            PaymentCreateRequest(reservation_id=5, amount=amount, method="CASH", status="PENDING")

    def test_method_and_status_required(self):
        with pytest.raises(ValidationError):
            PaymentCreateRequest(reservation_id=5, amount="10")
        with pytest.raises(ValidationError):
            PaymentUpdateRequest(method="bitcoin", status="pendiente")


class TestValuationRequest:
    @pytest.mark.parametrize("score", [0, 6])
    def test_score_range(self, score):
        with pytest.raises(ValidationError):
            ValuationRequest(reservation_id=1, score=score)

    def test_comment_length(self):
        with pytest.raises(ValidationError):
            ValuationRequest(reservation_id=1, score=4, comment="x" * 501)
