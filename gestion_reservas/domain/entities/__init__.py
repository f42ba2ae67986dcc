"""Entidades del dominio de reservas."""

from gestion_reservas.domain.entities.client import Client
from gestion_reservas.domain.entities.payment import (
    Payment,
    PaymentAction,
    PaymentHistoryEntry,
    PaymentMethod,
    PaymentStatus,
)
from gestion_reservas.domain.entities.rental_property import PropertyStatus, RentalProperty
from gestion_reservas.domain.entities.reservation import (
    ALLOWED_TRANSITIONS,
    INITIAL_STATUSES,
    Reservation,
    ReservationStatus,
)
from gestion_reservas.domain.entities.valuation import Valuation

__all__ = [
    # Client
    "Client",
    # RentalProperty
    "RentalProperty",
    "PropertyStatus",
    # Reservation
    "Reservation",
    "ReservationStatus",
    "ALLOWED_TRANSITIONS",
    "INITIAL_STATUSES",
    # Payment
    "Payment",
    "PaymentAction",
    "PaymentHistoryEntry",
    "PaymentMethod",
    "PaymentStatus",
    # Valuation
    "Valuation",
]
