"""
Capa de Dominio - Gestión de Reservas.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects y excepciones de dominio.

Estructura:
- entities/: Entidades del dominio (Client, RentalProperty, Reservation, Payment, Valuation)
- value_objects/: Objetos de valor inmutables (Money, StayDates, TransactionReference)
- errors.py: Excepciones específicas del dominio
"""

from gestion_reservas.domain.entities import (
    Client,
    Payment,
    PaymentAction,
    PaymentHistoryEntry,
    PaymentMethod,
    PaymentStatus,
    PropertyStatus,
    RentalProperty,
    Reservation,
    ReservationStatus,
    Valuation,
)
from gestion_reservas.domain.errors import (
    DomainError,
    InvalidDateRangeError,
    InvalidMoneyError,
    InvalidReservationStatusError,
)
from gestion_reservas.domain.value_objects import Money, StayDates, TransactionReference

__all__ = [
    # Entities
    "Client",
    "RentalProperty",
    "PropertyStatus",
    "Reservation",
    "ReservationStatus",
    "Payment",
    "PaymentAction",
    "PaymentHistoryEntry",
    "PaymentMethod",
    "PaymentStatus",
    "Valuation",
    # Value Objects
    "Money",
    "StayDates",
    "TransactionReference",
    # Errors
    "DomainError",
    "InvalidReservationStatusError",
    "InvalidDateRangeError",
    "InvalidMoneyError",
]
