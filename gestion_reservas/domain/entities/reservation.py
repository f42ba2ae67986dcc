"""Entidad Reservation - estancia de un cliente en una propiedad."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from gestion_reservas.domain.errors import InvalidReservationStatusError


class ReservationStatus(str, Enum):
    """Estados posibles de una reserva (se guardan en minúsculas)."""

    PENDING = "pendiente"
    CONFIRMED = "confirmada"
    CANCELLED = "cancelada"

    @classmethod
    def parse(cls, raw: str) -> "ReservationStatus":
        """Acepta el valor almacenado o el nombre del miembro, sin distinguir mayúsculas."""
        normalized = (raw or "").strip()
        for status in cls:
            if normalized.lower() == status.value or normalized.upper() == status.name:
                return status
        raise ValueError(f"Estado de reserva desconocido: {raw!r}")


# Transiciones permitidas; quedarse en el mismo estado siempre es válido
ALLOWED_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset({ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED}),
    ReservationStatus.CONFIRMED: frozenset({ReservationStatus.CANCELLED}),
    ReservationStatus.CANCELLED: frozenset(),
}

INITIAL_STATUSES = frozenset({ReservationStatus.PENDING, ReservationStatus.CONFIRMED})


@dataclass
class Reservation:
    """
    Reserva de una propiedad por un cliente.

    El borrado es físico (no hay archivo). El motivo de cancelación solo
    tiene sentido cuando el estado es CANCELLED.
    """

    id: int | None = None
    client_id: int = 0
    property_id: int = 0
    start_date: date | None = None
    end_date: date | None = None
    guests: int = 1
    status: ReservationStatus = ReservationStatus.PENDING
    total_price: Decimal = Decimal("0")
    cancellation_reason: str | None = None

    # === Propiedades calculadas ===

    @property
    def is_cancelled(self) -> bool:
        return self.status == ReservationStatus.CANCELLED

    # === Métodos de negocio ===

    def can_transition_to(self, target: ReservationStatus) -> bool:
        return target == self.status or target in ALLOWED_TRANSITIONS[self.status]

    def change_status(self, target: ReservationStatus, enforce: bool = True) -> None:
        """
        Cambia el estado de la reserva.

        Con enforce=False se permite cualquier cambio (comportamiento de edición libre).
        """
        if enforce and not self.can_transition_to(target):
            raise InvalidReservationStatusError(self.status.value, target.value)
        self.status = target
        if target != ReservationStatus.CANCELLED:
            self.cancellation_reason = None

    def cancel(self, reason: str | None = None, enforce: bool = True) -> None:
        was_cancelled = self.is_cancelled
        self.change_status(ReservationStatus.CANCELLED, enforce=enforce)
        # Editar una reserva ya cancelada sin motivo conserva el anterior
        if reason is not None or not was_cancelled:
            self.cancellation_reason = reason
