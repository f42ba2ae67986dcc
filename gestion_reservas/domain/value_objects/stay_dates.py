"""Value Object StayDates - fechas de entrada y salida de una estancia."""

from dataclasses import dataclass
from datetime import date

from gestion_reservas.domain.errors import InvalidDateRangeError


@dataclass(frozen=True)
class StayDates:
    """
    Value Object inmutable que representa el rango de una estancia.

    Attributes:
        start: Fecha de entrada.
        end: Fecha de salida (posterior a la de entrada).
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidDateRangeError(
                f"La fecha de fin debe ser posterior a la de inicio: {self.start} >= {self.end}"
            )

    @property
    def nights(self) -> int:
        """Número de noches de la estancia."""
        return (self.end - self.start).days

    def overlaps_with(self, other: "StayDates") -> bool:
        """Verifica si esta estancia se superpone con otra."""
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"
