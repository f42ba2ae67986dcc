"""Entidad RentalProperty - alojamiento que se alquila por noches."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PropertyStatus(str, Enum):
    """Estados posibles de una propiedad (se guardan en minúsculas)."""

    AVAILABLE = "disponible"
    OCCUPIED = "ocupada"
    MAINTENANCE = "mantenimiento"

    @classmethod
    def parse(cls, raw: str) -> "PropertyStatus":
        """Interpreta el estado sin distinguir mayúsculas."""
        normalized = (raw or "").strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        allowed = ", ".join(s.value for s in cls)
        raise ValueError(f"El estado de la propiedad debe ser: {allowed}")


@dataclass
class RentalProperty:
    """
    Propiedad vacacional.

    El nombre es la clave de negocio usada para detectar duplicados.
    """

    id: int | None = None
    name: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    nightly_price: Decimal = Decimal("0")
    capacity: int = 1
    description: str = ""
    status: PropertyStatus = PropertyStatus.AVAILABLE
