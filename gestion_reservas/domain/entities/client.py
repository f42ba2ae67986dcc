"""Entidad Client - representa un cliente de la empresa."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Client:
    """
    Cliente que reserva propiedades.

    El email es la clave de negocio: no puede repetirse entre clientes, y la
    unicidad se comprueba en la aplicación antes de cada alta o modificación.
    """

    id: int | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    country: str = ""
    # Se fija en el alta y no cambia nunca
    registered_on: date | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def update_info(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: str,
        country: str,
    ) -> None:
        """Actualiza los datos editables conservando id y fecha de registro."""
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.phone = phone
        self.country = country
