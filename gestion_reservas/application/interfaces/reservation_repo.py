"""Interface ReservationRepo - Puerto para persistencia de reservas."""

from decimal import Decimal
from typing import Sequence

from gestion_reservas.domain.entities.reservation import Reservation


class ReservationRepo:
    """Contrato del repositorio de reservas."""

    async def list_all(self) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_ids(self) -> Sequence[int]:
        raise NotImplementedError

    async def get_by_id(self, reservation_id: int) -> Reservation | None:
        raise NotImplementedError

    async def get_total_price(self, reservation_id: int) -> Decimal | None:
        raise NotImplementedError

    async def add(self, reservation: Reservation) -> Reservation:
        raise NotImplementedError

    async def modify(self, reservation: Reservation) -> int:
        """Actualiza todos los campos por id; retorna las filas afectadas (0 o 1)."""
        raise NotImplementedError

    async def delete(self, reservation_id: int) -> int:
        raise NotImplementedError
