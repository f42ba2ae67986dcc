from decimal import Decimal
from typing import Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.application.interfaces.reservation_repo import ReservationRepo
from gestion_reservas.domain.entities.reservation import Reservation, ReservationStatus
from gestion_reservas.infrastructure.db.tables import reservas


class ReservationRepoSQL(ReservationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[Reservation]:
        stmt = select(reservas).order_by(reservas.c.id_reserva)
        result = await self._session.execute(stmt)
        return [self._map_reservation(row) for row in result.mappings().all()]

    async def list_ids(self) -> Sequence[int]:
        stmt = select(reservas.c.id_reserva).order_by(reservas.c.id_reserva)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, reservation_id: int) -> Reservation | None:
        stmt = select(reservas).where(reservas.c.id_reserva == reservation_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_reservation(row) if row else None

    async def get_total_price(self, reservation_id: int) -> Decimal | None:
        stmt = select(reservas.c.precio_total).where(reservas.c.id_reserva == reservation_id)
        result = await self._session.execute(stmt)
        return result.scalar()

    async def add(self, reservation: Reservation) -> Reservation:
        stmt = insert(reservas).values(self._values(reservation))
        result = await self._session.execute(stmt)
        reservation.id = result.inserted_primary_key[0]
        return reservation

    async def modify(self, reservation: Reservation) -> int:
        stmt = (
            update(reservas)
            .where(reservas.c.id_reserva == reservation.id)
            .values(self._values(reservation))
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, reservation_id: int) -> int:
        stmt = delete(reservas).where(reservas.c.id_reserva == reservation_id)
        result = await self._session.execute(stmt)
        return result.rowcount

    def _values(self, reservation: Reservation) -> dict:
        return {
            "id_cliente": reservation.client_id,
            "id_propiedad": reservation.property_id,
            "fecha_inicio": reservation.start_date,
            "fecha_fin": reservation.end_date,
            "num_personas": reservation.guests,
            "estado": reservation.status.value,
            "precio_total": reservation.total_price,
            "motivo_cancelacion": reservation.cancellation_reason,
        }

    def _map_reservation(self, row) -> Reservation:
        return Reservation(
            id=row["id_reserva"],
            client_id=row["id_cliente"],
            property_id=row["id_propiedad"],
            start_date=row["fecha_inicio"],
            end_date=row["fecha_fin"],
            guests=row["num_personas"],
            status=ReservationStatus.parse(row["estado"]),
            total_price=row["precio_total"],
            cancellation_reason=row.get("motivo_cancelacion"),
        )
