from typing import Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.application.interfaces.valuation_repo import ValuationRepo
from gestion_reservas.domain.entities.valuation import Valuation
from gestion_reservas.infrastructure.db.tables import valoraciones


class ValuationRepoSQL(ValuationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[Valuation]:
        stmt = select(valoraciones).order_by(valoraciones.c.id_valoracion)
        result = await self._session.execute(stmt)
        return [self._map_valuation(row) for row in result.mappings().all()]

    async def list_by_reservation(self, reservation_id: int) -> Sequence[Valuation]:
        stmt = (
            select(valoraciones)
            .where(valoraciones.c.id_reserva == reservation_id)
            .order_by(valoraciones.c.id_valoracion)
        )
        result = await self._session.execute(stmt)
        return [self._map_valuation(row) for row in result.mappings().all()]

    async def get_by_id(self, valuation_id: int) -> Valuation | None:
        stmt = select(valoraciones).where(valoraciones.c.id_valoracion == valuation_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_valuation(row) if row else None

    async def add(self, valuation: Valuation) -> Valuation:
        stmt = insert(valoraciones).values(
            id_reserva=valuation.reservation_id,
            puntuacion=valuation.score,
            comentario=valuation.comment,
            anonima=valuation.anonymous,
            fecha_valoracion=valuation.rated_at,
        )
        result = await self._session.execute(stmt)
        valuation.id = result.inserted_primary_key[0]
        return valuation

    async def modify_by_id(self, valuation: Valuation) -> int:
        stmt = (
            update(valoraciones)
            .where(valoraciones.c.id_valoracion == valuation.id)
            .values(
                id_reserva=valuation.reservation_id,
                puntuacion=valuation.score,
                comentario=valuation.comment,
                anonima=valuation.anonymous,
                fecha_valoracion=valuation.rated_at,
            )
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete_by_id(self, valuation_id: int) -> int:
        stmt = delete(valoraciones).where(valoraciones.c.id_valoracion == valuation_id)
        result = await self._session.execute(stmt)
        return result.rowcount

    def _map_valuation(self, row) -> Valuation:
        return Valuation(
            id=row["id_valoracion"],
            reservation_id=row["id_reserva"],
            score=row["puntuacion"],
            comment=row.get("comentario"),
            anonymous=bool(row["anonima"]),
            rated_at=row["fecha_valoracion"],
        )
