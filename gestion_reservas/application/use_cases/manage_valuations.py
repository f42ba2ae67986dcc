import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from gestion_reservas.api.schemas.valuations import ValuationRequest
from gestion_reservas.application.interfaces.clock import Clock
from gestion_reservas.application.interfaces.reservation_repo import ReservationRepo
from gestion_reservas.application.interfaces.transaction_manager import TransactionManager
from gestion_reservas.application.interfaces.valuation_repo import ValuationRepo
from gestion_reservas.application.results import NotFound, Result, Success, storage_failure
from gestion_reservas.domain.entities.valuation import Valuation

ENTITY = "Valoración"


class ValuationUseCases:
    def __init__(
        self,
        valuation_repo: ValuationRepo,
        reservation_repo: ReservationRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._valuation_repo = valuation_repo
        self._reservation_repo = reservation_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def list_valuations(self) -> Result[Sequence[Valuation]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._valuation_repo.list_all())
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar valoraciones", exc)

    async def list_for_reservation(self, reservation_id: int) -> Result[Sequence[Valuation]]:
        try:
            async with self._transaction_manager.start():
                if await self._reservation_repo.get_by_id(reservation_id) is None:
                    return NotFound("Reserva", reservation_id)
                return Success(await self._valuation_repo.list_by_reservation(reservation_id))
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar valoraciones", exc, reservation_id=reservation_id)

    async def get_valuation(self, valuation_id: int) -> Result[Valuation]:
        try:
            async with self._transaction_manager.start():
                valuation = await self._valuation_repo.get_by_id(valuation_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "consultar la valoración", exc, valuation_id=valuation_id)
        if valuation is None:
            return NotFound(ENTITY, valuation_id)
        return Success(valuation)

    async def create_valuation(self, request: ValuationRequest) -> Result[Valuation]:
        try:
            async with self._transaction_manager.start():
                if await self._reservation_repo.get_by_id(request.reservation_id) is None:
                    return NotFound("Reserva", request.reservation_id)
                valuation = await self._valuation_repo.add(self._build(request))
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "crear la valoración", exc)

        self._logger.info(
            "Valuation created",
            extra={"valuation_id": valuation.id, "reservation_id": valuation.reservation_id},
        )
        return Success(valuation)

    async def update_valuation(self, valuation_id: int, request: ValuationRequest) -> Result[Valuation]:
        try:
            async with self._transaction_manager.start():
                if await self._reservation_repo.get_by_id(request.reservation_id) is None:
                    return NotFound("Reserva", request.reservation_id)
                existing = await self._valuation_repo.get_by_id(valuation_id)
                if existing is None:
                    return NotFound(ENTITY, valuation_id)
                valuation = self._build(request, valuation_id)
                if request.rated_at is None:
                    valuation.rated_at = existing.rated_at
                if await self._valuation_repo.modify_by_id(valuation) == 0:
                    return NotFound(ENTITY, valuation_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "modificar la valoración", exc, valuation_id=valuation_id)
        return Success(valuation)

    async def delete_valuation(self, valuation_id: int) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                deleted = await self._valuation_repo.delete_by_id(valuation_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "eliminar la valoración", exc, valuation_id=valuation_id)
        if deleted == 0:
            return NotFound(ENTITY, valuation_id)
        return Success(deleted)

    def _build(self, request: ValuationRequest, valuation_id: int | None = None) -> Valuation:
        return Valuation(
            id=valuation_id,
            reservation_id=request.reservation_id,
            score=request.score,
            comment=request.comment,
            anonymous=request.anonymous,
            rated_at=request.rated_at or self._clock.now(),
        )
