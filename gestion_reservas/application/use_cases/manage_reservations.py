import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from gestion_reservas.api.schemas.reservations import ReservationRequest
from gestion_reservas.application.interfaces.client_repo import ClientRepo
from gestion_reservas.application.interfaces.property_repo import PropertyRepo
from gestion_reservas.application.interfaces.reservation_repo import ReservationRepo
from gestion_reservas.application.interfaces.transaction_manager import TransactionManager
from gestion_reservas.application.results import (
    NotFound,
    Result,
    Success,
    ValidationFailure,
    storage_failure,
)
from gestion_reservas.domain.entities.reservation import (
    INITIAL_STATUSES,
    Reservation,
    ReservationStatus,
)
from gestion_reservas.domain.errors import InvalidReservationStatusError

ENTITY = "Reserva"


class ReservationUseCases:
    """
    Ciclo de vida de las reservas.

    Una reserva nace PENDING o CONFIRMED. Si enforce_transitions está activo,
    los cambios de estado posteriores se validan contra ALLOWED_TRANSITIONS;
    si no, se permite cualquier estado (edición libre).
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        client_repo: ClientRepo,
        property_repo: PropertyRepo,
        transaction_manager: TransactionManager,
        enforce_transitions: bool = True,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._client_repo = client_repo
        self._property_repo = property_repo
        self._transaction_manager = transaction_manager
        self._enforce_transitions = enforce_transitions
        self._logger = logging.getLogger(__name__)

    async def list_reservations(self) -> Result[Sequence[Reservation]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._reservation_repo.list_all())
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar reservas", exc)

    async def get_reservation(self, reservation_id: int) -> Result[Reservation]:
        try:
            async with self._transaction_manager.start():
                reservation = await self._reservation_repo.get_by_id(reservation_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "consultar la reserva", exc, reservation_id=reservation_id)
        if reservation is None:
            return NotFound(ENTITY, reservation_id)
        return Success(reservation)

    async def create_reservation(self, request: ReservationRequest) -> Result[Reservation]:
        if request.status not in INITIAL_STATUSES:
            return ValidationFailure(
                field="status",
                message="Una reserva solo puede crearse como pendiente o confirmada",
            )

        try:
            async with self._transaction_manager.start():
                missing = await self._validate_references(request)
                if missing:
                    return missing
                reservation = await self._reservation_repo.add(
                    Reservation(
                        client_id=request.client_id,
                        property_id=request.property_id,
                        start_date=request.start_date,
                        end_date=request.end_date,
                        guests=request.guests,
                        status=request.status,
                        total_price=request.total_price,
                    )
                )
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "crear la reserva", exc)

        self._logger.info(
            "Reservation created",
            extra={"reservation_id": reservation.id, "status": reservation.status.value},
        )
        return Success(reservation)

    async def update_reservation(self, reservation_id: int, request: ReservationRequest) -> Result[Reservation]:
        try:
            async with self._transaction_manager.start():
                reservation = await self._reservation_repo.get_by_id(reservation_id)
                if reservation is None:
                    return NotFound(ENTITY, reservation_id)
                missing = await self._validate_references(request)
                if missing:
                    return missing

                previous_status = reservation.status
                try:
                    if request.status == ReservationStatus.CANCELLED:
                        reservation.cancel(request.cancellation_reason, enforce=self._enforce_transitions)
                    else:
                        reservation.change_status(request.status, enforce=self._enforce_transitions)
                except InvalidReservationStatusError as exc:
                    return ValidationFailure(field="status", message=exc.message)

                reservation.client_id = request.client_id
                reservation.property_id = request.property_id
                reservation.start_date = request.start_date
                reservation.end_date = request.end_date
                reservation.guests = request.guests
                reservation.total_price = request.total_price

                if await self._reservation_repo.modify(reservation) == 0:
                    return NotFound(ENTITY, reservation_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "modificar la reserva", exc, reservation_id=reservation_id)

        if previous_status != reservation.status:
            self._logger.info(
                "Reservation status changed",
                extra={
                    "reservation_id": reservation_id,
                    "from_status": previous_status.value,
                    "to_status": reservation.status.value,
                },
            )
        return Success(reservation)

    async def delete_reservation(self, reservation_id: int) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                deleted = await self._reservation_repo.delete(reservation_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "eliminar la reserva", exc, reservation_id=reservation_id)
        if deleted == 0:
            return NotFound(ENTITY, reservation_id)
        self._logger.info("Reservation deleted", extra={"reservation_id": reservation_id})
        return Success(deleted)

    async def _validate_references(self, request: ReservationRequest) -> NotFound | None:
        if await self._client_repo.get_by_id(request.client_id) is None:
            return NotFound("Cliente", request.client_id)
        if await self._property_repo.get_by_id(request.property_id) is None:
            return NotFound("Propiedad", request.property_id)
        return None
