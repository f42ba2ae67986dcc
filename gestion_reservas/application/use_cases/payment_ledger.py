import logging
from decimal import Decimal
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from gestion_reservas.api.schemas.payments import PaymentCreateRequest, PaymentUpdateRequest
from gestion_reservas.application.interfaces.clock import Clock
from gestion_reservas.application.interfaces.payment_repo import PaymentHistoryRepo, PaymentRepo
from gestion_reservas.application.interfaces.reservation_repo import ReservationRepo
from gestion_reservas.application.interfaces.transaction_manager import TransactionManager
from gestion_reservas.application.results import (
    NotFound,
    Result,
    Success,
    ValidationFailure,
    storage_failure,
)
from gestion_reservas.domain.entities.payment import Payment, PaymentHistoryEntry
from gestion_reservas.domain.value_objects.transaction_reference import TransactionReference
from gestion_reservas.infrastructure.db.retry import retry_on_conflict

ENTITY = "Pago"


class PaymentVanishedError(Exception):
    """El pago desapareció entre la lectura y el borrado."""


class PaymentLedgerUseCase:
    """
    Registro de pagos con histórico de auditoría.

    Cada alta, modificación o baja de un pago escribe una entrada en el
    histórico dentro de la misma transacción que la mutación: o se guardan
    las dos cosas o ninguna.

    La referencia de transacción (TXN001, TXN002...) se calcula a partir de
    la del último pago. La columna es UNIQUE: si dos altas concurrentes
    calculan la misma, la segunda falla y se reintenta con una referencia nueva.
    """

    def __init__(
        self,
        payment_repo: PaymentRepo,
        history_repo: PaymentHistoryRepo,
        reservation_repo: ReservationRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        max_attempts: int = 3,
    ) -> None:
        self._payment_repo = payment_repo
        self._history_repo = history_repo
        self._reservation_repo = reservation_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._max_attempts = max_attempts
        self._logger = logging.getLogger(__name__)

    # === Consultas del formulario de pagos ===

    async def next_reference(self) -> Result[str]:
        try:
            async with self._transaction_manager.start():
                last_reference = await self._payment_repo.last_reference()
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "calcular la siguiente referencia", exc)
        return Success(TransactionReference.next_after(last_reference))

    async def reservation_ids(self) -> Result[Sequence[int]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._reservation_repo.list_ids())
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar las reservas", exc)

    async def amount_for_reservation(self, reservation_id: int) -> Result[Decimal]:
        try:
            async with self._transaction_manager.start():
                total = await self._reservation_repo.get_total_price(reservation_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "consultar el importe", exc, reservation_id=reservation_id)
        if total is None:
            return NotFound("Reserva", reservation_id)
        return Success(total)

    async def list_payments(self) -> Result[Sequence[Payment]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._payment_repo.list_all())
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar pagos", exc)

    async def get_payment(self, payment_id: int) -> Result[Payment]:
        try:
            async with self._transaction_manager.start():
                payment = await self._payment_repo.get_by_id(payment_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "consultar el pago", exc, payment_id=payment_id)
        if payment is None:
            return NotFound(ENTITY, payment_id)
        return Success(payment)

    async def list_history(self, payment_id: int) -> Result[Sequence[PaymentHistoryEntry]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._history_repo.list_by_payment(payment_id))
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "consultar el histórico", exc, payment_id=payment_id)

    # === Mutaciones auditadas ===

    async def register_payment(self, request: PaymentCreateRequest) -> Result[Payment]:
        async def attempt() -> Result[Payment]:
            async with self._transaction_manager.start():
                total = await self._reservation_repo.get_total_price(request.reservation_id)
                if total is None:
                    return NotFound("Reserva", request.reservation_id)

                amount = request.amount if request.amount is not None else total
                if amount <= 0:
                    return ValidationFailure(field="amount", message="El importe debe ser mayor que 0")

                last_reference = await self._payment_repo.last_reference()
                payment = await self._payment_repo.add(
                    Payment(
                        reservation_id=request.reservation_id,
                        paid_at=self._clock.now(),
                        amount=amount,
                        method=request.method,
                        status=request.status,
                        transaction_reference=TransactionReference.next_after(last_reference),
                    )
                )
                await self._history_repo.record(PaymentHistoryEntry.for_insert(payment))
                return Success(payment)

        try:
            result = await retry_on_conflict(attempt, max_attempts=self._max_attempts)
        except SQLAlchemyError as exc:
            return storage_failure(
                self._logger, "registrar el pago", exc, reservation_id=request.reservation_id
            )

        if isinstance(result, Success):
            self._logger.info(
                "Payment registered",
                extra={
                    "payment_id": result.value.id,
                    "reservation_id": result.value.reservation_id,
                    "transaction_reference": result.value.transaction_reference,
                },
            )
        return result

    async def update_payment(self, payment_id: int, request: PaymentUpdateRequest) -> Result[Payment]:
        try:
            async with self._transaction_manager.start():
                before = await self._payment_repo.get_by_id(payment_id)
                if before is None:
                    return NotFound(ENTITY, payment_id)

                after = before.apply_changes(method=request.method, status=request.status)
                if await self._payment_repo.update_method_and_status(after) == 0:
                    return NotFound(ENTITY, payment_id)
                await self._history_repo.record(PaymentHistoryEntry.for_update(before, after))
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "modificar el pago", exc, payment_id=payment_id)

        self._logger.info(
            "Payment updated",
            extra={
                "payment_id": payment_id,
                "from_status": before.status.value,
                "to_status": after.status.value,
            },
        )
        return Success(after)

    async def delete_payment(self, payment_id: int) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                before = await self._payment_repo.get_by_id(payment_id)
                if before is None:
                    return NotFound(ENTITY, payment_id)

                # El histórico se escribe antes del borrado; si el borrado falla
                # la transacción deshace también la entrada
                await self._history_repo.record(PaymentHistoryEntry.for_delete(before))
                deleted = await self._payment_repo.delete(payment_id)
                if deleted == 0:
                    raise PaymentVanishedError(payment_id)
        except PaymentVanishedError:
            return NotFound(ENTITY, payment_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "eliminar el pago", exc, payment_id=payment_id)

        self._logger.info("Payment deleted", extra={"payment_id": payment_id})
        return Success(deleted)
