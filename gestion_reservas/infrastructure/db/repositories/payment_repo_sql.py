from typing import Sequence

from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.application.interfaces.payment_repo import PaymentHistoryRepo, PaymentRepo
from gestion_reservas.domain.entities.payment import (
    Payment,
    PaymentAction,
    PaymentHistoryEntry,
    PaymentMethod,
    PaymentStatus,
)
from gestion_reservas.infrastructure.db.tables import historico_pagos, pagos


class PaymentRepoSQL(PaymentRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[Payment]:
        stmt = select(pagos).order_by(pagos.c.id_pago)
        result = await self._session.execute(stmt)
        return [self._map_payment(row) for row in result.mappings().all()]

    async def get_by_id(self, payment_id: int) -> Payment | None:
        stmt = select(pagos).where(pagos.c.id_pago == payment_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_payment(row) if row else None

    async def last_reference(self) -> str | None:
        stmt = select(pagos.c.referencia_transaccion).order_by(pagos.c.id_pago.desc()).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar()

    async def add(self, payment: Payment) -> Payment:
        stmt = insert(pagos).values(
            id_reserva=payment.reservation_id,
            fecha_pago=payment.paid_at,
            monto=payment.amount,
            metodo_pago=payment.method.value,
            estado_pago=payment.status.value,
            referencia_transaccion=payment.transaction_reference,
        )
        result = await self._session.execute(stmt)
        payment.id = result.inserted_primary_key[0]
        return payment

    async def update_method_and_status(self, payment: Payment) -> int:
        stmt = (
            update(pagos)
            .where(pagos.c.id_pago == payment.id)
            .values(metodo_pago=payment.method.value, estado_pago=payment.status.value)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, payment_id: int) -> int:
        stmt = delete(pagos).where(pagos.c.id_pago == payment_id)
        result = await self._session.execute(stmt)
        return result.rowcount

    def _map_payment(self, row) -> Payment:
        return Payment(
            id=row["id_pago"],
            reservation_id=row["id_reserva"],
            paid_at=row["fecha_pago"],
            amount=row["monto"],
            method=PaymentMethod(row["metodo_pago"].strip().lower()),
            status=PaymentStatus(row["estado_pago"].strip().lower()),
            transaction_reference=row["referencia_transaccion"],
        )


class PaymentHistoryRepoSQL(PaymentHistoryRepo):
    """
    Escribe el histórico de pagos.

    Con use_stored_procedure=True delega en el procedimiento
    registrar_historial_pago (PostgreSQL); si no, inserta la fila directamente.
    """

    CALL_PROCEDURE = text(
        "CALL registrar_historial_pago("
        "CAST(:id_pago AS INTEGER), CAST(:accion AS VARCHAR), "
        "CAST(:estado_anterior AS VARCHAR), CAST(:estado_nuevo AS VARCHAR), "
        "CAST(:monto_anterior AS NUMERIC), CAST(:monto_nuevo AS NUMERIC))"
    )

    def __init__(self, session: AsyncSession, use_stored_procedure: bool = False) -> None:
        self._session = session
        self._use_stored_procedure = use_stored_procedure

    async def record(self, entry: PaymentHistoryEntry) -> None:
        values = {
            "id_pago": entry.payment_id,
            "accion": entry.action.value,
            "estado_anterior": entry.previous_status.value if entry.previous_status else None,
            "estado_nuevo": entry.new_status.value if entry.new_status else None,
            "monto_anterior": entry.previous_amount,
            "monto_nuevo": entry.new_amount,
        }
        if self._use_stored_procedure:
            await self._session.execute(self.CALL_PROCEDURE, values)
        else:
            await self._session.execute(insert(historico_pagos).values(values))

    async def list_by_payment(self, payment_id: int) -> Sequence[PaymentHistoryEntry]:
        stmt = (
            select(historico_pagos)
            .where(historico_pagos.c.id_pago == payment_id)
            .order_by(historico_pagos.c.id_historico)
        )
        result = await self._session.execute(stmt)
        return [self._map_entry(row) for row in result.mappings().all()]

    def _map_entry(self, row) -> PaymentHistoryEntry:
        return PaymentHistoryEntry(
            id=row["id_historico"],
            payment_id=row["id_pago"],
            action=PaymentAction(row["accion"]),
            previous_status=PaymentStatus(row["estado_anterior"]) if row["estado_anterior"] else None,
            new_status=PaymentStatus(row["estado_nuevo"]) if row["estado_nuevo"] else None,
            previous_amount=row["monto_anterior"],
            new_amount=row["monto_nuevo"],
            recorded_at=row["fecha_registro"],
        )
