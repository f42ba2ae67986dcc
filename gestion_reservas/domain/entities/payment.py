"""Entidades Payment y PaymentHistoryEntry - pagos de reservas y su histórico."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PaymentMethod(str, Enum):
    """Métodos de pago admitidos (se guardan en minúsculas)."""

    CARD = "tarjeta"
    CASH = "efectivo"
    TRANSFER = "transferencia"
    PAYPAL = "paypal"
    STRIPE = "stripe"


class PaymentStatus(str, Enum):
    """Estados posibles de un pago (se guardan en minúsculas)."""

    COMPLETED = "completado"
    PENDING = "pendiente"
    REJECTED = "rechazado"


class PaymentAction(str, Enum):
    """Tipo de mutación registrada en el histórico de pagos."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass
class Payment:
    """
    Pago asociado a una reserva.

    Tras el alta solo cambian el método y el estado; reserva, importe y
    fecha son inmutables. La referencia de transacción es única.
    """

    id: int | None = None
    reservation_id: int = 0
    paid_at: datetime | None = None
    amount: Decimal = Decimal("0")
    method: PaymentMethod = PaymentMethod.CARD
    status: PaymentStatus = PaymentStatus.PENDING
    transaction_reference: str | None = None

    def apply_changes(self, method: PaymentMethod, status: PaymentStatus) -> "Payment":
        """Devuelve una copia con los únicos campos mutables actualizados."""
        return Payment(
            id=self.id,
            reservation_id=self.reservation_id,
            paid_at=self.paid_at,
            amount=self.amount,
            method=method,
            status=status,
            transaction_reference=self.transaction_reference,
        )


@dataclass
class PaymentHistoryEntry:
    """
    Registro del histórico de pagos (solo se añade, nunca se modifica).

    La fecha la asigna la base de datos.
    """

    payment_id: int
    action: PaymentAction
    previous_status: PaymentStatus | None = None
    new_status: PaymentStatus | None = None
    previous_amount: Decimal | None = None
    new_amount: Decimal | None = None
    id: int | None = None
    recorded_at: datetime | None = None

    @classmethod
    def for_insert(cls, payment: Payment) -> "PaymentHistoryEntry":
        return cls(
            payment_id=payment.id,
            action=PaymentAction.INSERT,
            new_status=payment.status,
            new_amount=payment.amount,
        )

    @classmethod
    def for_update(cls, before: Payment, after: Payment) -> "PaymentHistoryEntry":
        return cls(
            payment_id=before.id,
            action=PaymentAction.UPDATE,
            previous_status=before.status,
            new_status=after.status,
            previous_amount=before.amount,
            new_amount=after.amount,
        )

    @classmethod
    def for_delete(cls, before: Payment) -> "PaymentHistoryEntry":
        return cls(
            payment_id=before.id,
            action=PaymentAction.DELETE,
            previous_status=before.status,
            previous_amount=before.amount,
        )
