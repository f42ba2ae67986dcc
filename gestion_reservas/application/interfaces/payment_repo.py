from typing import Sequence

from gestion_reservas.domain.entities.payment import Payment, PaymentHistoryEntry


class PaymentRepo:
    async def list_all(self) -> Sequence[Payment]:
        raise NotImplementedError

    async def get_by_id(self, payment_id: int) -> Payment | None:
        raise NotImplementedError

    async def last_reference(self) -> str | None:
        """Referencia del pago con el id más alto, o None si no hay pagos."""
        raise NotImplementedError

    async def add(self, payment: Payment) -> Payment:
        raise NotImplementedError

    async def update_method_and_status(self, payment: Payment) -> int:
        raise NotImplementedError

    async def delete(self, payment_id: int) -> int:
        raise NotImplementedError


class PaymentHistoryRepo:
    async def record(self, entry: PaymentHistoryEntry) -> None:
        raise NotImplementedError

    async def list_by_payment(self, payment_id: int) -> Sequence[PaymentHistoryEntry]:
        raise NotImplementedError
