"""Interface ValuationRepo - Puerto para persistencia de valoraciones."""

from typing import Sequence

from gestion_reservas.domain.entities.valuation import Valuation


class ValuationRepo:
    """Contrato del repositorio de valoraciones."""

    async def list_all(self) -> Sequence[Valuation]:
        raise NotImplementedError

    async def list_by_reservation(self, reservation_id: int) -> Sequence[Valuation]:
        raise NotImplementedError

    async def get_by_id(self, valuation_id: int) -> Valuation | None:
        raise NotImplementedError

    async def add(self, valuation: Valuation) -> Valuation:
        raise NotImplementedError

    async def modify_by_id(self, valuation: Valuation) -> int:
        raise NotImplementedError

    async def delete_by_id(self, valuation_id: int) -> int:
        raise NotImplementedError
