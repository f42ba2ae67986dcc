"""Interface PropertyRepo - Puerto para persistencia de propiedades."""

from typing import Sequence

from gestion_reservas.domain.entities.rental_property import RentalProperty


class PropertyRepo:
    """Contrato del repositorio de propiedades."""

    async def list_all(self) -> Sequence[RentalProperty]:
        raise NotImplementedError

    async def list_ids(self) -> Sequence[int]:
        raise NotImplementedError

    async def get_by_id(self, property_id: int) -> RentalProperty | None:
        raise NotImplementedError

    async def find_id_by_name(self, name: str) -> int:
        """Retorna el id de la propiedad con ese nombre, o -1."""
        raise NotImplementedError

    async def add(self, rental_property: RentalProperty) -> RentalProperty:
        raise NotImplementedError

    async def modify_by_id(self, rental_property: RentalProperty) -> int:
        raise NotImplementedError

    async def delete_by_id(self, property_id: int) -> int:
        raise NotImplementedError
