import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from gestion_reservas.api.schemas.properties import PropertyRequest
from gestion_reservas.application.interfaces.client_repo import NOT_FOUND_ID
from gestion_reservas.application.interfaces.property_repo import PropertyRepo
from gestion_reservas.application.interfaces.transaction_manager import TransactionManager
from gestion_reservas.application.results import (
    Conflict,
    NotFound,
    Result,
    Success,
    storage_failure,
)
from gestion_reservas.domain.entities.rental_property import RentalProperty

ENTITY = "Propiedad"


class PropertyUseCases:
    """Gestión del catálogo de propiedades. El nombre no puede repetirse."""

    def __init__(self, property_repo: PropertyRepo, transaction_manager: TransactionManager) -> None:
        self._property_repo = property_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def list_properties(self) -> Result[Sequence[RentalProperty]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._property_repo.list_all())
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar propiedades", exc)

    async def list_property_ids(self) -> Result[Sequence[int]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._property_repo.list_ids())
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar los ids de propiedades", exc)

    async def get_property(self, property_id: int) -> Result[RentalProperty]:
        try:
            async with self._transaction_manager.start():
                rental_property = await self._property_repo.get_by_id(property_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "consultar la propiedad", exc, property_id=property_id)
        if rental_property is None:
            return NotFound(ENTITY, property_id)
        return Success(rental_property)

    async def find_id_by_name(self, name: str) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                property_id = await self._property_repo.find_id_by_name(name)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "buscar la propiedad por nombre", exc)
        if property_id == NOT_FOUND_ID:
            return NotFound(ENTITY, name)
        return Success(property_id)

    async def create_property(self, request: PropertyRequest) -> Result[RentalProperty]:
        try:
            async with self._transaction_manager.start():
                if await self._property_repo.find_id_by_name(request.name) != NOT_FOUND_ID:
                    return Conflict(f"Ya existe una propiedad llamada {request.name}")
                rental_property = await self._property_repo.add(self._build(request))
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "crear la propiedad", exc)

        self._logger.info("Property created", extra={"property_id": rental_property.id})
        return Success(rental_property)

    async def update_property(self, property_id: int, request: PropertyRequest) -> Result[RentalProperty]:
        try:
            async with self._transaction_manager.start():
                return await self._update(property_id, request)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "modificar la propiedad", exc, property_id=property_id)

    async def update_property_by_name(self, name: str, request: PropertyRequest) -> Result[RentalProperty]:
        try:
            async with self._transaction_manager.start():
                property_id = await self._property_repo.find_id_by_name(name)
                if property_id == NOT_FOUND_ID:
                    return NotFound(ENTITY, name)
                return await self._update(property_id, request)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "modificar la propiedad", exc)

    async def delete_property(self, property_id: int) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                deleted = await self._property_repo.delete_by_id(property_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "eliminar la propiedad", exc, property_id=property_id)
        if deleted == 0:
            return NotFound(ENTITY, property_id)
        return Success(deleted)

    async def delete_property_by_name(self, name: str) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                property_id = await self._property_repo.find_id_by_name(name)
                if property_id == NOT_FOUND_ID:
                    return NotFound(ENTITY, name)
                deleted = await self._property_repo.delete_by_id(property_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "eliminar la propiedad", exc)
        return Success(deleted)

    async def _update(self, property_id: int, request: PropertyRequest) -> Result[RentalProperty]:
        if await self._property_repo.get_by_id(property_id) is None:
            return NotFound(ENTITY, property_id)

        owner_id = await self._property_repo.find_id_by_name(request.name)
        if owner_id not in (NOT_FOUND_ID, property_id):
            return Conflict(f"Ya existe otra propiedad llamada {request.name}")

        rental_property = self._build(request, property_id)
        if await self._property_repo.modify_by_id(rental_property) == 0:
            return NotFound(ENTITY, property_id)
        return Success(rental_property)

    @staticmethod
    def _build(request: PropertyRequest, property_id: int | None = None) -> RentalProperty:
        return RentalProperty(
            id=property_id,
            name=request.name,
            address=request.address,
            city=request.city,
            country=request.country,
            nightly_price=request.nightly_price,
            capacity=request.capacity,
            description=request.description,
            status=request.status,
        )
