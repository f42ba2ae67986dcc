import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from gestion_reservas.api.schemas.clients import ClientRequest
from gestion_reservas.application.interfaces.client_repo import NOT_FOUND_ID, ClientRepo
from gestion_reservas.application.interfaces.clock import Clock
from gestion_reservas.application.interfaces.transaction_manager import TransactionManager
from gestion_reservas.application.results import (
    Conflict,
    NotFound,
    Result,
    Success,
    storage_failure,
)
from gestion_reservas.domain.entities.client import Client

ENTITY = "Cliente"


class ClientUseCases:
    """
    Alta, consulta, modificación y baja de clientes.

    El email identifica al cliente de cara al negocio: se comprueba que no
    esté repetido antes de insertar o modificar.
    """

    def __init__(
        self,
        client_repo: ClientRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._client_repo = client_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def list_clients(self) -> Result[Sequence[Client]]:
        try:
            async with self._transaction_manager.start():
                return Success(await self._client_repo.list_all())
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "listar clientes", exc)

    async def get_client(self, client_id: int) -> Result[Client]:
        try:
            async with self._transaction_manager.start():
                client = await self._client_repo.get_by_id(client_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "consultar el cliente", exc, client_id=client_id)
        if client is None:
            return NotFound(ENTITY, client_id)
        return Success(client)

    async def find_id_by_email(self, email: str) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                client_id = await self._client_repo.find_id_by_email(email)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "buscar el cliente por email", exc)
        if client_id == NOT_FOUND_ID:
            return NotFound(ENTITY, email)
        return Success(client_id)

    async def create_client(self, request: ClientRequest) -> Result[Client]:
        try:
            async with self._transaction_manager.start():
                if await self._client_repo.find_id_by_email(request.email) != NOT_FOUND_ID:
                    return Conflict(f"Ya existe un cliente con el email {request.email}")
                client = await self._client_repo.add(
                    Client(
                        first_name=request.first_name,
                        last_name=request.last_name,
                        email=request.email,
                        phone=request.phone,
                        country=request.country,
                        registered_on=self._clock.today(),
                    )
                )
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "crear el cliente", exc)

        self._logger.info("Client created", extra={"client_id": client.id})
        return Success(client)

    async def update_client(self, client_id: int, request: ClientRequest) -> Result[Client]:
        try:
            async with self._transaction_manager.start():
                return await self._update(client_id, request)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "modificar el cliente", exc, client_id=client_id)

    async def update_client_by_email(self, email: str, request: ClientRequest) -> Result[Client]:
        try:
            async with self._transaction_manager.start():
                client_id = await self._client_repo.find_id_by_email(email)
                if client_id == NOT_FOUND_ID:
                    return NotFound(ENTITY, email)
                return await self._update(client_id, request)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "modificar el cliente", exc)

    async def delete_client(self, client_id: int) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                deleted = await self._client_repo.delete_by_id(client_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "eliminar el cliente", exc, client_id=client_id)
        if deleted == 0:
            return NotFound(ENTITY, client_id)
        self._logger.info("Client deleted", extra={"client_id": client_id})
        return Success(deleted)

    async def delete_client_by_email(self, email: str) -> Result[int]:
        try:
            async with self._transaction_manager.start():
                client_id = await self._client_repo.find_id_by_email(email)
                if client_id == NOT_FOUND_ID:
                    return NotFound(ENTITY, email)
                deleted = await self._client_repo.delete_by_id(client_id)
        except SQLAlchemyError as exc:
            return storage_failure(self._logger, "eliminar el cliente", exc)
        self._logger.info("Client deleted", extra={"client_id": client_id})
        return Success(deleted)

    async def _update(self, client_id: int, request: ClientRequest) -> Result[Client]:
        client = await self._client_repo.get_by_id(client_id)
        if client is None:
            return NotFound(ENTITY, client_id)

        # El email solo puede coincidir con el del propio cliente
        owner_id = await self._client_repo.find_id_by_email(request.email)
        if owner_id not in (NOT_FOUND_ID, client_id):
            return Conflict(f"Ya existe otro cliente con el email {request.email}")

        client.update_info(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone=request.phone,
            country=request.country,
        )
        if await self._client_repo.modify_by_id(client) == 0:
            return NotFound(ENTITY, client_id)
        return Success(client)
