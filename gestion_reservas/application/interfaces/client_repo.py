"""Interface ClientRepo - Puerto para persistencia de clientes."""

from typing import Sequence

from gestion_reservas.domain.entities.client import Client

NOT_FOUND_ID = -1


class ClientRepo:
    """Contrato del repositorio de clientes."""

    async def list_all(self) -> Sequence[Client]:
        raise NotImplementedError

    async def get_by_id(self, client_id: int) -> Client | None:
        raise NotImplementedError

    async def find_id_by_email(self, email: str) -> int:
        """Retorna el id del cliente con ese email, o NOT_FOUND_ID (-1)."""
        raise NotImplementedError

    async def add(self, client: Client) -> Client:
        raise NotImplementedError

    async def modify_by_id(self, client: Client) -> int:
        """Actualiza los datos editables; retorna las filas afectadas (0 o 1)."""
        raise NotImplementedError

    async def delete_by_id(self, client_id: int) -> int:
        raise NotImplementedError
