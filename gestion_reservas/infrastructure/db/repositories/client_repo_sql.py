from typing import Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.application.interfaces.client_repo import NOT_FOUND_ID, ClientRepo
from gestion_reservas.domain.entities.client import Client
from gestion_reservas.infrastructure.db.tables import clientes


class ClientRepoSQL(ClientRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[Client]:
        stmt = select(clientes).order_by(clientes.c.id_cliente)
        result = await self._session.execute(stmt)
        return [self._map_client(row) for row in result.mappings().all()]

    async def get_by_id(self, client_id: int) -> Client | None:
        stmt = select(clientes).where(clientes.c.id_cliente == client_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_client(row) if row else None

    async def find_id_by_email(self, email: str) -> int:
        stmt = select(clientes.c.id_cliente).where(clientes.c.email == email).limit(1)
        result = await self._session.execute(stmt)
        client_id = result.scalar()
        return client_id if client_id is not None else NOT_FOUND_ID

    async def add(self, client: Client) -> Client:
        stmt = insert(clientes).values(
            nombre=client.first_name,
            apellidos=client.last_name,
            email=client.email,
            telefono=client.phone,
            pais=client.country,
            fecha_registro=client.registered_on,
        )
        result = await self._session.execute(stmt)
        client.id = result.inserted_primary_key[0]
        return client

    async def modify_by_id(self, client: Client) -> int:
        # fecha_registro is set on insert only
        stmt = (
            update(clientes)
            .where(clientes.c.id_cliente == client.id)
            .values(
                nombre=client.first_name,
                apellidos=client.last_name,
                email=client.email,
                telefono=client.phone,
                pais=client.country,
            )
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete_by_id(self, client_id: int) -> int:
        stmt = delete(clientes).where(clientes.c.id_cliente == client_id)
        result = await self._session.execute(stmt)
        return result.rowcount

    def _map_client(self, row) -> Client:
        return Client(
            id=row["id_cliente"],
            first_name=row["nombre"],
            last_name=row["apellidos"],
            email=row["email"],
            phone=row["telefono"],
            country=row.get("pais") or "",
            registered_on=row["fecha_registro"],
        )
