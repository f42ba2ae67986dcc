from typing import Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.application.interfaces.client_repo import NOT_FOUND_ID
from gestion_reservas.application.interfaces.property_repo import PropertyRepo
from gestion_reservas.domain.entities.rental_property import PropertyStatus, RentalProperty
from gestion_reservas.infrastructure.db.tables import propiedades


class PropertyRepoSQL(PropertyRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[RentalProperty]:
        stmt = select(propiedades).order_by(propiedades.c.id_propiedad)
        result = await self._session.execute(stmt)
        return [self._map_property(row) for row in result.mappings().all()]

    async def list_ids(self) -> Sequence[int]:
        stmt = select(propiedades.c.id_propiedad).order_by(propiedades.c.id_propiedad)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, property_id: int) -> RentalProperty | None:
        stmt = select(propiedades).where(propiedades.c.id_propiedad == property_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_property(row) if row else None

    async def find_id_by_name(self, name: str) -> int:
        stmt = select(propiedades.c.id_propiedad).where(propiedades.c.nombre == name).limit(1)
        result = await self._session.execute(stmt)
        property_id = result.scalar()
        return property_id if property_id is not None else NOT_FOUND_ID

    async def add(self, rental_property: RentalProperty) -> RentalProperty:
        stmt = insert(propiedades).values(self._values(rental_property))
        result = await self._session.execute(stmt)
        rental_property.id = result.inserted_primary_key[0]
        return rental_property

    async def modify_by_id(self, rental_property: RentalProperty) -> int:
        stmt = (
            update(propiedades)
            .where(propiedades.c.id_propiedad == rental_property.id)
            .values(self._values(rental_property))
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete_by_id(self, property_id: int) -> int:
        stmt = delete(propiedades).where(propiedades.c.id_propiedad == property_id)
        result = await self._session.execute(stmt)
        return result.rowcount

    def _values(self, rental_property: RentalProperty) -> dict:
        return {
            "nombre": rental_property.name,
            "direccion": rental_property.address,
            "ciudad": rental_property.city,
            "pais": rental_property.country,
            "precio_noche": rental_property.nightly_price,
            "capacidad": rental_property.capacity,
            "descripcion": rental_property.description,
            "estado_propiedad": rental_property.status.value,
        }

    def _map_property(self, row) -> RentalProperty:
        return RentalProperty(
            id=row["id_propiedad"],
            name=row["nombre"],
            address=row["direccion"],
            city=row["ciudad"],
            country=row["pais"],
            nightly_price=row["precio_noche"],
            capacity=row["capacidad"],
            description=row["descripcion"],
            status=PropertyStatus.parse(row["estado_propiedad"]),
        )
