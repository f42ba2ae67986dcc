"""
Tests de los repositorios SQL contra SQLite in-memory.

- Ida y vuelta: lo que se inserta se lee igual por id
- Búsqueda por clave de negocio: id o -1
- Borrado de un id inexistente: 0 filas, el resto intacto
"""

from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from gestion_reservas.application.interfaces.client_repo import NOT_FOUND_ID
from gestion_reservas.domain.entities import (
    Client,
    Payment,
    PaymentMethod,
    PaymentStatus,
    PropertyStatus,
    RentalProperty,
    Reservation,
    ReservationStatus,
    Valuation,
)
from gestion_reservas.infrastructure.db.repositories import (
    ClientRepoSQL,
    PaymentRepoSQL,
    PropertyRepoSQL,
    ReservationRepoSQL,
    ValuationRepoSQL,
)
from gestion_reservas.infrastructure.db.tables import clientes

pytestmark = pytest.mark.asyncio


def _client(email: str = "ana@example.com") -> Client:
    return Client(
        first_name="Ana",
        last_name="García",
        email=email,
        phone="+34600111222",
        country="España",
        registered_on=date(2025, 11, 3),
    )


class TestClientRepoSQL:
    async def test_round_trip(self, db_session):
        repo = ClientRepoSQL(db_session)
        async with db_session.begin():
            created = await repo.add(_client())
            loaded = await repo.get_by_id(created.id)

        assert loaded == created

    async def test_find_id_by_email(self, db_session):
        repo = ClientRepoSQL(db_session)
        async with db_session.begin():
            created = await repo.add(_client())

            assert await repo.find_id_by_email("ana@example.com") == created.id
            assert await repo.find_id_by_email("nadie@example.com") == NOT_FOUND_ID

    async def test_modify_keeps_registration_date(self, db_session):
        repo = ClientRepoSQL(db_session)
        async with db_session.begin():
            client = await repo.add(_client())
            client.update_info("Ana María", "García", "ana@example.com", "+34600999888", "Portugal")
            client.registered_on = date(2030, 1, 1)

            assert await repo.modify_by_id(client) == 1
            loaded = await repo.get_by_id(client.id)

        assert loaded.first_name == "Ana María"
        assert loaded.country == "Portugal"
        assert loaded.registered_on == date(2025, 11, 3)

    async def test_delete_missing_id_changes_nothing(self, db_session):
        repo = ClientRepoSQL(db_session)
        async with db_session.begin():
            await repo.add(_client())

            assert await repo.delete_by_id(999) == 0
            count = (await db_session.execute(select(func.count()).select_from(clientes))).scalar()

        assert count == 1


class TestPropertyRepoSQL:
    async def test_round_trip_and_lookup(self, db_session):
        repo = PropertyRepoSQL(db_session)
        rental_property = RentalProperty(
            name="Casa del Mar",
            address="Paseo Marítimo 12",
            city="Málaga",
            country="España",
            nightly_price=Decimal("85.50"),
            capacity=4,
            description="Frente a la playa",
            status=PropertyStatus.MAINTENANCE,
        )
        async with db_session.begin():
            created = await repo.add(rental_property)
            loaded = await repo.get_by_id(created.id)
            found_id = await repo.find_id_by_name("Casa del Mar")
            missing_id = await repo.find_id_by_name("Casa del Monte")
            ids = await repo.list_ids()

        assert loaded == created
        assert found_id == created.id
        assert missing_id == NOT_FOUND_ID
        assert ids == [created.id]


class TestReservationRepoSQL:
    async def test_round_trip_modify_delete(self, db_session, seeded_reservation):
        repo = ReservationRepoSQL(db_session)
        async with db_session.begin():
            created = await repo.add(
                Reservation(
                    client_id=1,
                    property_id=1,
                    start_date=date(2025, 8, 1),
                    end_date=date(2025, 8, 4),
                    guests=3,
                    status=ReservationStatus.CONFIRMED,
                    total_price=Decimal("180.00"),
                )
            )
            assert await repo.get_by_id(created.id) == created
            assert await repo.get_total_price(created.id) == Decimal("180.00")

            created.cancel("Cambio de planes")
            assert await repo.modify(created) == 1
            loaded = await repo.get_by_id(created.id)

            assert await repo.delete(created.id) == 1
            assert await repo.delete(created.id) == 0
            remaining = await repo.list_ids()

        assert loaded.status == ReservationStatus.CANCELLED
        assert loaded.cancellation_reason == "Cambio de planes"
        assert remaining == [seeded_reservation]

    async def test_modify_missing_returns_zero(self, db_session):
        repo = ReservationRepoSQL(db_session)
        ghost = Reservation(
            id=404,
            client_id=1,
            property_id=1,
            start_date=date(2025, 8, 1),
            end_date=date(2025, 8, 2),
        )
        async with db_session.begin():
            assert await repo.modify(ghost) == 0
            assert await repo.get_total_price(404) is None


class TestPaymentRepoSQL:
    async def test_round_trip_and_last_reference(self, db_session, seeded_reservation):
        repo = PaymentRepoSQL(db_session)
        async with db_session.begin():
            assert await repo.last_reference() is None

            first = await repo.add(
                Payment(
                    reservation_id=seeded_reservation,
                    paid_at=datetime(2025, 11, 3, 12, 0),
                    amount=Decimal("60.00"),
                    method=PaymentMethod.TRANSFER,
                    status=PaymentStatus.COMPLETED,
                    transaction_reference="TXN041",
                )
            )
            loaded = await repo.get_by_id(first.id)
            last = await repo.last_reference()

        assert loaded == first
        assert last == "TXN041"


class TestValuationRepoSQL:
    async def test_several_valuations_per_reservation(self, db_session, seeded_reservation):
        repo = ValuationRepoSQL(db_session)
        async with db_session.begin():
            first = await repo.add(
                Valuation(
                    reservation_id=seeded_reservation,
                    score=5,
                    comment="Perfecto",
                    rated_at=datetime(2025, 7, 4, 10, 0),
                )
            )
            await repo.add(
                Valuation(
                    reservation_id=seeded_reservation,
                    score=3,
                    anonymous=True,
                    rated_at=datetime(2025, 7, 5, 10, 0),
                )
            )
            loaded = await repo.get_by_id(first.id)
            for_reservation = await repo.list_by_reservation(seeded_reservation)

        assert loaded == first
        assert [v.score for v in for_reservation] == [5, 3]
        assert for_reservation[1].anonymous is True
