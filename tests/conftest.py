"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Base de datos SQLite in-memory (una nueva por test)
- Sesión async y casos de uso cableados sobre ella
- Cliente HTTP de prueba (FastAPI TestClient)
- Datos de prueba (cliente, propiedad, reserva)
"""

from datetime import date, datetime
from decimal import Decimal
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gestion_reservas.api.dependencies import get_clock
from gestion_reservas.application.interfaces.clock import FakeClock
from gestion_reservas.application.use_cases.manage_clients import ClientUseCases
from gestion_reservas.application.use_cases.manage_properties import PropertyUseCases
from gestion_reservas.application.use_cases.manage_reservations import ReservationUseCases
from gestion_reservas.application.use_cases.manage_valuations import ValuationUseCases
from gestion_reservas.application.use_cases.payment_ledger import PaymentLedgerUseCase
from gestion_reservas.config import get_settings
from gestion_reservas.infrastructure.db.repositories import (
    ClientRepoSQL,
    PaymentHistoryRepoSQL,
    PaymentRepoSQL,
    PropertyRepoSQL,
    ReservationRepoSQL,
    ValuationRepoSQL,
)
from gestion_reservas.infrastructure.db.tables import clientes, metadata, propiedades, reservas
from gestion_reservas.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from gestion_reservas.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Engine SQLite in-memory con el esquema creado."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Sesión sin transacción abierta.

    Cada llamada a un caso de uso abre y confirma su propia transacción,
    igual que en producción.
    """
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 11, 3, 12, 0, 0))


# ============================================================================
# FIXTURES DE CASOS DE USO
# ============================================================================

@pytest.fixture
def client_use_cases(db_session, clock) -> ClientUseCases:
    return ClientUseCases(
        client_repo=ClientRepoSQL(db_session),
        transaction_manager=SQLAlchemyTransactionManager(db_session),
        clock=clock,
    )


@pytest.fixture
def property_use_cases(db_session) -> PropertyUseCases:
    return PropertyUseCases(
        property_repo=PropertyRepoSQL(db_session),
        transaction_manager=SQLAlchemyTransactionManager(db_session),
    )


@pytest.fixture
def reservation_use_cases(db_session) -> ReservationUseCases:
    return ReservationUseCases(
        reservation_repo=ReservationRepoSQL(db_session),
        client_repo=ClientRepoSQL(db_session),
        property_repo=PropertyRepoSQL(db_session),
        transaction_manager=SQLAlchemyTransactionManager(db_session),
    )


@pytest.fixture
def payment_ledger(db_session, clock) -> PaymentLedgerUseCase:
    return PaymentLedgerUseCase(
        payment_repo=PaymentRepoSQL(db_session),
        history_repo=PaymentHistoryRepoSQL(db_session),
        reservation_repo=ReservationRepoSQL(db_session),
        transaction_manager=SQLAlchemyTransactionManager(db_session),
        clock=clock,
    )


@pytest.fixture
def valuation_use_cases(db_session, clock) -> ValuationUseCases:
    return ValuationUseCases(
        valuation_repo=ValuationRepoSQL(db_session),
        reservation_repo=ReservationRepoSQL(db_session),
        transaction_manager=SQLAlchemyTransactionManager(db_session),
        clock=clock,
    )


# ============================================================================
# FIXTURES DE DATOS DE PRUEBA
# ============================================================================

@pytest_asyncio.fixture
async def seeded_reservation(db_session) -> int:
    """Inserta cliente 1, propiedad 1 y la reserva #5 (precio total 120.00)."""
    async with db_session.begin():
        await db_session.execute(
            insert(clientes).values(
                id_cliente=1,
                nombre="Lucía",
                apellidos="Fernández",
                email="lucia@example.com",
                telefono="+34600111222",
                pais="España",
                fecha_registro=date(2025, 1, 15),
            )
        )
        await db_session.execute(
            insert(propiedades).values(
                id_propiedad=1,
                nombre="Casa del Mar",
                direccion="Paseo Marítimo 12",
                ciudad="Málaga",
                pais="España",
                precio_noche=Decimal("60.00"),
                capacidad=4,
                descripcion="Apartamento frente a la playa",
                estado_propiedad="disponible",
            )
        )
        await db_session.execute(
            insert(reservas).values(
                id_reserva=5,
                id_cliente=1,
                id_propiedad=1,
                fecha_inicio=date(2025, 7, 1),
                fecha_fin=date(2025, 7, 3),
                num_personas=2,
                estado="pendiente",
                precio_total=Decimal("120.00"),
            )
        )
    return 5


@pytest.fixture
def sample_client_payload():
    return {
        "first_name": "María José",
        "last_name": "Núñez",
        "email": "maria.nunez@example.com",
        "phone": "+34611222333",
        "country": "España",
    }


@pytest.fixture
def sample_property_payload():
    return {
        "name": "Villa Olivo",
        "address": "Camino del Olivar 3",
        "city": "Granada",
        "country": "España",
        "nightly_price": "95,50",
        "capacity": 6,
        "description": "Casa rural con piscina",
        "status": "DISPONIBLE",
    }


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client(monkeypatch) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient sobre una base de datos in-memory nueva.

    El lifespan crea el engine a partir de la configuración, así que basta
    con apuntar DATABASE_URL a SQLite.
    """
    monkeypatch.setenv("DATABASE_URL", TEST_DATABASE_URL)
    monkeypatch.setenv("DATABASE_USER", "test")
    monkeypatch.setenv("DATABASE_PASSWORD", "test")
    monkeypatch.setenv("AUDIT_USE_STORED_PROCEDURE", "false")
    monkeypatch.setenv("ENFORCE_RESERVATION_TRANSITIONS", "true")
    get_settings.cache_clear()
    app.dependency_overrides[get_clock] = lambda: FakeClock(datetime(2025, 11, 3, 12, 0, 0))

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
