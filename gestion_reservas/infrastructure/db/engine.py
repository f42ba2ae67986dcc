
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gestion_reservas.config import Settings
from gestion_reservas.infrastructure.db.tables import REGISTRAR_HISTORIAL_PAGO_DDL, metadata


def build_database_url(settings: Settings) -> URL:
    missing = [
        name
        for name, value in (
            ("DATABASE_URL", settings.database_url),
            ("DATABASE_USER", settings.database_user),
            ("DATABASE_PASSWORD", settings.database_password),
        )
        if not value
    ]
    if missing:
        raise RuntimeError(f"Missing database configuration: {', '.join(missing)}")

    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        return url
    return url.set(username=settings.database_user, password=settings.database_password)


def build_engine(settings: Settings) -> AsyncEngine:
    url = build_database_url(settings)
    if url.get_backend_name() == "sqlite":
        # :memory: must be shared by every session of the process
        return create_async_engine(
            url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_schema(engine: AsyncEngine, with_stored_procedure: bool = False) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        if with_stored_procedure and engine.dialect.name == "postgresql":
            await conn.exec_driver_sql(REGISTRAR_HISTORIAL_PAGO_DDL)
