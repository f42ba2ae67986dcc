from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    # El sessionmaker se crea una sola vez en el lifespan de la aplicación
    async with request.app.state.sessionmaker() as session:
        yield session
