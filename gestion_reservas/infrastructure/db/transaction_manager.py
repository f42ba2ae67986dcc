from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.application.interfaces.transaction_manager import TransactionManager


class SQLAlchemyTransactionManager(TransactionManager):
    """
    Unidad de trabajo sobre una AsyncSession.

    Si la sesión ya tiene una transacción abierta, start() se suma a ella y
    deja el commit a quien la abrió. Si no, abre una que se confirma al salir
    del bloque y se deshace si el bloque lanza una excepción.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self._session.in_transaction():
            yield
            return
        async with self._session.begin():
            yield
