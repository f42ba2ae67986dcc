"""Interface TransactionManager - Puerto para delimitar unidades de trabajo."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """
    Todo lo que ocurre dentro de start() se confirma junto o no se confirma.

    Los casos de uso envuelven en start() tanto las lecturas como las
    escrituras, p. ej. histórico + borrado de un pago.
    """

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
