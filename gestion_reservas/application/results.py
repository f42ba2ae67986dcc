"""
Resultados de los casos de uso.

Los casos de uso no lanzan excepciones hacia quien los llama: devuelven una
de estas variantes para que se pueda distinguir "no existe" de "falló".
"""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    entity: str
    key: object

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"{self.entity} no encontrado: {self.key}"


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    message: str

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Conflict:
    """La operación choca con datos existentes (email o nombre duplicado)."""

    message: str

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class StorageFailure:
    """Error de acceso a datos (SQL, conexión perdida)."""

    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], NotFound, ValidationFailure, Conflict, StorageFailure]


def storage_failure(logger: logging.Logger, action: str, error: Exception, **context: object) -> StorageFailure:
    """Registra el error de acceso a datos y lo convierte en StorageFailure."""
    logger.error(
        "Storage failure while trying to %s",
        action,
        exc_info=error,
        extra={"action": action, **context},
    )
    return StorageFailure(message=f"No se pudo {action}: error de acceso a datos")
