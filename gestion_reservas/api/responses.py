"""Traducción de los resultados de los casos de uso a respuestas HTTP."""

from typing import Any

from fastapi import HTTPException, status

from gestion_reservas.application.results import (
    Conflict,
    NotFound,
    StorageFailure,
    Success,
    ValidationFailure,
)


def unwrap(result: Any) -> Any:
    """Devuelve el valor de un Success o lanza la HTTPException que corresponda."""
    if isinstance(result, Success):
        return result.value
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    if isinstance(result, ValidationFailure):
        raise HTTPException(
            status_code=422,
            detail=[{"loc": ["body", result.field], "msg": result.message, "type": "value_error"}],
        )
    if isinstance(result, Conflict):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)
    if isinstance(result, StorageFailure):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result.message)
    raise TypeError(f"Unexpected use case result: {result!r}")
