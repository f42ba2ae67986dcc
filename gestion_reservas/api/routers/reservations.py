from fastapi import APIRouter, Depends, status

from gestion_reservas.api.dependencies import get_use_cases
from gestion_reservas.api.responses import unwrap
from gestion_reservas.api.schemas.reservations import (
    DeletedResponse,
    ReservationRequest,
    ReservationResponse,
)
from gestion_reservas.api.schemas.valuations import ValuationResponse

router = APIRouter()


@router.get("/reservations", response_model=list[ReservationResponse])
async def list_reservations(use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["reservations"].list_reservations())


@router.post(
    "/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(payload: ReservationRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["reservations"].create_reservation(payload))


@router.get("/reservations/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(reservation_id: int, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["reservations"].get_reservation(reservation_id))


@router.put("/reservations/{reservation_id}", response_model=ReservationResponse)
async def update_reservation(
    reservation_id: int,
    payload: ReservationRequest,
    use_cases=Depends(get_use_cases),
):
    return unwrap(await use_cases["reservations"].update_reservation(reservation_id, payload))


@router.delete("/reservations/{reservation_id}", response_model=DeletedResponse)
async def delete_reservation(reservation_id: int, use_cases=Depends(get_use_cases)):
    return DeletedResponse(deleted=unwrap(await use_cases["reservations"].delete_reservation(reservation_id)))


@router.get("/reservations/{reservation_id}/valuations", response_model=list[ValuationResponse])
async def list_reservation_valuations(reservation_id: int, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["valuations"].list_for_reservation(reservation_id))
