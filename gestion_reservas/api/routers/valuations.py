from fastapi import APIRouter, Depends, status

from gestion_reservas.api.dependencies import get_use_cases
from gestion_reservas.api.responses import unwrap
from gestion_reservas.api.schemas.reservations import DeletedResponse
from gestion_reservas.api.schemas.valuations import ValuationRequest, ValuationResponse

router = APIRouter()


@router.get("/valuations", response_model=list[ValuationResponse])
async def list_valuations(use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["valuations"].list_valuations())


@router.post("/valuations", response_model=ValuationResponse, status_code=status.HTTP_201_CREATED)
async def create_valuation(payload: ValuationRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["valuations"].create_valuation(payload))


@router.get("/valuations/{valuation_id}", response_model=ValuationResponse)
async def get_valuation(valuation_id: int, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["valuations"].get_valuation(valuation_id))


@router.put("/valuations/{valuation_id}", response_model=ValuationResponse)
async def update_valuation(valuation_id: int, payload: ValuationRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["valuations"].update_valuation(valuation_id, payload))


@router.delete("/valuations/{valuation_id}", response_model=DeletedResponse)
async def delete_valuation(valuation_id: int, use_cases=Depends(get_use_cases)):
    return DeletedResponse(deleted=unwrap(await use_cases["valuations"].delete_valuation(valuation_id)))
