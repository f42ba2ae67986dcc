from fastapi import APIRouter, Depends, status

from gestion_reservas.api.dependencies import get_use_cases
from gestion_reservas.api.responses import unwrap
from gestion_reservas.api.schemas.properties import (
    PropertyIdResponse,
    PropertyRequest,
    PropertyResponse,
)
from gestion_reservas.api.schemas.reservations import DeletedResponse

router = APIRouter()


@router.get("/properties", response_model=list[PropertyResponse])
async def list_properties(use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["properties"].list_properties())


@router.post("/properties", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(payload: PropertyRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["properties"].create_property(payload))


@router.get("/properties/ids", response_model=list[int])
async def list_property_ids(use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["properties"].list_property_ids())


@router.get("/properties/by-name/{name}", response_model=PropertyIdResponse)
async def find_property_id(name: str, use_cases=Depends(get_use_cases)):
    return PropertyIdResponse(id=unwrap(await use_cases["properties"].find_id_by_name(name)))


@router.put("/properties/by-name/{name}", response_model=PropertyResponse)
async def update_property_by_name(name: str, payload: PropertyRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["properties"].update_property_by_name(name, payload))


@router.delete("/properties/by-name/{name}", response_model=DeletedResponse)
async def delete_property_by_name(name: str, use_cases=Depends(get_use_cases)):
    return DeletedResponse(deleted=unwrap(await use_cases["properties"].delete_property_by_name(name)))


@router.get("/properties/{property_id}", response_model=PropertyResponse)
async def get_property(property_id: int, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["properties"].get_property(property_id))


@router.put("/properties/{property_id}", response_model=PropertyResponse)
async def update_property(property_id: int, payload: PropertyRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["properties"].update_property(property_id, payload))


@router.delete("/properties/{property_id}", response_model=DeletedResponse)
async def delete_property(property_id: int, use_cases=Depends(get_use_cases)):
    return DeletedResponse(deleted=unwrap(await use_cases["properties"].delete_property(property_id)))
