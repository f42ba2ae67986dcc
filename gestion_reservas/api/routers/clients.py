from fastapi import APIRouter, Depends, status
from pydantic import EmailStr

from gestion_reservas.api.dependencies import get_use_cases
from gestion_reservas.api.responses import unwrap
from gestion_reservas.api.schemas.clients import ClientIdResponse, ClientRequest, ClientResponse
from gestion_reservas.api.schemas.reservations import DeletedResponse

router = APIRouter()


def _to_response(client) -> ClientResponse:
    # full_name es una propiedad calculada de la entidad
    return ClientResponse.model_validate(client)


@router.get("/clients", response_model=list[ClientResponse])
async def list_clients(use_cases=Depends(get_use_cases)):
    return [_to_response(client) for client in unwrap(await use_cases["clients"].list_clients())]


@router.post("/clients", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(payload: ClientRequest, use_cases=Depends(get_use_cases)):
    return _to_response(unwrap(await use_cases["clients"].create_client(payload)))


@router.get("/clients/by-email/{email}", response_model=ClientIdResponse)
async def find_client_id(email: EmailStr, use_cases=Depends(get_use_cases)):
    return ClientIdResponse(id=unwrap(await use_cases["clients"].find_id_by_email(email)))


@router.put("/clients/by-email/{email}", response_model=ClientResponse)
async def update_client_by_email(email: EmailStr, payload: ClientRequest, use_cases=Depends(get_use_cases)):
    return _to_response(unwrap(await use_cases["clients"].update_client_by_email(email, payload)))


@router.delete("/clients/by-email/{email}", response_model=DeletedResponse)
async def delete_client_by_email(email: EmailStr, use_cases=Depends(get_use_cases)):
    return DeletedResponse(deleted=unwrap(await use_cases["clients"].delete_client_by_email(email)))


@router.get("/clients/{client_id}", response_model=ClientResponse)
async def get_client(client_id: int, use_cases=Depends(get_use_cases)):
    return _to_response(unwrap(await use_cases["clients"].get_client(client_id)))


@router.put("/clients/{client_id}", response_model=ClientResponse)
async def update_client(client_id: int, payload: ClientRequest, use_cases=Depends(get_use_cases)):
    return _to_response(unwrap(await use_cases["clients"].update_client(client_id, payload)))


@router.delete("/clients/{client_id}", response_model=DeletedResponse)
async def delete_client(client_id: int, use_cases=Depends(get_use_cases)):
    return DeletedResponse(deleted=unwrap(await use_cases["clients"].delete_client(client_id)))
