"""Client endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from src.ledger.api.dependencies import ClientServiceDep
from src.ledger.schemas import ClientCreate, ClientDetail, ClientUpdate

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get(
    "",
    response_model=list[ClientDetail],
    summary="List clients",
    description="Newest first, each with projects, milestones and payments.",
)
async def list_clients(service: ClientServiceDep) -> list[ClientDetail]:
    clients = await service.list_clients()
    return [ClientDetail.model_validate(c) for c in clients]


@router.get(
    "/{client_id}",
    response_model=ClientDetail,
    summary="Get client",
    responses={404: {"description": "Client not found"}},
)
async def get_client(client_id: UUID, service: ClientServiceDep) -> ClientDetail:
    return ClientDetail.model_validate(await service.get_client(client_id))


@router.post(
    "",
    response_model=ClientDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create client",
)
async def create_client(request: ClientCreate, service: ClientServiceDep) -> ClientDetail:
    return ClientDetail.model_validate(await service.create_client(request))


@router.patch(
    "/{client_id}",
    response_model=ClientDetail,
    summary="Update client",
    responses={404: {"description": "Client not found"}},
)
async def update_client(
    client_id: UUID, request: ClientUpdate, service: ClientServiceDep
) -> ClientDetail:
    return ClientDetail.model_validate(await service.update_client(client_id, request))


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete client",
    description="Deletes the client with its projects, milestones, payments and time entries.",
    responses={404: {"description": "Client not found"}},
)
async def delete_client(client_id: UUID, service: ClientServiceDep) -> None:
    await service.delete_client(client_id)
