"""Client management service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.ledger.core.errors import NotFoundError
from src.ledger.models import Client
from src.ledger.repositories import ClientRepository
from src.ledger.schemas.client import ClientCreate, ClientUpdate
from src.ledger.services.base import BaseService, apply_changes


class ClientService(BaseService):
    """Client CRUD."""

    def __init__(self, client_repo: ClientRepository, session: AsyncSession):
        super().__init__(session)
        self.client_repo = client_repo

    async def list_clients(self) -> list[Client]:
        return await self.client_repo.list_with_projects()

    async def get_client(self, client_id: UUID) -> Client:
        """Get a client with its projects, milestones and payments."""
        client = await self.client_repo.get_with_projects(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        return client

    async def create_client(self, data: ClientCreate) -> Client:
        client = Client(**data.model_dump())
        self.client_repo.add(client)
        await self.commit("create client")
        return await self.get_client(client.id)

    async def update_client(self, client_id: UUID, data: ClientUpdate) -> Client:
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)

        apply_changes(client, data.model_dump(exclude_unset=True), required=("name",))
        await self.commit("update client")
        return await self.get_client(client_id)

    async def delete_client(self, client_id: UUID) -> None:
        """Delete a client together with its projects and their dependents."""
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)

        await self.client_repo.delete(client)
        await self.commit("delete client")
