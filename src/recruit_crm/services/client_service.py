"""Client management service."""

from typing import List

import structlog

from recruit_crm.repositories.client import ClientRepository
from recruit_crm.schemas.client import ClientCreate, ClientUpdate, ClientResponse
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)


class ClientService:
    """Service for managing a tenant's client organisations."""

    def __init__(self, store: DocumentStore):
        self.repository = ClientRepository(store)

    def list_clients(self, tenant_id: str) -> List[ClientResponse]:
        return self.repository.list(tenant_id)

    def create_client(self, tenant_id: str, client_data: ClientCreate) -> ClientResponse:
        """Create a new client owned by the tenant.

        Args:
            tenant_id: Owning tenant
            client_data: Validated client fields, defaults applied

        Returns:
            Created client
        """
        client = self.repository.create(tenant_id, client_data.model_dump())
        logger.info("Client created", client_id=client.id, tenant_id=tenant_id, name=client.name)
        return client

    def update_client(self, tenant_id: str, client_id: str, client_data: ClientUpdate) -> ClientResponse:
        """Merge the provided fields into a client the tenant owns.

        Raises:
            NotFoundError: If the client does not exist
            OwnershipError: If the client belongs to another tenant
        """
        return self.repository.update(tenant_id, client_id, client_data.model_dump(exclude_unset=True))

    def delete_client(self, tenant_id: str, client_id: str) -> None:
        self.repository.delete(tenant_id, client_id)
