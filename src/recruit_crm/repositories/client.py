"""Client repository."""

from recruit_crm.schemas.client import ClientResponse
from recruit_crm.store.base import DocumentStore
from .base import TenantRepository


class ClientRepository(TenantRepository[ClientResponse]):
    """Repository for the ``clients`` collection."""

    COLLECTION = "clients"

    def __init__(self, store: DocumentStore):
        super().__init__(store, self.COLLECTION, ClientResponse, "Client")
