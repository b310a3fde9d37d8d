"""Tenant-scoped repository over a document store collection."""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

import structlog

from recruit_crm.core.errors import NotFoundError, OwnershipError
from recruit_crm.schemas.base import DocumentModel
from recruit_crm.store.base import Document, DocumentStore, TENANT_FIELD

logger = structlog.get_logger(__name__)

ModelType = TypeVar("ModelType", bound=DocumentModel)

CREATED_FIELD = "createdAt"
UPDATED_FIELD = "updatedAt"


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TenantRepository(Generic[ModelType]):
    """CRUD over one collection where every document belongs to a tenant.

    Reads are always filtered by the tenant field. Updates and deletes
    load the document first and refuse to touch it unless the caller
    owns it.
    """

    def __init__(
        self,
        store: DocumentStore,
        collection: str,
        model: Type[ModelType],
        resource_name: str
    ):
        """Initialize repository.

        Args:
            store: Document store backend
            collection: Collection name in the store
            model: Document model used to validate what is read back
            resource_name: Human-readable name used in error messages
        """
        self.store = store
        self.collection = collection
        self.model = model
        self.resource_name = resource_name

    def _validate(self, document: Document) -> ModelType:
        return self.model.from_document(document)

    def list(self, tenant_id: str, filters: Optional[Mapping[str, Any]] = None) -> List[ModelType]:
        """List the tenant's documents, ANDing every non-empty filter.

        Args:
            tenant_id: Owning tenant
            filters: Optional equality filters on stored field names

        Returns:
            Matching documents in store order
        """
        query: Dict[str, Any] = {TENANT_FIELD: tenant_id}
        for field, value in (filters or {}).items():
            if value is not None and value != "":
                query[field] = value

        documents = self.store.query(self.collection, query)
        logger.debug(
            "Documents listed",
            collection=self.collection,
            tenant_id=tenant_id,
            count=len(documents)
        )
        return [self._validate(doc) for doc in documents]

    def exists(self, tenant_id: str, filters: Mapping[str, Any]) -> bool:
        query = {TENANT_FIELD: tenant_id, **filters}
        return len(self.store.query(self.collection, query)) > 0

    def get_owned(self, tenant_id: str, doc_id: str) -> ModelType:
        """Load a document the tenant owns.

        Raises:
            NotFoundError: If the document does not exist
            OwnershipError: If another tenant owns it
        """
        document = self.store.get(self.collection, doc_id)
        if document is None:
            logger.info("Document not found", collection=self.collection, id=doc_id)
            raise NotFoundError(f"{self.resource_name} not found")

        if document.data.get(TENANT_FIELD) != tenant_id:
            logger.warning(
                "Cross-tenant access rejected",
                collection=self.collection,
                id=doc_id,
                tenant_id=tenant_id
            )
            raise OwnershipError()

        return self._validate(document)

    def create(self, tenant_id: str, data: Mapping[str, Any]) -> ModelType:
        """Insert a document stamped with owner and timestamps."""
        now = utc_now_iso()
        payload = {
            **data,
            TENANT_FIELD: tenant_id,
            CREATED_FIELD: now,
            UPDATED_FIELD: now,
        }
        document = self.store.add(self.collection, payload)

        logger.info(
            "Document created",
            collection=self.collection,
            id=document.id,
            tenant_id=tenant_id
        )
        return self._validate(document)

    def update(self, tenant_id: str, doc_id: str, fields: Mapping[str, Any]) -> ModelType:
        """Merge fields into a document the tenant owns and refresh its timestamp."""
        self.get_owned(tenant_id, doc_id)

        changes = dict(fields)
        # Ownership cannot be reassigned through an update
        changes.pop(TENANT_FIELD, None)
        changes[UPDATED_FIELD] = utc_now_iso()

        document = self.store.update(self.collection, doc_id, changes)

        logger.info(
            "Document updated",
            collection=self.collection,
            id=doc_id,
            tenant_id=tenant_id,
            fields=sorted(k for k in changes if k != UPDATED_FIELD)
        )
        return self._validate(document)

    def delete(self, tenant_id: str, doc_id: str) -> None:
        """Permanently delete a document the tenant owns."""
        self.get_owned(tenant_id, doc_id)
        self.store.delete(self.collection, doc_id)

        logger.info(
            "Document deleted",
            collection=self.collection,
            id=doc_id,
            tenant_id=tenant_id
        )
