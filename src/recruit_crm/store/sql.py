"""SQL-backed document store for self-hosted deployments."""

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
import structlog

from recruit_crm.core.database import DatabaseManager
from recruit_crm.core.errors import StoreError
from recruit_crm.models.document import DocumentRecord
from .base import Document, DocumentStore, TENANT_FIELD

logger = structlog.get_logger(__name__)


class SqlDocumentStore(DocumentStore):
    """Stores every collection in a single ``documents`` table.

    The tenant filter is applied in SQL; any other equality filter is
    applied to the decoded JSON payload.
    """

    name = "sql"

    def __init__(self, db_manager: DatabaseManager) -> None:
        self.db = db_manager

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "SqlDocumentStore":
        manager = DatabaseManager(database_url, echo=echo)
        manager.initialize()
        manager.create_tables()
        return cls(manager)

    @staticmethod
    def _to_document(record: DocumentRecord) -> Document:
        return Document(id=record.id, data=dict(record.data or {}))

    def add(self, collection: str, data: Mapping[str, Any]) -> Document:
        payload: Dict[str, Any] = dict(data)
        try:
            with self.db.get_session() as session:
                record = DocumentRecord(
                    id=uuid4().hex,
                    collection=collection,
                    owner_id=payload.get(TENANT_FIELD),
                    data=payload,
                )
                session.add(record)
                session.flush()
                return self._to_document(record)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to add document to {collection}", original_error=e) from e

    def _load(self, session, collection: str, doc_id: str) -> Optional[DocumentRecord]:
        return (
            session.query(DocumentRecord)
            .filter(DocumentRecord.collection == collection, DocumentRecord.id == doc_id)
            .first()
        )

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        try:
            with self.db.get_session() as session:
                record = self._load(session, collection, doc_id)
                return self._to_document(record) if record else None
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read {collection}/{doc_id}", original_error=e) from e

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> Document:
        try:
            with self.db.get_session() as session:
                record = self._load(session, collection, doc_id)
                if record is None:
                    raise StoreError(f"Document {collection}/{doc_id} does not exist")
                # JSON columns only notice reassignment, not in-place mutation
                merged = {**(record.data or {}), **dict(fields)}
                record.data = merged
                record.owner_id = merged.get(TENANT_FIELD)
                session.flush()
                return self._to_document(record)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to update {collection}/{doc_id}", original_error=e) from e

    def delete(self, collection: str, doc_id: str) -> None:
        try:
            with self.db.get_session() as session:
                record = self._load(session, collection, doc_id)
                if record is not None:
                    session.delete(record)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to delete {collection}/{doc_id}", original_error=e) from e

    def query(self, collection: str, filters: Mapping[str, Any]) -> List[Document]:
        remaining = dict(filters)
        try:
            with self.db.get_session() as session:
                query = session.query(DocumentRecord).filter(DocumentRecord.collection == collection)
                if TENANT_FIELD in remaining:
                    query = query.filter(DocumentRecord.owner_id == remaining.pop(TENANT_FIELD))
                documents = [self._to_document(record) for record in query.all()]
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to query {collection}", original_error=e) from e

        return [
            doc for doc in documents
            if all(doc.data.get(key) == value for key, value in remaining.items())
        ]

    def health_check(self) -> bool:
        return self.db.health_check()

    def close(self) -> None:
        self.db.close()
