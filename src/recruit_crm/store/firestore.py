"""Cloud Firestore document store."""

from typing import Any, List, Mapping, Optional

from firebase_admin import firestore
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore_v1.base_query import FieldFilter
import structlog

from recruit_crm.core.config import Settings
from recruit_crm.core.errors import StoreError
from recruit_crm.core.firebase import get_firebase_app
from .base import Document, DocumentStore

logger = structlog.get_logger(__name__)


class FirestoreDocumentStore(DocumentStore):
    """Document store backed by a Firestore client."""

    name = "firestore"

    def __init__(self, client) -> None:
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirestoreDocumentStore":
        app = get_firebase_app(settings)
        return cls(firestore.client(app=app))

    @staticmethod
    def _to_document(snapshot) -> Document:
        return Document(id=snapshot.id, data=snapshot.to_dict() or {})

    def add(self, collection: str, data: Mapping[str, Any]) -> Document:
        try:
            _, ref = self.client.collection(collection).add(dict(data))
            return self._to_document(ref.get())
        except GoogleAPIError as e:
            raise StoreError(f"Failed to add document to {collection}", original_error=e) from e

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        try:
            snapshot = self.client.collection(collection).document(doc_id).get()
        except GoogleAPIError as e:
            raise StoreError(f"Failed to read {collection}/{doc_id}", original_error=e) from e
        if not snapshot.exists:
            return None
        return self._to_document(snapshot)

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> Document:
        ref = self.client.collection(collection).document(doc_id)
        try:
            ref.update(dict(fields))
            return self._to_document(ref.get())
        except GoogleAPIError as e:
            raise StoreError(f"Failed to update {collection}/{doc_id}", original_error=e) from e

    def delete(self, collection: str, doc_id: str) -> None:
        try:
            self.client.collection(collection).document(doc_id).delete()
        except GoogleAPIError as e:
            raise StoreError(f"Failed to delete {collection}/{doc_id}", original_error=e) from e

    def query(self, collection: str, filters: Mapping[str, Any]) -> List[Document]:
        query = self.client.collection(collection)
        for field_path, value in filters.items():
            query = query.where(filter=FieldFilter(field_path, "==", value))
        try:
            return [self._to_document(snapshot) for snapshot in query.stream()]
        except GoogleAPIError as e:
            raise StoreError(f"Failed to query {collection}", original_error=e) from e
