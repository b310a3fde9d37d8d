"""In-process document stores.

``InMemoryDocumentStore`` keeps real state and backs tests and local
exploration. ``NullDocumentStore`` is the degraded stand-in used when
the configured backend cannot be reached: it accepts writes without
keeping them, so pages still load.
"""

import copy
import threading
import time
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

import structlog

from recruit_crm.core.errors import StoreError
from .base import Document, DocumentStore

logger = structlog.get_logger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """Thread-safe dictionary-backed document store."""

    name = "memory"

    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def _collection(self, collection: str) -> Dict[str, Dict[str, Any]]:
        return self._collections.setdefault(collection, {})

    def add(self, collection: str, data: Mapping[str, Any]) -> Document:
        doc_id = uuid4().hex
        with self._lock:
            self._collection(collection)[doc_id] = copy.deepcopy(dict(data))
            return Document(id=doc_id, data=copy.deepcopy(dict(data)))

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        with self._lock:
            data = self._collection(collection).get(doc_id)
            if data is None:
                return None
            return Document(id=doc_id, data=copy.deepcopy(data))

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> Document:
        with self._lock:
            docs = self._collection(collection)
            if doc_id not in docs:
                raise StoreError(f"Document {collection}/{doc_id} does not exist")
            docs[doc_id].update(copy.deepcopy(dict(fields)))
            return Document(id=doc_id, data=copy.deepcopy(docs[doc_id]))

    def delete(self, collection: str, doc_id: str) -> None:
        with self._lock:
            self._collection(collection).pop(doc_id, None)

    def query(self, collection: str, filters: Mapping[str, Any]) -> List[Document]:
        with self._lock:
            return [
                Document(id=doc_id, data=copy.deepcopy(data))
                for doc_id, data in self._collection(collection).items()
                if all(data.get(key) == value for key, value in filters.items())
            ]


class NullDocumentStore(DocumentStore):
    """No-op store: reads find nothing, writes are acknowledged and dropped."""

    name = "null"

    def __init__(self, reason: str = "") -> None:
        self.reason = reason

    def add(self, collection: str, data: Mapping[str, Any]) -> Document:
        doc_id = f"mock-id-{int(time.time() * 1000)}"
        logger.warning("Null store dropped write", collection=collection, id=doc_id)
        return Document(id=doc_id, data=dict(data))

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        return None

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> Document:
        raise StoreError(f"Document {collection}/{doc_id} does not exist")

    def delete(self, collection: str, doc_id: str) -> None:
        pass

    def query(self, collection: str, filters: Mapping[str, Any]) -> List[Document]:
        return []

    def health_check(self) -> bool:
        return False
