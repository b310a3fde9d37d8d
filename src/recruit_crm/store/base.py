"""Document store abstraction shared by all backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# Every stored document names its owning tenant under this key
TENANT_FIELD = "userId"


@dataclass
class Document:
    """A stored document: its generated id plus the payload."""

    id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self.data}


class DocumentStore(ABC):
    """Collection-oriented document storage.

    Backends only need equality filters; every filter passed to
    ``query`` is ANDed with the others.
    """

    name: str = "abstract"

    @abstractmethod
    def add(self, collection: str, data: Mapping[str, Any]) -> Document:
        """Insert a document with a generated id and return it as stored."""

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        """Return the document or None when it does not exist."""

    @abstractmethod
    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> Document:
        """Merge ``fields`` into an existing document and return the result."""

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> None:
        """Permanently remove a document."""

    @abstractmethod
    def query(self, collection: str, filters: Mapping[str, Any]) -> List[Document]:
        """Return all documents matching every equality filter."""

    def health_check(self) -> bool:
        return True

    def close(self) -> None:
        pass
