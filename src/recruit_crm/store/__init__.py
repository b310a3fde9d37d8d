"""Document store backends and the factory that picks one from settings."""

import structlog

from recruit_crm.core.config import Settings
from .base import Document, DocumentStore, TENANT_FIELD
from .memory import InMemoryDocumentStore, NullDocumentStore

logger = structlog.get_logger(__name__)


def create_store(settings: Settings) -> DocumentStore:
    """Build the configured document store.

    Initialisation failures never stop the application from starting:
    the error is logged and a ``NullDocumentStore`` is returned so the
    UI can still load in a degraded mode.
    """
    backend = settings.store_backend.lower()
    try:
        if backend == "memory":
            store: DocumentStore = InMemoryDocumentStore()
        elif backend == "sql":
            from .sql import SqlDocumentStore
            store = SqlDocumentStore.from_url(
                settings.database_url, echo=settings.log_level == "DEBUG"
            )
        elif backend == "firestore":
            from .firestore import FirestoreDocumentStore
            store = FirestoreDocumentStore.from_settings(settings)
        else:
            raise ValueError(f"Unknown store backend: {settings.store_backend}")
    except Exception as e:
        logger.error(
            "Failed to initialize document store, falling back to null store",
            backend=backend,
            error=str(e),
            error_type=type(e).__name__,
        )
        return NullDocumentStore(reason=str(e))

    logger.info("Document store initialized", backend=store.name)
    return store


__all__ = [
    "Document",
    "DocumentStore",
    "TENANT_FIELD",
    "InMemoryDocumentStore",
    "NullDocumentStore",
    "create_store",
]
