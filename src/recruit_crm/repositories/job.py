"""Job repository."""

from recruit_crm.schemas.job import JobResponse
from recruit_crm.store.base import DocumentStore
from .base import TenantRepository


class JobRepository(TenantRepository[JobResponse]):
    """Repository for the ``jobs`` collection."""

    COLLECTION = "jobs"

    def __init__(self, store: DocumentStore):
        super().__init__(store, self.COLLECTION, JobResponse, "Job")
