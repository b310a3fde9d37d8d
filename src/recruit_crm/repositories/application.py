"""Application repository."""

from recruit_crm.schemas.application import ApplicationResponse
from recruit_crm.store.base import DocumentStore
from .base import TenantRepository


class ApplicationRepository(TenantRepository[ApplicationResponse]):
    """Repository for the ``applications`` collection."""

    COLLECTION = "applications"

    def __init__(self, store: DocumentStore):
        super().__init__(store, self.COLLECTION, ApplicationResponse, "Application")

    def exists_for_pair(self, tenant_id: str, candidate_id: str, job_id: str) -> bool:
        """Whether the tenant already has an application for this candidate and job.

        This is a plain query; nothing stops a concurrent insert between
        this check and the caller's write.
        """
        return self.exists(tenant_id, {"candidateId": candidate_id, "jobId": job_id})
