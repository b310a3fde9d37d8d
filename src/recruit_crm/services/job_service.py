"""Job management service."""

from typing import List, Optional

import structlog

from recruit_crm.repositories.base import utc_now_iso
from recruit_crm.repositories.job import JobRepository
from recruit_crm.schemas.job import JobCreate, JobUpdate, JobResponse
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)


class JobService:
    """Service for managing job openings."""

    def __init__(self, store: DocumentStore):
        self.repository = JobRepository(store)

    def list_jobs(self, tenant_id: str, client_id: Optional[str] = None) -> List[JobResponse]:
        """List the tenant's jobs, optionally for a single client."""
        return self.repository.list(tenant_id, {"client_id": client_id})

    def create_job(self, tenant_id: str, job_data: JobCreate) -> JobResponse:
        """Create a job with zero applications, posted now.

        Args:
            tenant_id: Owning tenant
            job_data: Validated job fields

        Returns:
            Created job
        """
        payload = job_data.model_dump()
        if payload.get("deadline") is None:
            # Firestore keeps explicit nulls; absent means "no deadline"
            payload.pop("deadline", None)
        payload["applications_count"] = 0
        payload["posted_date"] = utc_now_iso()

        job = self.repository.create(tenant_id, payload)
        logger.info(
            "Job created",
            job_id=job.id,
            tenant_id=tenant_id,
            client_id=job.client_id,
            title=job.title
        )
        return job

    def update_job(self, tenant_id: str, job_id: str, job_data: JobUpdate) -> JobResponse:
        return self.repository.update(tenant_id, job_id, job_data.model_dump(exclude_unset=True))

    def delete_job(self, tenant_id: str, job_id: str) -> None:
        self.repository.delete(tenant_id, job_id)
