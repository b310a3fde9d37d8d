"""Application management service."""

from typing import List, Optional

import structlog

from recruit_crm.core.errors import ConflictError, NotFoundError, OwnershipError
from recruit_crm.repositories.application import ApplicationRepository
from recruit_crm.repositories.base import utc_now_iso
from recruit_crm.repositories.job import JobRepository
from recruit_crm.schemas.application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationResponse,
    StatusHistoryEntry,
)
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)


class ApplicationService:
    """Service linking candidates to jobs and tracking their status history."""

    def __init__(self, store: DocumentStore):
        self.repository = ApplicationRepository(store)
        self.jobs = JobRepository(store)

    def list_applications(
        self,
        tenant_id: str,
        job_id: Optional[str] = None,
        client_id: Optional[str] = None,
        candidate_id: Optional[str] = None
    ) -> List[ApplicationResponse]:
        """List the tenant's applications, ANDing any provided reference filters."""
        return self.repository.list(
            tenant_id,
            {"jobId": job_id, "clientId": client_id, "candidateId": candidate_id}
        )

    def create_application(
        self,
        tenant_id: str,
        application_data: ApplicationCreate
    ) -> ApplicationResponse:
        """Create an application with a one-entry status history.

        Args:
            tenant_id: Owning tenant
            application_data: Validated application fields

        Returns:
            Created application

        Raises:
            ConflictError: If the tenant already has an application for
                this candidate and job
        """
        if self.repository.exists_for_pair(
            tenant_id, application_data.candidate_id, application_data.job_id
        ):
            logger.info(
                "Duplicate application rejected",
                tenant_id=tenant_id,
                candidate_id=application_data.candidate_id,
                job_id=application_data.job_id
            )
            raise ConflictError("Application already exists for this candidate and job")

        now = utc_now_iso()
        payload = application_data.model_dump(by_alias=True)
        payload["appliedAt"] = application_data.applied_at or now
        payload["statusHistory"] = [
            StatusHistoryEntry(
                status=application_data.status,
                timestamp=now,
                notes="Application created"
            ).model_dump(by_alias=True)
        ]

        application = self.repository.create(tenant_id, payload)
        self._adjust_applications_count(tenant_id, application.job_id, 1)

        logger.info(
            "Application created",
            application_id=application.id,
            tenant_id=tenant_id,
            candidate_id=application.candidate_id,
            job_id=application.job_id,
            status=application.status
        )
        return application

    def update_application(
        self,
        tenant_id: str,
        application_data: ApplicationUpdate
    ) -> ApplicationResponse:
        """Update status and/or notes; a supplied status appends one history entry.

        Raises:
            NotFoundError: If the application does not exist
            OwnershipError: If it belongs to another tenant
        """
        current = self.repository.get_owned(tenant_id, application_data.id)

        fields = {}
        if application_data.notes is not None:
            fields["notes"] = application_data.notes

        if application_data.status is not None:
            history = [entry.model_dump(by_alias=True) for entry in current.status_history]
            history.append(
                StatusHistoryEntry(
                    status=application_data.status,
                    timestamp=utc_now_iso(),
                    notes=application_data.notes or f"Status updated to {application_data.status}"
                ).model_dump(by_alias=True)
            )
            fields["status"] = application_data.status
            fields["statusHistory"] = history

        application = self.repository.update(tenant_id, application_data.id, fields)

        logger.info(
            "Application updated",
            application_id=application.id,
            tenant_id=tenant_id,
            status=application.status,
            history_length=len(application.status_history)
        )
        return application

    def delete_application(self, tenant_id: str, application_id: str) -> None:
        application = self.repository.get_owned(tenant_id, application_id)
        self.repository.delete(tenant_id, application_id)
        self._adjust_applications_count(tenant_id, application.job_id, -1)

    def _adjust_applications_count(self, tenant_id: str, job_id: str, delta: int) -> None:
        """Bump the job's denormalised application counter.

        Read-then-write without a transaction: concurrent changes to the
        same job can lose an increment.
        """
        try:
            job = self.jobs.get_owned(tenant_id, job_id)
        except (NotFoundError, OwnershipError):
            logger.info("Skipping applications_count update", job_id=job_id, tenant_id=tenant_id)
            return

        count = max(job.applications_count + delta, 0)
        self.jobs.update(tenant_id, job_id, {"applications_count": count})
