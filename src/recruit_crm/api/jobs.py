"""Job management API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
import structlog

from recruit_crm.auth.dependencies import get_current_tenant, get_store
from recruit_crm.core.errors import CRMError, to_http_exception
from recruit_crm.core.logging import performance_logger, error_logger
from recruit_crm.schemas.job import JobCreate, JobUpdate, JobResponse
from recruit_crm.services.job_service import JobService
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


def get_job_service(store: DocumentStore = Depends(get_store)) -> JobService:
    return JobService(store)


@router.get("", response_model=List[JobResponse])
def list_jobs(
    client_id: Optional[str] = Query(None, description="Only jobs for this client"),
    tenant_id: str = Depends(get_current_tenant),
    service: JobService = Depends(get_job_service)
):
    """List the caller's jobs."""
    try:
        with performance_logger.log_operation_time("list_jobs", tenant_id=tenant_id):
            jobs = service.list_jobs(tenant_id, client_id=client_id)
            logger.info(
                "Jobs listed via API",
                tenant_id=tenant_id,
                count=len(jobs),
                client_id=client_id
            )
            return jobs
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to fetch jobs")
    except Exception as e:
        error_logger.log_error_with_context(e, "list_jobs", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch jobs"
        )


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    job_data: JobCreate,
    tenant_id: str = Depends(get_current_tenant),
    service: JobService = Depends(get_job_service)
):
    """Create a job opening for one of the caller's clients."""
    try:
        with performance_logger.log_operation_time("create_job", tenant_id=tenant_id):
            return service.create_job(tenant_id, job_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to create job")
    except Exception as e:
        error_logger.log_error_with_context(
            e, "create_job", tenant_id=tenant_id, request_data={"title": job_data.title}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create job"
        )


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    job_data: JobUpdate,
    tenant_id: str = Depends(get_current_tenant),
    service: JobService = Depends(get_job_service)
):
    """Update a job; only provided fields change."""
    try:
        with performance_logger.log_operation_time("update_job", tenant_id=tenant_id, job_id=job_id):
            return service.update_job(tenant_id, job_id, job_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to update job")
    except Exception as e:
        error_logger.log_error_with_context(e, "update_job", tenant_id=tenant_id, job_id=job_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update job"
        )


@router.delete("/{job_id}")
def delete_job(
    job_id: str,
    tenant_id: str = Depends(get_current_tenant),
    service: JobService = Depends(get_job_service)
):
    try:
        with performance_logger.log_operation_time("delete_job", tenant_id=tenant_id, job_id=job_id):
            service.delete_job(tenant_id, job_id)
            return {"success": True}
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to delete job")
    except Exception as e:
        error_logger.log_error_with_context(e, "delete_job", tenant_id=tenant_id, job_id=job_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete job"
        )
