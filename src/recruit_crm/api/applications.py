"""Application pipeline API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
import structlog

from recruit_crm.auth.dependencies import get_current_tenant, get_store
from recruit_crm.core.errors import CRMError, to_http_exception
from recruit_crm.core.logging import performance_logger, error_logger
from recruit_crm.schemas.application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationResponse,
)
from recruit_crm.services.application_service import ApplicationService
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])


def get_application_service(store: DocumentStore = Depends(get_store)) -> ApplicationService:
    return ApplicationService(store)


@router.get("", response_model=List[ApplicationResponse])
def list_applications(
    job_id: Optional[str] = Query(None, alias="jobId"),
    client_id: Optional[str] = Query(None, alias="clientId"),
    candidate_id: Optional[str] = Query(None, alias="candidateId"),
    tenant_id: str = Depends(get_current_tenant),
    service: ApplicationService = Depends(get_application_service)
):
    """List applications with optional filtering.

    Supports filtering by job, client and candidate; filters are ANDed
    and results are always limited to the caller's applications.
    """
    try:
        with performance_logger.log_operation_time("list_applications", tenant_id=tenant_id):
            applications = service.list_applications(
                tenant_id,
                job_id=job_id,
                client_id=client_id,
                candidate_id=candidate_id
            )
            logger.info(
                "Applications listed via API",
                tenant_id=tenant_id,
                count=len(applications),
                filters={"jobId": job_id, "clientId": client_id, "candidateId": candidate_id}
            )
            return applications
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to fetch applications")
    except Exception as e:
        error_logger.log_error_with_context(e, "list_applications", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch applications"
        )


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def create_application(
    application_data: ApplicationCreate,
    tenant_id: str = Depends(get_current_tenant),
    service: ApplicationService = Depends(get_application_service)
):
    """Create an application; a second one for the same candidate and job is a 409."""
    try:
        with performance_logger.log_operation_time(
            "create_application",
            tenant_id=tenant_id,
            candidate_id=application_data.candidate_id,
            job_id=application_data.job_id
        ):
            return service.create_application(tenant_id, application_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to create application")
    except Exception as e:
        error_logger.log_error_with_context(e, "create_application", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create application"
        )


@router.put("", response_model=ApplicationResponse)
def update_application(
    application_data: ApplicationUpdate,
    tenant_id: str = Depends(get_current_tenant),
    service: ApplicationService = Depends(get_application_service)
):
    """Update an application's status or notes; the id travels in the body."""
    try:
        with performance_logger.log_operation_time(
            "update_application", tenant_id=tenant_id, application_id=application_data.id
        ):
            return service.update_application(tenant_id, application_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to update application")
    except Exception as e:
        error_logger.log_error_with_context(
            e, "update_application", tenant_id=tenant_id, application_id=application_data.id
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update application"
        )


@router.delete("/{application_id}")
def delete_application(
    application_id: str,
    tenant_id: str = Depends(get_current_tenant),
    service: ApplicationService = Depends(get_application_service)
):
    try:
        with performance_logger.log_operation_time(
            "delete_application", tenant_id=tenant_id, application_id=application_id
        ):
            service.delete_application(tenant_id, application_id)
            return {"success": True}
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to delete application")
    except Exception as e:
        error_logger.log_error_with_context(
            e, "delete_application", tenant_id=tenant_id, application_id=application_id
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete application"
        )
