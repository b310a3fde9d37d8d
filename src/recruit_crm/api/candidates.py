"""Candidate directory and candidate sheet API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
import structlog

from recruit_crm.auth.dependencies import get_current_tenant, get_store
from recruit_crm.core.errors import CRMError, to_http_exception
from recruit_crm.core.logging import performance_logger, error_logger
from recruit_crm.schemas.candidate import CandidateCreate, CandidateResponse
from recruit_crm.schemas.sheet import (
    SheetCandidateCreate,
    SheetCandidateUpdate,
    SheetCandidateResponse,
)
from recruit_crm.services.candidate_service import CandidateService
from recruit_crm.services.sheet_service import SheetCandidateService
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/candidates", tags=["candidates"])
sheet_router = APIRouter(prefix="/api/candidates/sheet", tags=["candidate-sheet"])


def get_candidate_service(store: DocumentStore = Depends(get_store)) -> CandidateService:
    return CandidateService(store)


def get_sheet_service(store: DocumentStore = Depends(get_store)) -> SheetCandidateService:
    return SheetCandidateService(store)


@router.get("", response_model=List[CandidateResponse])
def list_candidates(
    tenant_id: str = Depends(get_current_tenant),
    service: CandidateService = Depends(get_candidate_service)
):
    """List the caller's candidates."""
    try:
        with performance_logger.log_operation_time("list_candidates", tenant_id=tenant_id):
            candidates = service.list_candidates(tenant_id)
            logger.info("Candidates listed via API", tenant_id=tenant_id, count=len(candidates))
            return candidates
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to fetch candidates")
    except Exception as e:
        error_logger.log_error_with_context(e, "list_candidates", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch candidates"
        )


@router.post("", response_model=CandidateResponse, status_code=status.HTTP_201_CREATED)
def create_candidate(
    candidate_data: CandidateCreate,
    tenant_id: str = Depends(get_current_tenant),
    service: CandidateService = Depends(get_candidate_service)
):
    """Create a candidate owned by the caller."""
    try:
        with performance_logger.log_operation_time("create_candidate", tenant_id=tenant_id):
            return service.create_candidate(tenant_id, candidate_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to create candidate")
    except Exception as e:
        error_logger.log_error_with_context(e, "create_candidate", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create candidate"
        )


@sheet_router.get("", response_model=List[SheetCandidateResponse])
def list_sheet_candidates(
    client_name: Optional[str] = Query(None, alias="clientName"),
    job_title: Optional[str] = Query(None, alias="jobTitle"),
    tenant_id: str = Depends(get_current_tenant),
    service: SheetCandidateService = Depends(get_sheet_service)
):
    """List the rows of one sheet (client name + job title)."""
    try:
        with performance_logger.log_operation_time(
            "list_sheet_candidates", tenant_id=tenant_id, client_name=client_name, job_title=job_title
        ):
            return service.list_sheet(tenant_id, client_name, job_title)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to fetch candidates")
    except Exception as e:
        error_logger.log_error_with_context(e, "list_sheet_candidates", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch candidates"
        )


@sheet_router.post("", response_model=SheetCandidateResponse, status_code=status.HTTP_201_CREATED)
def create_sheet_candidate(
    row_data: SheetCandidateCreate,
    tenant_id: str = Depends(get_current_tenant),
    service: SheetCandidateService = Depends(get_sheet_service)
):
    try:
        with performance_logger.log_operation_time("create_sheet_candidate", tenant_id=tenant_id):
            return service.create_row(tenant_id, row_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to create candidate")
    except Exception as e:
        error_logger.log_error_with_context(e, "create_sheet_candidate", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create candidate"
        )


@sheet_router.put("", response_model=SheetCandidateResponse)
def update_sheet_candidate(
    row_data: SheetCandidateUpdate,
    tenant_id: str = Depends(get_current_tenant),
    service: SheetCandidateService = Depends(get_sheet_service)
):
    """Update the provided columns of a sheet row; the row id travels in the body."""
    try:
        with performance_logger.log_operation_time(
            "update_sheet_candidate", tenant_id=tenant_id, row_id=row_data.id
        ):
            return service.update_row(tenant_id, row_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to update candidate")
    except Exception as e:
        error_logger.log_error_with_context(e, "update_sheet_candidate", tenant_id=tenant_id, row_id=row_data.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update candidate"
        )


@sheet_router.delete("/{row_id}")
def delete_sheet_candidate(
    row_id: str,
    tenant_id: str = Depends(get_current_tenant),
    service: SheetCandidateService = Depends(get_sheet_service)
):
    try:
        with performance_logger.log_operation_time("delete_sheet_candidate", tenant_id=tenant_id, row_id=row_id):
            service.delete_row(tenant_id, row_id)
            return {"success": True}
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to delete candidate")
    except Exception as e:
        error_logger.log_error_with_context(e, "delete_sheet_candidate", tenant_id=tenant_id, row_id=row_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete candidate"
        )
