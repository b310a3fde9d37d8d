"""Candidate sheet service."""

from typing import List, Optional

import structlog

from recruit_crm.core.errors import ValidationError
from recruit_crm.repositories.sheet import SheetCandidateRepository
from recruit_crm.schemas.sheet import (
    SheetCandidateCreate,
    SheetCandidateUpdate,
    SheetCandidateResponse,
    sheet_name_for,
)
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)


class SheetCandidateService:
    """Service behind the editable candidate sheet.

    Sheet rows are a display-oriented copy of candidates grouped by
    ``clientName_jobTitle``; they are not reconciled with the candidate
    directory.
    """

    def __init__(self, store: DocumentStore):
        self.repository = SheetCandidateRepository(store)

    def list_sheet(
        self,
        tenant_id: str,
        client_name: Optional[str],
        job_title: Optional[str]
    ) -> List[SheetCandidateResponse]:
        if not client_name or not job_title:
            raise ValidationError("clientName and jobTitle are required")
        return self.repository.list_for_sheet(tenant_id, client_name, job_title)

    def create_row(self, tenant_id: str, row_data: SheetCandidateCreate) -> SheetCandidateResponse:
        payload = row_data.model_dump(by_alias=True)
        payload["sheetName"] = sheet_name_for(row_data.client_name, row_data.job_title)

        row = self.repository.create(tenant_id, payload)
        logger.info("Sheet row created", row_id=row.id, tenant_id=tenant_id, sheet_name=row.sheet_name)
        return row

    def update_row(self, tenant_id: str, row_data: SheetCandidateUpdate) -> SheetCandidateResponse:
        fields = row_data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True, exclude={"id"})
        return self.repository.update(tenant_id, row_data.id, fields)

    def delete_row(self, tenant_id: str, row_id: str) -> None:
        self.repository.delete(tenant_id, row_id)
