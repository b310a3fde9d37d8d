"""Candidate sheet repository."""

from typing import List

from recruit_crm.schemas.sheet import SheetCandidateResponse, sheet_name_for
from recruit_crm.store.base import DocumentStore
from .base import TenantRepository


class SheetCandidateRepository(TenantRepository[SheetCandidateResponse]):
    """Repository for the ``candidate_sheets`` collection."""

    COLLECTION = "candidate_sheets"

    def __init__(self, store: DocumentStore):
        super().__init__(store, self.COLLECTION, SheetCandidateResponse, "Candidate")

    def list_for_sheet(self, tenant_id: str, client_name: str, job_title: str) -> List[SheetCandidateResponse]:
        return self.list(tenant_id, {"sheetName": sheet_name_for(client_name, job_title)})
