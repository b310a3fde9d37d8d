"""Candidate management service."""

from typing import List

import structlog

from recruit_crm.repositories.candidate import CandidateRepository
from recruit_crm.schemas.candidate import CandidateCreate, CandidateResponse
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)


class CandidateService:
    """Service for the candidate directory. Candidates are list/create only."""

    def __init__(self, store: DocumentStore):
        self.repository = CandidateRepository(store)

    def list_candidates(self, tenant_id: str) -> List[CandidateResponse]:
        return self.repository.list(tenant_id)

    def create_candidate(self, tenant_id: str, candidate_data: CandidateCreate) -> CandidateResponse:
        candidate = self.repository.create(tenant_id, candidate_data.model_dump())
        logger.info("Candidate created", candidate_id=candidate.id, tenant_id=tenant_id)
        return candidate
