"""Candidate repository."""

from recruit_crm.schemas.candidate import CandidateResponse
from recruit_crm.store.base import DocumentStore
from .base import TenantRepository


class CandidateRepository(TenantRepository[CandidateResponse]):
    """Repository for the ``candidates`` collection."""

    COLLECTION = "candidates"

    def __init__(self, store: DocumentStore):
        super().__init__(store, self.COLLECTION, CandidateResponse, "Candidate")
