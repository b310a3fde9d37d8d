"""Business services, one per resource."""

from .client_service import ClientService
from .job_service import JobService
from .candidate_service import CandidateService
from .application_service import ApplicationService
from .sheet_service import SheetCandidateService

__all__ = [
    "ClientService",
    "JobService",
    "CandidateService",
    "ApplicationService",
    "SheetCandidateService",
]
