"""Pydantic schemas for API requests and stored documents."""

from .client import ClientCreate, ClientUpdate, ClientResponse
from .job import JobCreate, JobUpdate, JobResponse
from .candidate import CandidateCreate, CandidateResponse
from .application import ApplicationCreate, ApplicationUpdate, ApplicationResponse, StatusHistoryEntry
from .sheet import SheetCandidateCreate, SheetCandidateUpdate, SheetCandidateResponse

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "CandidateCreate",
    "CandidateResponse",
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationResponse",
    "StatusHistoryEntry",
    "SheetCandidateCreate",
    "SheetCandidateUpdate",
    "SheetCandidateResponse",
]
