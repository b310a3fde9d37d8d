"""Tenant-scoped repositories, one per collection."""

from .base import TenantRepository, utc_now_iso
from .client import ClientRepository
from .job import JobRepository
from .candidate import CandidateRepository
from .application import ApplicationRepository
from .sheet import SheetCandidateRepository

__all__ = [
    "TenantRepository",
    "utc_now_iso",
    "ClientRepository",
    "JobRepository",
    "CandidateRepository",
    "ApplicationRepository",
    "SheetCandidateRepository",
]
