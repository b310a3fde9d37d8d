"""HTTP API routers."""

from .clients import router as clients_router
from .jobs import router as jobs_router
from .candidates import router as candidates_router, sheet_router as candidate_sheet_router
from .applications import router as applications_router
from .debug import router as debug_router

__all__ = [
    "clients_router",
    "jobs_router",
    "candidates_router",
    "candidate_sheet_router",
    "applications_router",
    "debug_router",
]
