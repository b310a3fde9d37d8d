"""Pydantic schemas for Application documents.

Applications are exchanged with camelCase keys (``candidateId``,
``statusHistory``); Python code uses the snake_case field names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .base import DocumentModel, check_choice

APPLICATION_STATUSES = (
    "New",
    "Screening",
    "Interview Scheduled",
    "Interviewing",
    "Technical Round",
    "Final Round",
    "Offered",
    "Hired",
    "Rejected",
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusHistoryEntry(CamelModel):
    """One entry of the append-only status log."""

    status: str
    timestamp: str
    notes: str = ""


class ApplicationCreate(CamelModel):
    """Schema for creating a new application."""

    candidate_id: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    status: str = "New"
    notes: str = ""
    applied_at: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, APPLICATION_STATUSES)


class ApplicationUpdate(CamelModel):
    """Schema for updating an application.

    Supplying ``status`` appends one status history entry.
    """

    id: str = Field(..., min_length=1)
    status: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, APPLICATION_STATUSES)


class ApplicationResponse(DocumentModel):
    """Application document as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    user_id: str
    candidate_id: str
    job_id: str
    client_id: str
    status: str = "New"
    notes: str = ""
    applied_at: Optional[str] = None
    status_history: List[StatusHistoryEntry] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
