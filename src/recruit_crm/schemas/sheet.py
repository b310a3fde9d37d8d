"""Pydantic schemas for candidate sheet rows."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .base import DocumentModel, check_choice

SHEET_STATUSES = ("New", "Interviewing", "Offered", "Hired", "Rejected", "Not Interested")


def sheet_name_for(client_name: str, job_title: str) -> str:
    """Partition key grouping sheet rows by client and job."""
    return f"{client_name}_{job_title}"


class SheetFields(BaseModel):
    """Free-text grid columns that are stored but never required."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    phone: str = ""
    experience: str = ""
    skills: str = ""
    current_company: str = ""
    current_salary: str = ""
    expected_salary: str = ""
    notice_period: str = ""
    linkedin_url: str = ""
    notes: str = ""


class SheetCandidateCreate(SheetFields):
    """Schema for creating a sheet row."""

    candidate_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    status: str = "New"
    client_name: str = Field(..., min_length=1)
    job_title: str = Field(..., min_length=1)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, SHEET_STATUSES)


class SheetCandidateUpdate(BaseModel):
    """Schema for updating a sheet row; only provided fields are merged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1)
    candidate_name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, min_length=1, max_length=255)
    status: Optional[str] = None
    phone: Optional[str] = None
    experience: Optional[str] = None
    skills: Optional[str] = None
    current_company: Optional[str] = None
    current_salary: Optional[str] = None
    expected_salary: Optional[str] = None
    notice_period: Optional[str] = None
    linkedin_url: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, SHEET_STATUSES)


class SheetCandidateResponse(DocumentModel):
    """Sheet row document as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    user_id: str
    candidate_name: str
    email: str
    status: str = "New"
    client_name: str
    job_title: str
    sheet_name: str
    phone: str = ""
    experience: str = ""
    skills: str = ""
    current_company: str = ""
    current_salary: str = ""
    expected_salary: str = ""
    notice_period: str = ""
    linkedin_url: str = ""
    notes: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
