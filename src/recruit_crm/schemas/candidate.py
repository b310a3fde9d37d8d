"""Pydantic schemas for Candidate documents."""

from pydantic import BaseModel, Field

from .base import SnakeCaseDocument


class CandidateCreate(BaseModel):
    """Schema for creating a new candidate."""

    full_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    phone: str = ""
    position: str = ""
    location: str = ""
    experience_years: int = Field(0, ge=0)
    status: str = "New"
    rating: int = Field(0, ge=0)
    notes: str = ""
    client: str = Field("", description="Free-text client tag")
    role: str = Field("", description="Free-text role tag")


class CandidateResponse(SnakeCaseDocument):
    """Candidate document as returned by the API."""

    full_name: str
    email: str
    phone: str = ""
    position: str = ""
    location: str = ""
    experience_years: int = 0
    status: str = "New"
    rating: int = 0
    notes: str = ""
    client: str = ""
    role: str = ""
