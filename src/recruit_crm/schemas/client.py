"""Pydantic schemas for Client documents."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import SnakeCaseDocument, check_choice

CLIENT_STATUSES = ("Active", "Warm", "Cold")


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=255, description="Client organization name")
    industry: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    location: str = ""
    status: str = "Cold"
    employees_range: str = ""
    revenue_range: str = ""
    notes: str = ""

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, CLIENT_STATUSES)


class ClientUpdate(BaseModel):
    """Schema for updating a client; only provided fields are merged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    industry: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    employees_range: Optional[str] = None
    revenue_range: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(
        "name", "industry", "email", "phone", "website", "location",
        "status", "employees_range", "revenue_range", "notes",
        mode="before"
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("cannot be null")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, CLIENT_STATUSES)


class ClientResponse(SnakeCaseDocument):
    """Client document as returned by the API."""

    name: str
    industry: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    location: str = ""
    status: str = "Cold"
    employees_range: str = ""
    revenue_range: str = ""
    notes: str = ""
