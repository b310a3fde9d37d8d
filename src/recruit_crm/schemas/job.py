"""Pydantic schemas for Job documents."""

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import SnakeCaseDocument, check_choice

JOB_TYPES = ("Full-time", "Part-time", "Contract", "Internship")
JOB_STATUSES = ("Open", "Interviewing", "On Hold", "Filled", "Cancelled", "Closed")


def coerce_salary(value):
    """Accept integers or numeric strings; blank means no salary."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValueError("Salary must be a number")
        if not math.isfinite(number):
            raise ValueError("Salary must be a number")
        return int(number)
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("Salary must be a number")
    return value


class JobCreate(BaseModel):
    """Schema for creating a new job."""

    title: str = Field(..., min_length=1, max_length=255)
    client_id: str = Field(..., min_length=1)
    description: str = ""
    location: str = ""
    type: str = "Full-time"
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    status: str = "Open"
    deadline: Optional[str] = None

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def parse_salary(cls, v):
        return coerce_salary(v)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        return check_choice(v, JOB_TYPES, label="Type")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, JOB_STATUSES)


class JobUpdate(BaseModel):
    """Schema for updating a job; only provided fields are merged."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None
    deadline: Optional[str] = None

    @field_validator("title", "description", "location", "type", "status", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("cannot be null")
        return v

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def parse_salary(cls, v):
        return coerce_salary(v)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        return check_choice(v, JOB_TYPES, label="Type")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return check_choice(v, JOB_STATUSES)


class JobResponse(SnakeCaseDocument):
    """Job document as returned by the API."""

    client_id: str
    title: str
    description: str = ""
    location: str = ""
    type: str = "Full-time"
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    status: str = "Open"
    applications_count: int = 0
    posted_date: Optional[str] = None
    deadline: Optional[str] = None
