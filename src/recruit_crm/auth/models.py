"""Authentication schemas."""

from typing import Optional

from pydantic import BaseModel


class TokenData(BaseModel):
    """Identity extracted from a verified bearer token."""
    tenant_id: str
    email: Optional[str] = None
