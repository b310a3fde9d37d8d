"""Database models for the SQL document store."""

from .document import DocumentRecord

__all__ = ["DocumentRecord"]
