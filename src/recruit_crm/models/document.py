"""Generic document row used by the SQL document store."""

from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, JSON, Index

from recruit_crm.core.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentRecord(Base):
    """One document of one collection, payload kept as JSON."""

    __tablename__ = "documents"

    id = Column(String(36), primary_key=True)
    collection = Column(String(100), nullable=False)
    # Copy of the payload's tenant field so tenant-scoped queries hit an index
    owner_id = Column(String(128), nullable=True)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_documents_collection_owner", "collection", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<DocumentRecord(collection='{self.collection}', id={self.id})>"
