from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Integer, DateTime, JSON, UUID

from wordlog.core.db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserState(Base):
    __tablename__ = "user_state"

    user_id = Column(String(255), primary_key=True)
    # Открытый текст или значение с маркером enc2:
    content = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class AuditVersion(Base):
    __tablename__ = "audit_versions"

    id = Column(UUID(as_uuid=True), primary_key=True)
    user_id = Column(String(255), index=True, nullable=False)
    timestamp = Column(String(16), nullable=False)
    # При включенном шифровании added_words = [enc2-токен], removed_words = []
    added_words = Column(JSON, nullable=False, default=list)
    removed_words = Column(JSON, nullable=False, default=list)
    old_length = Column(Integer, nullable=False, default=0)
    new_length = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
