# app/models/setting.py
import uuid

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint, Uuid
from sqlalchemy.sql import func

from app.db.session import Base, utcnow


class Setting(Base):
    __tablename__ = "settings"
    __table_args__ = (
        # Цель ON CONFLICT при upsert
        UniqueConstraint("business_id", "key", name="uq_settings_business_key"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    business_id = Column(Uuid, nullable=False, index=True)
    key = Column(String(100), nullable=False)
    # Строки хранятся как есть, все остальное - в виде JSON-строки
    value = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)
