# app/models/qr_code.py
import uuid

from sqlalchemy import Column, DateTime, String, Text, Uuid
from sqlalchemy.sql import func

from app.db.session import Base, utcnow


class QRCode(Base):
    __tablename__ = "qr_codes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    business_id = Column(Uuid, nullable=False, index=True)
    # На что указывает код: 'program', 'reward', 'card'... Содержимое не интерпретируем.
    target_type = Column(String(50), nullable=False)
    target_id = Column(String(255), nullable=True)
    qr_data = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)
