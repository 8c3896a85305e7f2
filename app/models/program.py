# app/models/program.py
import uuid

from sqlalchemy import JSON, Boolean, CheckConstraint, Column, DateTime, String, Text, Uuid
from sqlalchemy.sql import func

from app.db.session import Base, utcnow

PROGRAM_TYPES = ("points", "punchcard", "tiered")


class LoyaltyProgram(Base):
    __tablename__ = "loyalty_programs"
    __table_args__ = (
        CheckConstraint(f"type IN ({', '.join(repr(t) for t in PROGRAM_TYPES)})", name="ck_loyalty_programs_type"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    # Бизнес (тенант), которому принадлежит программа
    business_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(20), nullable=False)
    rules = Column(JSON, nullable=False, default=dict)
    active = Column(Boolean, nullable=False, default=True, server_default="true")

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)
