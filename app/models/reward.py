# app/models/reward.py
import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, Text, Uuid
from sqlalchemy.sql import func

from app.db.session import Base, utcnow


class Reward(Base):
    __tablename__ = "rewards"
    __table_args__ = (
        CheckConstraint("points_required > 0", name="ck_rewards_points_required"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    business_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    points_required = Column(Integer, nullable=False)
    image_url = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")

    # Сколько раз награду можно получить (NULL - без ограничений)
    redemption_limit = Column(Integer, nullable=True)
    valid_from = Column(DateTime(timezone=True), nullable=True)
    valid_until = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)
