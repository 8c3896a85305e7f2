# app/models/redemption_code.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base, utcnow


class RedemptionCode(Base):
    __tablename__ = "redemption_codes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    reward_id = Column(Uuid, ForeignKey("rewards.id", ondelete="CASCADE"), nullable=False, index=True)
    customer_id = Column(Uuid, nullable=False, index=True)
    code = Column(String(20), nullable=False, unique=True)

    # Код погашается ровно один раз
    redeemed = Column(Boolean, nullable=False, default=False, server_default="false")
    redeemed_at = Column(DateTime(timezone=True), nullable=True)
    # NULL - код бессрочный
    expires_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    reward = relationship("Reward")

    @property
    def status(self) -> str:
        """active / redeemed / expired"""
        if self.redeemed:
            return "redeemed"
        if self.is_expired():
            return "expired"
        return "active"

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        expires_at = self.expires_at
        # SQLite отдает даты без часового пояса, храним всегда UTC
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= (now or utcnow())

    # Поля награды для выдачи вместе с кодом
    @property
    def reward_name(self) -> str | None:
        return self.reward.name if self.reward else None

    @property
    def reward_description(self) -> str | None:
        return self.reward.description if self.reward else None

    @property
    def points_required(self) -> int | None:
        return self.reward.points_required if self.reward else None
