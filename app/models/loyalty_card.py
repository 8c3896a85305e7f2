# app/models/loyalty_card.py
import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.sql import func

from app.db.session import Base, utcnow


class LoyaltyCard(Base):
    __tablename__ = "loyalty_cards"
    __table_args__ = (
        # Не больше одной карты на пару клиент/бизнес. Проверяет база, а не код.
        UniqueConstraint("customer_id", "business_id", name="uq_loyalty_cards_customer_business"),
        CheckConstraint("points_balance >= 0", name="ck_loyalty_cards_points_balance"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = Column(Uuid, nullable=False, index=True)
    business_id = Column(Uuid, nullable=False, index=True)
    card_number = Column(String(50), nullable=True)
    points_balance = Column(Integer, nullable=False, default=0, server_default="0")
    tier = Column(String(50), nullable=False, default="standard", server_default="standard")
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")

    issue_date = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    last_activity_date = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)
