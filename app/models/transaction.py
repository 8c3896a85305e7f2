# app/models/transaction.py
import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base, utcnow

TRANSACTION_TYPES = ("purchase", "refund", "reward_redemption")


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint(f"type IN ({', '.join(repr(t) for t in TRANSACTION_TYPES)})", name="ck_transactions_type"),
        CheckConstraint("points_earned >= 0", name="ck_transactions_points_earned"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    business_id = Column(Uuid, nullable=False, index=True)
    customer_id = Column(Uuid, nullable=False, index=True)
    program_id = Column(Uuid, ForeignKey("loyalty_programs.id", ondelete="SET NULL"), nullable=True, index=True)

    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    # Для purchase начисляются на карту клиента, для refund списываются
    points_earned = Column(Integer, nullable=False, default=0, server_default="0")
    type = Column(String(20), nullable=False, default="purchase", server_default="purchase")
    notes = Column(Text, nullable=True)
    receipt_number = Column(String(100), nullable=True)

    # Момент покупки (может отличаться от момента записи)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)

    program = relationship("LoyaltyProgram")

    @property
    def program_name(self) -> str | None:
        return self.program.name if self.program else None
