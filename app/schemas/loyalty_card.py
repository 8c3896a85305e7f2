# app/schemas/loyalty_card.py
import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

# Значения по умолчанию, которые подставляются и при явном null
CARD_DEFAULTS = {"points_balance": 0, "tier": "standard", "is_active": True}


class LoyaltyCardCreate(BaseModel):
    customer_id: uuid.UUID
    business_id: uuid.UUID
    card_number: str | None = Field(None, max_length=50)
    points_balance: int = Field(0, ge=0)
    tier: str = Field("standard", min_length=1, max_length=50)
    is_active: bool = True

    @field_validator("points_balance", "tier", "is_active", mode="before")
    @classmethod
    def null_means_default(cls, value, info):
        return CARD_DEFAULTS[info.field_name] if value is None else value


class LoyaltyCard(BaseModel):
    id: uuid.UUID
    customer_id: uuid.UUID
    business_id: uuid.UUID
    card_number: str | None = None
    points_balance: int
    tier: str
    is_active: bool
    issue_date: datetime | None = None
    last_activity_date: datetime | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class LoyaltyCardList(BaseModel):
    success: bool = True
    cards: List[LoyaltyCard]


class LoyaltyCardCreated(BaseModel):
    success: bool = True
    message: str
    card: LoyaltyCard
