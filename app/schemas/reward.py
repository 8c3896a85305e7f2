# app/schemas/reward.py
import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from app.schemas.common import as_utc


class RewardCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    points_required: int = Field(..., gt=0)
    business_id: uuid.UUID
    description: str | None = None
    image_url: str | None = None
    is_active: bool = True
    redemption_limit: int | None = Field(None, gt=0)
    valid_from: datetime | None = None
    valid_until: datetime | None = None

    @field_validator("valid_from", "valid_until")
    @classmethod
    def normalize_timezone(cls, value):
        return as_utc(value)

    @model_validator(mode="after")
    def check_validity_window(self):
        if self.valid_from and self.valid_until and self.valid_until < self.valid_from:
            raise ValueError("valid_until must not be earlier than valid_from")
        return self


class Reward(BaseModel):
    id: uuid.UUID
    business_id: uuid.UUID
    name: str
    description: str | None = None
    points_required: int
    image_url: str | None = None
    is_active: bool
    redemption_limit: int | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RewardList(BaseModel):
    success: bool = True
    rewards: List[Reward]


class RewardCreated(BaseModel):
    success: bool = True
    message: str
    reward: Reward
