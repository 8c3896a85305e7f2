# app/schemas/redemption_code.py
import uuid
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import as_utc


class RedemptionCodeCreate(BaseModel):
    reward_id: uuid.UUID
    customer_id: uuid.UUID
    # Если код не передан, он будет сгенерирован
    code: str | None = Field(None, max_length=20)
    redeemed: bool = False
    created_at: datetime | None = None
    expires_at: datetime | None = None

    @field_validator("code", mode="before")
    @classmethod
    def blank_code_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("redeemed", mode="before")
    @classmethod
    def null_is_not_redeemed(cls, value):
        return False if value is None else value

    @field_validator("expires_at")
    @classmethod
    def expires_at_in_utc(cls, value):
        return as_utc(value)


class RedemptionCodeRedeem(BaseModel):
    code: str = Field(..., min_length=1, max_length=20)
    customer_id: uuid.UUID | None = None


class RedemptionCode(BaseModel):
    id: uuid.UUID
    reward_id: uuid.UUID
    customer_id: uuid.UUID
    code: str
    redeemed: bool
    redeemed_at: datetime | None = None
    expires_at: datetime | None = None
    status: Literal["active", "redeemed", "expired"]
    created_at: datetime
    reward_name: str | None = None
    reward_description: str | None = None
    points_required: int | None = None

    class Config:
        from_attributes = True


class RedemptionCodeList(BaseModel):
    success: bool = True
    redemption_codes: List[RedemptionCode]


class RedemptionCodeResult(BaseModel):
    success: bool = True
    message: str
    redemption_code: RedemptionCode
