# app/schemas/transaction.py
import uuid
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import as_utc
from app.schemas.loyalty_card import LoyaltyCard

TransactionType = Literal["purchase", "refund", "reward_redemption"]


class TransactionCreate(BaseModel):
    """
    Операция клиента. Поля принимаются в camelCase (businessId, pointsEarned...)
    и в snake_case.
    """
    business_id: uuid.UUID = Field(..., alias="businessId")
    customer_id: uuid.UUID = Field(..., alias="customerId")
    program_id: uuid.UUID | None = Field(None, alias="programId")
    amount: float = Field(..., ge=0)
    points_earned: int = Field(0, ge=0, alias="pointsEarned")
    type: TransactionType = "purchase"
    notes: str | None = None
    receipt_number: str | None = Field(None, max_length=100, alias="receiptNumber")
    date: datetime | None = None

    class Config:
        populate_by_name = True

    @field_validator("points_earned", "type", mode="before")
    @classmethod
    def null_means_default(cls, value, info):
        if value is None:
            return {"points_earned": 0, "type": "purchase"}[info.field_name]
        return value

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, value):
        return as_utc(value)


class Transaction(BaseModel):
    id: uuid.UUID
    business_id: uuid.UUID
    customer_id: uuid.UUID
    program_id: uuid.UUID | None = None
    program_name: str | None = None
    amount: float
    points_earned: int
    type: TransactionType
    notes: str | None = None
    receipt_number: str | None = None
    date: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class Page(BaseModel):
    limit: int
    offset: int
    total: int


class TransactionList(BaseModel):
    success: bool = True
    transactions: List[Transaction]
    total: int
    page: Page


class TransactionDetails(BaseModel):
    success: bool = True
    transaction: Transaction


class TransactionCreated(BaseModel):
    success: bool = True
    message: str
    transactionId: uuid.UUID
    # Карта клиента в этом бизнесе после начисления/списания (если есть)
    card: LoyaltyCard | None = None
