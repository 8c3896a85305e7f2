# app/schemas/qr_code.py
import json
import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator


class QRCodeCreate(BaseModel):
    business_id: uuid.UUID
    target_type: str = Field(..., min_length=1, max_length=50)
    target_id: str | None = Field(None, max_length=255)
    # Произвольная полезная нагрузка; объекты сохраняются JSON-строкой
    qr_data: str = Field(..., min_length=1)

    @field_validator("qr_data", mode="before")
    @classmethod
    def serialize_payload(cls, value):
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return value

    @field_validator("target_id", mode="before")
    @classmethod
    def target_id_as_string(cls, value):
        if value is None or value == "":
            return None
        return str(value)


class QRCode(BaseModel):
    id: uuid.UUID
    business_id: uuid.UUID
    target_type: str
    target_id: str | None = None
    qr_data: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class QRCodeList(BaseModel):
    success: bool = True
    qr_codes: List[QRCode]


class QRCodeCreated(BaseModel):
    success: bool = True
    message: str
    qr_code: QRCode
