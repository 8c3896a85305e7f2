# app/schemas/settings.py
import json
import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class SettingUpsert(BaseModel):
    business_id: uuid.UUID
    key: str = Field(..., min_length=1, max_length=100)
    # Строка сохраняется как есть, любое другое значение - JSON-строкой
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def serialize_value(cls, value):
        if value is None:
            raise PydanticCustomError("missing", "Field required")
        if isinstance(value, str):
            return value
        return json.dumps(value)


class Setting(BaseModel):
    id: uuid.UUID
    business_id: uuid.UUID
    key: str
    value: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SettingList(BaseModel):
    success: bool = True
    settings: List[Setting]


class SettingDetails(BaseModel):
    success: bool = True
    setting: Setting | None = None


class SettingSaved(BaseModel):
    success: bool = True
    message: str
    setting: Setting
