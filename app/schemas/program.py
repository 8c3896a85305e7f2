# app/schemas/program.py
import uuid
from datetime import datetime
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

ProgramType = Literal["points", "punchcard", "tiered"]


class ProgramCreate(BaseModel):
    """Тело запроса на создание программы лояльности."""
    business_id: uuid.UUID = Field(..., alias="businessId")
    name: str = Field(..., min_length=1, max_length=255)
    type: ProgramType
    description: str | None = None
    rules: Dict[str, Any] | None = None
    active: bool = True

    class Config:
        populate_by_name = True


class ProgramUpdate(BaseModel):
    """
    Частичное обновление. Поле, которое не передано или передано как null,
    сохраняет прежнее значение.
    """
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    rules: Dict[str, Any] | None = None
    active: bool | None = None


class Program(BaseModel):
    id: uuid.UUID
    business_id: uuid.UUID
    name: str
    description: str | None = None
    type: ProgramType
    rules: Dict[str, Any]
    active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProgramList(BaseModel):
    success: bool = True
    programs: List[Program]


class ProgramDetails(BaseModel):
    success: bool = True
    program: Program


class ProgramCreated(BaseModel):
    success: bool = True
    message: str
    programId: uuid.UUID
