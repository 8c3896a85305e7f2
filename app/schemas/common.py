# app/schemas/common.py
from datetime import datetime, timezone

from pydantic import BaseModel


def as_utc(value: datetime | None) -> datetime | None:
    """Дата без часового пояса считается UTC; с поясом - переводится в UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class StatusResponse(BaseModel):
    success: bool = True
    message: str
