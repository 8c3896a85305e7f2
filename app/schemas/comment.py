# app/schemas/comment.py
from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    comment: str = Field(..., min_length=1)


class Comment(BaseModel):
    id: int
    comment: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class CommentSaved(BaseModel):
    success: bool = True
