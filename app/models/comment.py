# app/models/comment.py
from sqlalchemy import Column, DateTime, Integer, Text
from sqlalchemy.sql import func

from app.db.session import Base, utcnow


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
