# app/routers/comments.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.crud import comment as crud_comment
from app.dependencies import get_db
from app.schemas.comment import Comment, CommentCreate, CommentSaved

router = APIRouter(prefix="/comments")


@router.get("", response_model=List[Comment])
def list_comments(db: Session = Depends(get_db)):
    """Все комментарии, от новых к старым."""
    return crud_comment.get_comments(db)


@router.post("", response_model=CommentSaved)
def add_comment(payload: CommentCreate, db: Session = Depends(get_db)):
    crud_comment.create_comment(db, payload.comment)
    return CommentSaved()
