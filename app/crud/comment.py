# app/crud/comment.py

from typing import List

from sqlalchemy.orm import Session

from app.models.comment import Comment


def get_comments(db: Session) -> List[Comment]:
    """Все комментарии, от новых к старым."""
    return db.query(Comment).order_by(Comment.created_at.desc(), Comment.id.desc()).all()


def create_comment(db: Session, text: str) -> Comment:
    comment = Comment(comment=text)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment
