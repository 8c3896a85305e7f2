# app/crud/redemption_code.py

import uuid
from datetime import datetime
from typing import List

from sqlalchemy import or_, update
from sqlalchemy.orm import Session, joinedload

from app.db.session import utcnow
from app.models.redemption_code import RedemptionCode


def create_redemption_code(
    db: Session,
    reward_id: uuid.UUID,
    customer_id: uuid.UUID,
    code: str,
    redeemed: bool = False,
    created_at: datetime | None = None,
    expires_at: datetime | None = None,
) -> RedemptionCode:
    """
    Сохраняет код. При коллизии по уникальному `code` пробрасывает IntegrityError,
    откат сессии - на вызывающей стороне.
    """
    redemption_code = RedemptionCode(
        reward_id=reward_id,
        customer_id=customer_id,
        code=code,
        redeemed=redeemed,
        redeemed_at=utcnow() if redeemed else None,
        created_at=created_at or utcnow(),
        expires_at=expires_at,
    )
    db.add(redemption_code)
    db.commit()
    db.refresh(redemption_code)
    return redemption_code


def get_by_code(db: Session, code: str) -> RedemptionCode | None:
    return db.query(RedemptionCode).options(
        joinedload(RedemptionCode.reward)
    ).filter(RedemptionCode.code == code).first()


def find_codes(
    db: Session,
    reward_id: uuid.UUID | None = None,
    customer_id: uuid.UUID | None = None,
    code: str | None = None,
    redeemed: bool | None = None,
) -> List[RedemptionCode]:
    """Ищет коды по любому набору фильтров (все условия через AND)."""
    query = db.query(RedemptionCode).options(joinedload(RedemptionCode.reward))
    if reward_id is not None:
        query = query.filter(RedemptionCode.reward_id == reward_id)
    if customer_id is not None:
        query = query.filter(RedemptionCode.customer_id == customer_id)
    if code is not None:
        query = query.filter(RedemptionCode.code == code)
    if redeemed is not None:
        query = query.filter(RedemptionCode.redeemed == redeemed)
    return query.order_by(RedemptionCode.created_at.desc()).all()


def mark_redeemed(db: Session, code: str, customer_id: uuid.UUID | None = None) -> RedemptionCode | None:
    """
    Атомарно гасит код одним UPDATE ... WHERE redeemed = false AND срок не истек.
    Возвращает обновленный код или None, если кода нет, он уже погашен или просрочен.
    """
    now = utcnow()
    values = {"redeemed": True, "redeemed_at": now}
    if customer_id is not None:
        values["customer_id"] = customer_id

    stmt = update(RedemptionCode).where(
        RedemptionCode.code == code,
        RedemptionCode.redeemed == False,  # noqa: E712
        or_(RedemptionCode.expires_at.is_(None), RedemptionCode.expires_at > now),
    ).values(**values).returning(RedemptionCode.id).execution_options(synchronize_session=False)
    redeemed_id = db.execute(stmt).scalar_one_or_none()
    db.commit()

    if redeemed_id is None:
        return None
    return get_by_code(db, code)
