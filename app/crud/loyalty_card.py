# app/crud/loyalty_card.py

import time
import uuid
from typing import List

from sqlalchemy import case, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.session import utcnow
from app.models.loyalty_card import LoyaltyCard


def generate_card_number() -> str:
    return f"CARD-{int(time.time() * 1000)}"


def get_cards_by_customer(db: Session, customer_id: uuid.UUID) -> List[LoyaltyCard]:
    return db.query(LoyaltyCard).filter(
        LoyaltyCard.customer_id == customer_id
    ).order_by(LoyaltyCard.created_at.desc()).all()


def get_cards_by_business(db: Session, business_id: uuid.UUID) -> List[LoyaltyCard]:
    return db.query(LoyaltyCard).filter(
        LoyaltyCard.business_id == business_id
    ).order_by(LoyaltyCard.created_at.desc()).all()


def get_card(db: Session, customer_id: uuid.UUID, business_id: uuid.UUID) -> LoyaltyCard | None:
    """Карта клиента в конкретном бизнесе (не больше одной)."""
    return db.query(LoyaltyCard).filter_by(customer_id=customer_id, business_id=business_id).first()


def create_card(
    db: Session,
    customer_id: uuid.UUID,
    business_id: uuid.UUID,
    card_number: str | None = None,
    points_balance: int = 0,
    tier: str = "standard",
    is_active: bool = True,
) -> tuple[LoyaltyCard, bool]:
    """
    Создает карту. Дубликат отсекает уникальный индекс (customer_id, business_id),
    поэтому параллельные запросы не создадут две карты.
    Возвращает (карта, создана_ли). Если карта уже была - возвращает существующую.
    """
    card = LoyaltyCard(
        customer_id=customer_id,
        business_id=business_id,
        card_number=card_number or generate_card_number(),
        points_balance=points_balance,
        tier=tier,
        is_active=is_active,
    )
    db.add(card)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = get_card(db, customer_id, business_id)
        if existing is None:
            # нарушено другое ограничение - это не дубликат
            raise
        return existing, False

    db.refresh(card)
    return card, True


def add_points(db: Session, customer_id: uuid.UUID, business_id: uuid.UUID, points: int) -> bool:
    """
    Начисляет баллы одним UPDATE (без чтения баланса в Python).
    Возвращает False, если карты нет. Commit - на вызывающей стороне.
    """
    now = utcnow()
    result = db.execute(
        update(LoyaltyCard)
        .where(LoyaltyCard.customer_id == customer_id, LoyaltyCard.business_id == business_id)
        .values(
            points_balance=LoyaltyCard.points_balance + points,
            last_activity_date=now,
            updated_at=now,
        )
        .execution_options(synchronize_session=False)
    )
    return result.rowcount > 0


def deduct_points(db: Session, customer_id: uuid.UUID, business_id: uuid.UUID, points: int) -> bool:
    """Списывает баллы; баланс не уходит ниже нуля. Commit - на вызывающей стороне."""
    now = utcnow()
    result = db.execute(
        update(LoyaltyCard)
        .where(LoyaltyCard.customer_id == customer_id, LoyaltyCard.business_id == business_id)
        .values(
            points_balance=case(
                (LoyaltyCard.points_balance > points, LoyaltyCard.points_balance - points),
                else_=0,
            ),
            last_activity_date=now,
            updated_at=now,
        )
        .execution_options(synchronize_session=False)
    )
    return result.rowcount > 0


def open_card_with_points(db: Session, customer_id: uuid.UUID, business_id: uuid.UUID, points: int) -> LoyaltyCard:
    """Заводит карту с начальным балансом в текущей транзакции (без commit)."""
    card = LoyaltyCard(
        customer_id=customer_id,
        business_id=business_id,
        card_number=generate_card_number(),
        points_balance=points,
    )
    db.add(card)
    db.flush()
    return card
