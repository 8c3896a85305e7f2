# app/services/transactions.py

import logging
from typing import Tuple

from fastapi import status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.crud import loyalty_card as crud_card, program as crud_program, transaction as crud_transaction
from app.db.session import utcnow
from app.models.loyalty_card import LoyaltyCard
from app.models.transaction import Transaction
from app.schemas.transaction import TransactionCreate

logger = logging.getLogger(__name__)

# Вторая попытка нужна, если карту клиента параллельно создал другой запрос
MAX_ATTEMPTS = 2


def _apply(db: Session, data: TransactionCreate) -> Transaction:
    transaction = crud_transaction.add_transaction(
        db,
        business_id=data.business_id,
        customer_id=data.customer_id,
        program_id=data.program_id,
        amount=data.amount,
        points_earned=data.points_earned,
        type=data.type,
        notes=data.notes,
        receipt_number=data.receipt_number,
        date=data.date or utcnow(),
    )

    points = data.points_earned
    if points > 0 and data.type == "purchase":
        if not crud_card.add_points(db, data.customer_id, data.business_id, points):
            # первой покупкой клиент получает карту
            crud_card.open_card_with_points(db, data.customer_id, data.business_id, points)
    elif points > 0 and data.type == "refund":
        crud_card.deduct_points(db, data.customer_id, data.business_id, points)

    db.commit()
    return transaction


def record_transaction(db: Session, data: TransactionCreate) -> Tuple[Transaction, LoyaltyCard | None]:
    """
    Записывает операцию и меняет баланс карты клиента в одной транзакции БД:
    purchase начисляет points_earned, refund списывает (не ниже нуля),
    reward_redemption только записывается.
    Возвращает операцию и карту клиента в этом бизнесе после изменения.
    """
    if data.program_id is not None and crud_program.get_program(db, data.program_id) is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Loyalty program not found")

    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            transaction = _apply(db, data)
            break
        except IntegrityError:
            db.rollback()
            if attempt == MAX_ATTEMPTS:
                raise
            logger.warning(f"Loyalty card for customer {data.customer_id} was created concurrently, retrying.")

    logger.info(
        f"Transaction {transaction.id} ({data.type}, {data.points_earned} points) recorded "
        f"for customer {data.customer_id} in business {data.business_id}"
    )
    return transaction, crud_card.get_card(db, data.customer_id, data.business_id)
