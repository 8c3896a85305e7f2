# app/crud/transaction.py

import uuid
from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, joinedload

from app.models.transaction import Transaction

# Разрешенные поля сортировки; неизвестное значение - сортировка по дате
SORT_COLUMNS = {
    "date": Transaction.date,
    "amount": Transaction.amount,
    "points_earned": Transaction.points_earned,
    "created_at": Transaction.created_at,
}


def _filtered(db: Session, business_id: uuid.UUID, customer_id: uuid.UUID | None, type: str | None) -> Query:
    query = db.query(Transaction).filter(Transaction.business_id == business_id)
    if customer_id is not None:
        query = query.filter(Transaction.customer_id == customer_id)
    if type is not None:
        query = query.filter(Transaction.type == type)
    return query


def find_transactions(
    db: Session,
    business_id: uuid.UUID,
    customer_id: uuid.UUID | None = None,
    type: str | None = None,
    limit: int = 20,
    offset: int = 0,
    sort_by: str = "date",
    descending: bool = True,
) -> Tuple[List[Transaction], int]:
    """Страница операций бизнеса и их общее количество с теми же фильтрами."""
    column = SORT_COLUMNS.get(sort_by, Transaction.date)
    order = column.desc() if descending else column.asc()

    query = _filtered(db, business_id, customer_id, type)
    total = query.with_entities(func.count(Transaction.id)).scalar()
    transactions = query.options(joinedload(Transaction.program)).order_by(
        order, Transaction.id
    ).limit(limit).offset(offset).all()
    return transactions, total


def get_transaction(db: Session, transaction_id: uuid.UUID) -> Transaction | None:
    return db.query(Transaction).options(
        joinedload(Transaction.program)
    ).filter(Transaction.id == transaction_id).first()


def add_transaction(db: Session, **fields) -> Transaction:
    """Добавляет запись в текущую транзакцию БД (без commit)."""
    transaction = Transaction(**fields)
    db.add(transaction)
    db.flush()
    return transaction


def delete_transaction(db: Session, transaction: Transaction):
    db.delete(transaction)
    db.commit()
