# app/routers/transactions.py

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.crud import transaction as crud_transaction
from app.dependencies import get_db
from app.schemas.common import StatusResponse
from app.schemas.transaction import (
    Page,
    TransactionCreate,
    TransactionCreated,
    TransactionDetails,
    TransactionList,
    TransactionType,
)
from app.services import transactions as transaction_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions")

TRANSACTION_NOT_FOUND = "Transaction not found"


@router.get("", response_model=TransactionList)
def list_transactions(
    business_id: uuid.UUID = Query(..., alias="businessId"),
    customer_id: uuid.UUID | None = Query(None, alias="customerId"),
    type: TransactionType | None = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    sort_by: str = Query("date", alias="sortBy", description="date, amount, points_earned или created_at"),
    sort_direction: str = Query("desc", alias="sortDirection"),
    db: Session = Depends(get_db),
):
    """Операции бизнеса постранично, по умолчанию от новых к старым."""
    transactions, total = crud_transaction.find_transactions(
        db,
        business_id,
        customer_id=customer_id,
        type=type,
        limit=limit,
        offset=offset,
        sort_by=sort_by,
        descending=sort_direction != "asc",
    )
    return TransactionList(
        transactions=transactions,
        total=total,
        page=Page(limit=limit, offset=offset, total=total),
    )


@router.post("", response_model=TransactionCreated, status_code=status.HTTP_201_CREATED)
def create_transaction(payload: TransactionCreate, db: Session = Depends(get_db)):
    transaction, card = transaction_service.record_transaction(db, payload)
    return TransactionCreated(message="Transaction created successfully", transactionId=transaction.id, card=card)


@router.get("/{transaction_id}", response_model=TransactionDetails)
def get_transaction(transaction_id: uuid.UUID, db: Session = Depends(get_db)):
    transaction = crud_transaction.get_transaction(db, transaction_id)
    if not transaction:
        raise ApiError(status.HTTP_404_NOT_FOUND, TRANSACTION_NOT_FOUND)
    return TransactionDetails(transaction=transaction)


@router.delete("/{transaction_id}", response_model=StatusResponse)
def delete_transaction(transaction_id: uuid.UUID, db: Session = Depends(get_db)):
    """Удаляет запись об операции. Баланс карты при этом не пересчитывается."""
    transaction = crud_transaction.get_transaction(db, transaction_id)
    if not transaction:
        raise ApiError(status.HTTP_404_NOT_FOUND, TRANSACTION_NOT_FOUND)

    crud_transaction.delete_transaction(db, transaction)
    logger.info(f"Transaction {transaction_id} deleted")
    return StatusResponse(message="Transaction deleted successfully")
