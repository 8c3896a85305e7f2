# app/routers/redemption_codes.py

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.crud import redemption_code as crud_code
from app.dependencies import get_db
from app.schemas.redemption_code import (
    RedemptionCodeCreate,
    RedemptionCodeList,
    RedemptionCodeRedeem,
    RedemptionCodeResult,
)
from app.services import redemption as redemption_service

router = APIRouter(prefix="/redemption_codes")


@router.get("", response_model=RedemptionCodeList)
def list_codes(
    reward_id: uuid.UUID | None = Query(None),
    customer_id: uuid.UUID | None = Query(None),
    code: str | None = Query(None, max_length=20),
    redeemed: bool | None = Query(None),
    db: Session = Depends(get_db),
):
    """Поиск кодов. Нужен хотя бы один фильтр."""
    filters = {"reward_id": reward_id, "customer_id": customer_id, "code": code, "redeemed": redeemed}
    active_filters = {k: v for k, v in filters.items() if v is not None}
    if not active_filters:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "At least one filter parameter is required (reward_id, customer_id, code or redeemed)",
        )
    return RedemptionCodeList(redemption_codes=crud_code.find_codes(db, **active_filters))


@router.post("", response_model=RedemptionCodeResult, status_code=status.HTTP_201_CREATED)
def create_code(payload: RedemptionCodeCreate, db: Session = Depends(get_db)):
    """Выпуск кода. Если код не передан, он генерируется."""
    redemption_code = redemption_service.issue_code(db, payload)
    return RedemptionCodeResult(message="Redemption code created successfully", redemption_code=redemption_code)


@router.put("", response_model=RedemptionCodeResult)
def redeem_code(payload: RedemptionCodeRedeem, db: Session = Depends(get_db)):
    """Погашение кода. Второй раз тот же код погасить нельзя (409)."""
    redemption_code = redemption_service.redeem_code(db, payload)
    return RedemptionCodeResult(message="Redemption code redeemed successfully", redemption_code=redemption_code)
