# app/routers/qr_codes.py

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.crud import qr_code as crud_qr
from app.dependencies import get_db
from app.schemas.qr_code import QRCodeCreate, QRCodeCreated, QRCodeList

router = APIRouter(prefix="/qr_codes")


@router.get("", response_model=QRCodeList)
def list_qr_codes(
    business_id: uuid.UUID = Query(...),
    target_type: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return QRCodeList(qr_codes=crud_qr.get_qr_codes_by_business(db, business_id, target_type))


@router.post("", response_model=QRCodeCreated, status_code=status.HTTP_201_CREATED)
def create_qr_code(payload: QRCodeCreate, db: Session = Depends(get_db)):
    qr_code = crud_qr.create_qr_code(db, payload)
    return QRCodeCreated(message="QR code created successfully", qr_code=qr_code)
