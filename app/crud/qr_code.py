# app/crud/qr_code.py

import uuid
from typing import List

from sqlalchemy.orm import Session

from app.models.qr_code import QRCode
from app.schemas.qr_code import QRCodeCreate


def create_qr_code(db: Session, data: QRCodeCreate) -> QRCode:
    qr_code = QRCode(
        business_id=data.business_id,
        target_type=data.target_type,
        target_id=data.target_id,
        qr_data=data.qr_data,
    )
    db.add(qr_code)
    db.commit()
    db.refresh(qr_code)
    return qr_code


def get_qr_codes_by_business(db: Session, business_id: uuid.UUID, target_type: str | None = None) -> List[QRCode]:
    query = db.query(QRCode).filter(QRCode.business_id == business_id)
    if target_type:
        query = query.filter(QRCode.target_type == target_type)
    return query.order_by(QRCode.created_at.desc()).all()
