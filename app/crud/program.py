# app/crud/program.py

import uuid
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.db.session import utcnow
from app.models.program import LoyaltyProgram


def get_programs_by_business(db: Session, business_id: uuid.UUID) -> List[LoyaltyProgram]:
    """Программы бизнеса, от новых к старым."""
    return db.query(LoyaltyProgram).filter(
        LoyaltyProgram.business_id == business_id
    ).order_by(LoyaltyProgram.created_at.desc()).all()


def get_program(db: Session, program_id: uuid.UUID) -> LoyaltyProgram | None:
    return db.query(LoyaltyProgram).filter(LoyaltyProgram.id == program_id).first()


def get_program_for_update(db: Session, program_id: uuid.UUID) -> LoyaltyProgram | None:
    """
    Получает программу с блокировкой строки (SELECT ... FOR UPDATE) до конца транзакции.
    Вызывающий код обязан завершить транзакцию через commit/rollback.
    """
    return db.query(LoyaltyProgram).filter(
        LoyaltyProgram.id == program_id
    ).with_for_update().first()


def create_program(
    db: Session,
    business_id: uuid.UUID,
    name: str,
    type: str,
    description: str | None = None,
    rules: Dict[str, Any] | None = None,
    active: bool = True,
) -> LoyaltyProgram:
    now = utcnow()
    program = LoyaltyProgram(
        id=uuid.uuid4(),
        business_id=business_id,
        name=name,
        type=type,
        description=description or None,
        rules=rules or {},
        active=active,
        created_at=now,
        updated_at=now,
    )
    db.add(program)
    db.commit()
    db.refresh(program)
    return program


def update_program(db: Session, program: LoyaltyProgram, **changes: Any) -> LoyaltyProgram:
    """
    Частичное обновление: None означает "оставить как было".
    updated_at обновляется всегда.
    """
    for field in ("name", "description", "rules", "active"):
        value = changes.get(field)
        if value is not None:
            setattr(program, field, value)
    program.updated_at = utcnow()
    db.commit()
    db.refresh(program)
    return program


def delete_program(db: Session, program: LoyaltyProgram):
    db.delete(program)
    db.commit()
