# app/routers/programs.py

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.crud import program as crud_program
from app.dependencies import get_db
from app.schemas.common import StatusResponse
from app.schemas.program import ProgramCreate, ProgramCreated, ProgramDetails, ProgramList, ProgramUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/programs")

PROGRAM_NOT_FOUND = "Loyalty program not found"


@router.get("", response_model=ProgramList)
def list_programs(
    business_id: uuid.UUID = Query(..., alias="businessId", description="ID бизнеса"),
    db: Session = Depends(get_db),
):
    """Программы лояльности бизнеса, от новых к старым."""
    return ProgramList(programs=crud_program.get_programs_by_business(db, business_id))


@router.post("", response_model=ProgramCreated, status_code=status.HTTP_201_CREATED)
def create_program(payload: ProgramCreate, db: Session = Depends(get_db)):
    program = crud_program.create_program(
        db,
        business_id=payload.business_id,
        name=payload.name,
        type=payload.type,
        description=payload.description,
        rules=payload.rules,
        active=payload.active,
    )
    logger.info(f"Loyalty program {program.id} created for business {program.business_id}")
    return ProgramCreated(message="Loyalty program created successfully", programId=program.id)


@router.get("/{program_id}", response_model=ProgramDetails)
def get_program(program_id: uuid.UUID, db: Session = Depends(get_db)):
    program = crud_program.get_program(db, program_id)
    if not program:
        raise ApiError(status.HTTP_404_NOT_FOUND, PROGRAM_NOT_FOUND)
    return ProgramDetails(program=program)


@router.put("/{program_id}", response_model=StatusResponse)
def update_program(program_id: uuid.UUID, payload: ProgramUpdate, db: Session = Depends(get_db)):
    """
    Частичное обновление программы. Чтение и запись идут в одной транзакции
    с блокировкой строки, поэтому параллельные PUT не теряют изменения друг друга.
    """
    program = crud_program.get_program_for_update(db, program_id)
    if not program:
        db.rollback()
        raise ApiError(status.HTTP_404_NOT_FOUND, PROGRAM_NOT_FOUND)

    crud_program.update_program(db, program, **payload.model_dump())
    logger.info(f"Loyalty program {program_id} updated")
    return StatusResponse(message="Loyalty program updated successfully")


@router.delete("/{program_id}", response_model=StatusResponse)
def delete_program(program_id: uuid.UUID, db: Session = Depends(get_db)):
    program = crud_program.get_program_for_update(db, program_id)
    if not program:
        db.rollback()
        raise ApiError(status.HTTP_404_NOT_FOUND, PROGRAM_NOT_FOUND)

    crud_program.delete_program(db, program)
    logger.info(f"Loyalty program {program_id} deleted")
    return StatusResponse(message="Loyalty program deleted successfully")
