# app/routers/settings.py

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.crud import setting as crud_setting
from app.dependencies import get_db
from app.schemas.common import StatusResponse
from app.schemas.settings import SettingDetails, SettingList, SettingSaved, SettingUpsert

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings")


@router.get("")
def get_settings(
    business_id: uuid.UUID = Query(...),
    key: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    """
    С параметром key - одна настройка (null, если ее нет; это не ошибка).
    Без него - все настройки бизнеса по алфавиту ключей.
    """
    if key:
        return SettingDetails(setting=crud_setting.get_setting(db, business_id, key))
    return SettingList(settings=crud_setting.get_settings_by_business(db, business_id))


@router.post("", response_model=SettingSaved, status_code=status.HTTP_201_CREATED)
def save_setting(payload: SettingUpsert, db: Session = Depends(get_db)):
    """Создает или обновляет настройку по ключу (business_id, key)."""
    setting = crud_setting.upsert_setting(db, payload.business_id, payload.key, payload.value)
    logger.info(f"Setting '{payload.key}' saved for business {payload.business_id}")
    return SettingSaved(message="Setting created/updated successfully", setting=setting)


@router.delete("", response_model=StatusResponse)
def delete_setting(
    business_id: uuid.UUID = Query(...),
    key: str = Query(..., min_length=1, max_length=100),
    db: Session = Depends(get_db),
):
    setting = crud_setting.get_setting(db, business_id, key)
    if not setting:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Setting not found")

    crud_setting.delete_setting(db, setting)
    logger.info(f"Setting '{key}' deleted for business {business_id}")
    return StatusResponse(message="Setting deleted successfully")
