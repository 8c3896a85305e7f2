# app/services/redemption.py

import logging

from fastapi import status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.crud import redemption_code as crud_code, reward as crud_reward
from app.models.redemption_code import RedemptionCode
from app.schemas.redemption_code import RedemptionCodeCreate, RedemptionCodeRedeem
from app.utils.codes import generate_redemption_code

logger = logging.getLogger(__name__)

# Сколько раз перегенерировать код при коллизии
MAX_CODE_ATTEMPTS = 5


def issue_code(db: Session, data: RedemptionCodeCreate) -> RedemptionCode:
    """
    Выпускает код на награду для клиента.
    Переданный клиентом код используется как есть, иначе генерируется новый.
    Уникальность кода гарантирует индекс в БД.
    """
    if crud_reward.get_reward(db, data.reward_id) is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Reward not found")

    for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
        code = data.code or generate_redemption_code()
        try:
            redemption_code = crud_code.create_redemption_code(
                db,
                reward_id=data.reward_id,
                customer_id=data.customer_id,
                code=code,
                redeemed=data.redeemed,
                created_at=data.created_at,
                expires_at=data.expires_at,
            )
        except IntegrityError:
            db.rollback()
            if data.code:
                raise ApiError(status.HTTP_409_CONFLICT, "Redemption code already exists")
            logger.warning(f"Generated redemption code collided (attempt {attempt}/{MAX_CODE_ATTEMPTS}), retrying.")
            continue

        logger.info(f"Issued redemption code {redemption_code.id} for reward {data.reward_id}, customer {data.customer_id}")
        return redemption_code

    logger.error(f"Could not generate a unique redemption code after {MAX_CODE_ATTEMPTS} attempts.")
    raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Could not generate a unique redemption code")


def redeem_code(db: Session, data: RedemptionCodeRedeem) -> RedemptionCode:
    """Гасит код ровно один раз."""
    redeemed = crud_code.mark_redeemed(db, data.code, customer_id=data.customer_id)
    if redeemed is not None:
        logger.info(f"Redemption code {redeemed.id} redeemed")
        return redeemed

    # UPDATE ничего не затронул: кода нет, он уже погашен или просрочен
    existing = crud_code.get_by_code(db, data.code)
    if existing is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Redemption code not found")
    if not existing.redeemed and existing.is_expired():
        raise ApiError(status.HTTP_409_CONFLICT, "Redemption code has expired")
    raise ApiError(status.HTTP_409_CONFLICT, "Redemption code has already been redeemed")
