# app/routers/rewards.py

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.crud import reward as crud_reward
from app.dependencies import get_db
from app.schemas.reward import RewardCreate, RewardCreated, RewardList

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rewards")


@router.get("", response_model=RewardList)
def list_rewards(business_id: uuid.UUID = Query(...), db: Session = Depends(get_db)):
    return RewardList(rewards=crud_reward.get_rewards_by_business(db, business_id))


@router.post("", response_model=RewardCreated, status_code=status.HTTP_201_CREATED)
def create_reward(payload: RewardCreate, db: Session = Depends(get_db)):
    reward = crud_reward.create_reward(db, payload)
    logger.info(f"Reward {reward.id} created for business {reward.business_id}")
    return RewardCreated(message="Reward created successfully", reward=reward)
